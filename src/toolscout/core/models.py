"""Core data models for toolscout.

Tool choices are closed enumerations, one per detection category. The result
of a detection run is a :class:`ToolEnvironment`, an immutable value that is
passed explicitly to anything that builds command lines.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional, Tuple


class PackageManager(str, Enum):
    """JavaScript package managers toolscout can detect."""

    BUN = "bun"
    PNPM = "pnpm"
    YARN = "yarn"
    NPM = "npm"


class HookSystem(str, Enum):
    """Git hook frameworks toolscout can detect."""

    LEFTHOOK = "lefthook"
    PRE_COMMIT = "pre-commit"
    NONE = "none"


# Category names used in conflicts, overrides and output
CATEGORY_PACKAGE_MANAGER = "package_manager"
CATEGORY_HOOK_SYSTEM = "hook_system"


@dataclass(frozen=True)
class MarkerConflict:
    """Markers for more than one tool of the same category were present.

    The priority order still decides; this only records what was ignored.
    """

    category: str
    chosen: str
    ignored: Tuple[str, ...]

    def describe(self) -> str:
        """Human readable one-line description."""
        ignored = ", ".join(self.ignored)
        return f"{self.category}: using '{self.chosen}', ignoring markers for {ignored}"


@dataclass(frozen=True)
class ToolEnvironment:
    """Resolved tool choices for a project."""

    root: Path
    """Project root the detection ran against."""

    package_manager: PackageManager
    """Selected package manager."""

    hook_system: HookSystem
    """Selected git hook framework."""

    conflicts: Tuple[MarkerConflict, ...] = field(default_factory=tuple)
    """Categories where markers for several tools coexisted."""

    overrides: Tuple[str, ...] = field(default_factory=tuple)
    """Categories whose value came from an explicit override, not detection."""

    @property
    def has_hooks(self) -> bool:
        """Check if any hook framework is in use."""
        return self.hook_system != HookSystem.NONE

    def is_overridden(self, category: str) -> bool:
        """Check whether a category was set by an override."""
        return category in self.overrides

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a JSON-friendly dictionary."""
        return {
            "root": str(self.root),
            CATEGORY_PACKAGE_MANAGER: self.package_manager.value,
            CATEGORY_HOOK_SYSTEM: self.hook_system.value,
            "conflicts": [
                {
                    "category": conflict.category,
                    "chosen": conflict.chosen,
                    "ignored": list(conflict.ignored),
                }
                for conflict in self.conflicts
            ],
            "overrides": list(self.overrides),
        }


def parse_package_manager(value: Optional[str]) -> Optional[PackageManager]:
    """Convert a user supplied string to a PackageManager.

    Args:
        value: Name such as ``"pnpm"``; None or empty means no value.

    Returns:
        PackageManager or None.

    Raises:
        ValueError: If the name is not a known package manager.
    """
    if not value:
        return None
    try:
        return PackageManager(value.strip().lower())
    except ValueError:
        valid = ", ".join(pm.value for pm in PackageManager)
        raise ValueError(f"Unknown package manager '{value}' (expected one of: {valid})") from None


def parse_hook_system(value: Optional[str]) -> Optional[HookSystem]:
    """Convert a user supplied string to a HookSystem.

    Accepts ``pre_commit`` as an alias for ``pre-commit``.

    Raises:
        ValueError: If the name is not a known hook system.
    """
    if not value:
        return None
    normalized = value.strip().lower().replace("_", "-")
    try:
        return HookSystem(normalized)
    except ValueError:
        valid = ", ".join(hs.value for hs in HookSystem)
        raise ValueError(f"Unknown hook system '{value}' (expected one of: {valid})") from None
