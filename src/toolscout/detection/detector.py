"""Environment detection.

Maps marker-file existence checks, evaluated in a fixed priority order, to a
single tool choice for each category (package manager, hook system).
Detection is read-only and never fails: a category with no markers resolves
to its default.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Sequence, Tuple, TypeVar

from toolscout.core.logging import get_logger
from toolscout.core.models import (
    CATEGORY_HOOK_SYSTEM,
    CATEGORY_PACKAGE_MANAGER,
    HookSystem,
    MarkerConflict,
    PackageManager,
    ToolEnvironment,
)
from toolscout.detection.markers import (
    DEFAULT_HOOK_SYSTEM,
    DEFAULT_PACKAGE_MANAGER,
    HOOK_SYSTEM_MARKERS,
    PACKAGE_MANAGER_MARKERS,
)

LOGGER = get_logger(__name__)

T = TypeVar("T", PackageManager, HookSystem)


def _matching_choices(
    project_root: Path,
    table: Sequence[Tuple[T, Tuple[str, ...]]],
) -> List[T]:
    """Return every choice in the table with at least one marker present, in priority order."""
    matches: List[T] = []
    for choice, markers in table:
        if any((project_root / marker).exists() for marker in markers):
            matches.append(choice)
    return matches


def detect_package_manager(project_root: Path) -> PackageManager:
    """Detect the package manager from lockfiles.

    Priority: bun > pnpm > yarn > npm; defaults to npm.

    Args:
        project_root: Project root directory.

    Returns:
        The selected package manager.
    """
    matches = _matching_choices(project_root, PACKAGE_MANAGER_MARKERS)
    return matches[0] if matches else DEFAULT_PACKAGE_MANAGER


def detect_hook_system(project_root: Path) -> HookSystem:
    """Detect the git hook framework from its config file.

    Priority: lefthook > pre-commit; defaults to none.

    Args:
        project_root: Project root directory.

    Returns:
        The selected hook system.
    """
    matches = _matching_choices(project_root, HOOK_SYSTEM_MARKERS)
    return matches[0] if matches else DEFAULT_HOOK_SYSTEM


def find_conflicts(project_root: Path) -> List[MarkerConflict]:
    """Find categories where markers for more than one tool are present.

    Args:
        project_root: Project root directory.

    Returns:
        One MarkerConflict per ambiguous category (possibly empty).
    """
    conflicts: List[MarkerConflict] = []
    categories = (
        (CATEGORY_PACKAGE_MANAGER, _matching_choices(project_root, PACKAGE_MANAGER_MARKERS)),
        (CATEGORY_HOOK_SYSTEM, _matching_choices(project_root, HOOK_SYSTEM_MARKERS)),
    )
    for category, matches in categories:
        if len(matches) > 1:
            conflicts.append(
                MarkerConflict(
                    category=category,
                    chosen=matches[0].value,
                    ignored=tuple(match.value for match in matches[1:]),
                )
            )
    return conflicts


class EnvironmentDetector:
    """Resolves a ToolEnvironment for a project directory.

    Explicit overrides replace detection for their category. The detector
    keeps no state between calls.
    """

    def __init__(
        self,
        package_manager: Optional[PackageManager] = None,
        hook_system: Optional[HookSystem] = None,
    ):
        """Initialize EnvironmentDetector.

        Args:
            package_manager: Optional package manager override.
            hook_system: Optional hook system override.
        """
        self._package_manager_override = package_manager
        self._hook_system_override = hook_system

    def detect(self, project_root: Path) -> ToolEnvironment:
        """Detect tool choices for a project.

        Args:
            project_root: Path to the project root directory.

        Returns:
            ToolEnvironment with one choice per category.
        """
        project_root = project_root.resolve()
        overrides: List[str] = []

        if self._package_manager_override is not None:
            package_manager = self._package_manager_override
            overrides.append(CATEGORY_PACKAGE_MANAGER)
            LOGGER.debug(f"Package manager overridden: {package_manager.value}")
        else:
            package_manager = detect_package_manager(project_root)

        if self._hook_system_override is not None:
            hook_system = self._hook_system_override
            overrides.append(CATEGORY_HOOK_SYSTEM)
            LOGGER.debug(f"Hook system overridden: {hook_system.value}")
        else:
            hook_system = detect_hook_system(project_root)

        # Overridden categories are not ambiguous
        conflicts = [c for c in find_conflicts(project_root) if c.category not in overrides]
        for conflict in conflicts:
            LOGGER.warning(f"Ambiguous markers in {project_root}: {conflict.describe()}")

        LOGGER.info(
            f"Detected package manager '{package_manager.value}' and "
            f"hook system '{hook_system.value}' in {project_root}"
        )

        return ToolEnvironment(
            root=project_root,
            package_manager=package_manager,
            hook_system=hook_system,
            conflicts=tuple(conflicts),
            overrides=tuple(overrides),
        )


def detect_environment(project_root: Path) -> ToolEnvironment:
    """Detect a ToolEnvironment without overrides."""
    return EnvironmentDetector().detect(project_root)
