"""Marker file tables.

Each table is ordered by priority: the first entry whose markers exist in the
project root wins. The last entry of each category is its default.
"""

from __future__ import annotations

from typing import Tuple

from toolscout.core.models import HookSystem, PackageManager

# Package manager lockfiles, highest priority first
PACKAGE_MANAGER_MARKERS: Tuple[Tuple[PackageManager, Tuple[str, ...]], ...] = (
    (PackageManager.BUN, ("bun.lockb", "bun.lock")),
    (PackageManager.PNPM, ("pnpm-lock.yaml",)),
    (PackageManager.YARN, ("yarn.lock",)),
    (PackageManager.NPM, ("package-lock.json",)),
)

DEFAULT_PACKAGE_MANAGER = PackageManager.NPM

# Hook framework config files, highest priority first
HOOK_SYSTEM_MARKERS: Tuple[Tuple[HookSystem, Tuple[str, ...]], ...] = (
    (HookSystem.LEFTHOOK, ("lefthook.yml", ".lefthook.yml")),
    (HookSystem.PRE_COMMIT, (".pre-commit-config.yaml",)),
)

DEFAULT_HOOK_SYSTEM = HookSystem.NONE


def all_marker_names() -> Tuple[str, ...]:
    """Every marker filename toolscout looks for, in priority order."""
    names = [marker for _, markers in PACKAGE_MANAGER_MARKERS for marker in markers]
    names.extend(marker for _, markers in HOOK_SYSTEM_MARKERS for marker in markers)
    return tuple(names)
