"""Environment detection module.

Determines which package manager and which git hook framework a project
uses by checking for marker files in a fixed priority order.
"""

from toolscout.detection.detector import (
    EnvironmentDetector,
    detect_environment,
    detect_hook_system,
    detect_package_manager,
    find_conflicts,
)
from toolscout.detection.markers import (
    DEFAULT_HOOK_SYSTEM,
    DEFAULT_PACKAGE_MANAGER,
    HOOK_SYSTEM_MARKERS,
    PACKAGE_MANAGER_MARKERS,
    all_marker_names,
)

__all__ = [
    "EnvironmentDetector",
    "detect_environment",
    "detect_hook_system",
    "detect_package_manager",
    "find_conflicts",
    "DEFAULT_HOOK_SYSTEM",
    "DEFAULT_PACKAGE_MANAGER",
    "HOOK_SYSTEM_MARKERS",
    "PACKAGE_MANAGER_MARKERS",
    "all_marker_names",
]
