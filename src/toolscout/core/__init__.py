"""Core models and utilities shared across toolscout."""

from toolscout.core.models import (
    HookSystem,
    MarkerConflict,
    PackageManager,
    ToolEnvironment,
)

__all__ = [
    "HookSystem",
    "MarkerConflict",
    "PackageManager",
    "ToolEnvironment",
]
