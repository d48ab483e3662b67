"""Command document sync to assistant directories."""

from toolscout.sync.commands_sync import (
    DEFAULT_TARGET_DIRS,
    SyncError,
    SyncResult,
    default_targets,
    sync_commands,
    sync_directory,
)

__all__ = [
    "DEFAULT_TARGET_DIRS",
    "SyncError",
    "SyncResult",
    "default_targets",
    "sync_commands",
    "sync_directory",
]
