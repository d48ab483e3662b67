"""Sync command implementation."""

from __future__ import annotations

from argparse import Namespace
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from toolscout.config.models import ToolscoutConfig

from toolscout.cli.commands import Command
from toolscout.cli.exit_codes import EXIT_OPERATION_FAILED, EXIT_SUCCESS
from toolscout.config.loader import get_default_config
from toolscout.sync import SyncError, sync_commands


class SyncCommand(Command):
    """Mirrors command documents into assistant command directories."""

    @property
    def name(self) -> str:
        """Command identifier."""
        return "sync"

    def execute(self, args: Namespace, config: "ToolscoutConfig | None" = None) -> int:
        """Execute the sync command.

        Args:
            args: Parsed command-line arguments.
            config: Optional toolscout configuration (sync section).

        Returns:
            Exit code.
        """
        config = config or get_default_config()
        project_root = Path(args.path).resolve()
        source = config.sync.resolve_source(project_root)
        targets = config.sync.resolve_targets()
        dry_run = getattr(args, "dry_run", False)

        try:
            results = sync_commands(
                source,
                targets,
                exclude=config.sync.exclude,
                dry_run=dry_run,
            )
        except SyncError as e:
            print(f"Error: {e}")
            return EXIT_OPERATION_FAILED

        prefix = "Would sync" if dry_run else "Synced"
        for result in results:
            print(
                f"{prefix} {source} -> {result.target} "
                f"({len(result.copied)} copied, {len(result.removed)} removed, "
                f"{len(result.unchanged)} unchanged)"
            )
        return EXIT_SUCCESS
