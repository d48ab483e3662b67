"""CLI commands package.

This module provides the base Command class and exports all command implementations.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from argparse import Namespace
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from toolscout.config.models import ToolscoutConfig


class Command(ABC):
    """Base class for CLI commands.

    All CLI commands should inherit from this class and implement
    the execute method.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Command identifier.

        Returns:
            String name of the command.
        """

    @abstractmethod
    def execute(self, args: Namespace, config: "ToolscoutConfig | None" = None) -> int:
        """Execute the command.

        Args:
            args: Parsed command-line arguments.
            config: Optional toolscout configuration.

        Returns:
            Exit code (0 for success, non-zero for error).
        """


# Import command implementations for convenience
# ruff: noqa: E402
from toolscout.cli.commands.detect import DetectCommand
from toolscout.cli.commands.plan import PlanCommand
from toolscout.cli.commands.changeset import ChangesetCommand
from toolscout.cli.commands.sync import SyncCommand

__all__ = [
    "Command",
    "DetectCommand",
    "PlanCommand",
    "ChangesetCommand",
    "SyncCommand",
]
