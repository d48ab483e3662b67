"""Changeset command implementation.

Writes and lists changeset entries in the project's changeset directory.
Missing values are prompted for interactively unless --non-interactive.
"""

from __future__ import annotations

from argparse import Namespace
from pathlib import Path
from typing import TYPE_CHECKING, Dict, List, Optional

if TYPE_CHECKING:
    from toolscout.config.models import ToolscoutConfig

import questionary
from questionary import Style

from toolscout.changesets import (
    Bump,
    Changeset,
    ChangesetError,
    parse_bump,
    read_changesets,
    write_changeset,
)
from toolscout.cli.commands import Command
from toolscout.cli.commands.detect import resolve_environment
from toolscout.cli.exit_codes import (
    EXIT_INVALID_USAGE,
    EXIT_OPERATION_FAILED,
    EXIT_SUCCESS,
)
from toolscout.config.loader import get_default_config
from toolscout.core.logging import get_logger
from toolscout.generation import CommandBuilder, format_command

LOGGER = get_logger(__name__)

# Custom questionary style
STYLE = Style([
    ("qmark", "fg:cyan bold"),
    ("question", "bold"),
    ("answer", "fg:cyan"),
    ("pointer", "fg:cyan bold"),
    ("highlighted", "fg:cyan bold"),
    ("selected", "fg:green"),
    ("separator", "fg:gray"),
    ("instruction", "fg:gray"),
])


def parse_package_args(values: List[str]) -> Dict[str, Bump]:
    """Parse ``NAME:BUMP`` arguments.

    The last colon separates the bump so scoped names work.

    Raises:
        ChangesetError: If an entry has no bump or an invalid one.
    """
    releases: Dict[str, Bump] = {}
    for value in values:
        name, sep, bump = value.rpartition(":")
        if not sep or not name.strip():
            raise ChangesetError(f"Expected NAME:BUMP, got '{value}'")
        releases[name.strip()] = parse_bump(bump)
    return releases


class ChangesetCommand(Command):
    """Creates and lists changesets."""

    @property
    def name(self) -> str:
        """Command identifier."""
        return "changeset"

    def execute(self, args: Namespace, config: "ToolscoutConfig | None" = None) -> int:
        """Execute the changeset command.

        Args:
            args: Parsed command-line arguments.
            config: Optional toolscout configuration.

        Returns:
            Exit code.
        """
        config = config or get_default_config()
        action = getattr(args, "changeset_action", None)

        if action == "add":
            return self._add(args, config)
        if action == "list":
            return self._list(args, config)

        print("Usage: toolscout changeset {add,list}")
        return EXIT_INVALID_USAGE

    def _add(self, args: Namespace, config: "ToolscoutConfig") -> int:
        project_root = Path(args.path).resolve()
        if not project_root.is_dir():
            LOGGER.error(f"Not a directory: {project_root}")
            return EXIT_INVALID_USAGE

        try:
            releases = parse_package_args(args.packages or [])
        except ChangesetError as e:
            LOGGER.error(str(e))
            return EXIT_INVALID_USAGE
        summary = args.summary

        if not releases or not summary:
            if args.non_interactive:
                LOGGER.error("--package and --summary are required with --non-interactive")
                return EXIT_INVALID_USAGE
            prompted = self._prompt(releases, summary)
            if prompted is None:
                print("Aborted.")
                return EXIT_SUCCESS
            releases, summary = prompted

        changeset = Changeset(releases=releases, summary=summary)
        try:
            path = write_changeset(
                project_root,
                changeset,
                name=args.name,
                directory=config.changesets.directory,
            )
        except ChangesetError as e:
            LOGGER.error(str(e))
            return EXIT_OPERATION_FAILED
        except OSError as e:
            LOGGER.error(f"Failed to write changeset: {e}")
            return EXIT_OPERATION_FAILED

        print(f"Created {path}")
        environment = resolve_environment(project_root, config)
        if environment is not None:
            version_command = CommandBuilder(environment).changeset_version()
            print(f"Release with: {format_command(version_command)}")
        return EXIT_SUCCESS

    def _prompt(
        self,
        releases: Dict[str, Bump],
        summary: Optional[str],
    ) -> Optional[tuple[Dict[str, Bump], str]]:
        """Ask for missing packages and summary. Returns None if cancelled."""
        releases = dict(releases)
        if not releases:
            names = questionary.text(
                "Which packages changed? (comma separated)",
                style=STYLE,
            ).ask()
            if not names:
                return None
            for package in [n.strip() for n in names.split(",") if n.strip()]:
                bump = questionary.select(
                    f"Bump for {package}:",
                    choices=[b.value for b in Bump],
                    default=Bump.PATCH.value,
                    style=STYLE,
                ).ask()
                if bump is None:
                    return None
                releases[package] = Bump(bump)
            if not releases:
                return None

        if not summary:
            summary = questionary.text("Summary:", style=STYLE).ask()
            if not summary:
                return None

        return releases, summary

    def _list(self, args: Namespace, config: "ToolscoutConfig") -> int:
        project_root = Path(args.path).resolve()
        try:
            changesets = read_changesets(project_root, directory=config.changesets.directory)
        except ChangesetError as e:
            LOGGER.error(str(e))
            return EXIT_OPERATION_FAILED

        if not changesets:
            print("No pending changesets.")
            return EXIT_SUCCESS

        for name, changeset in changesets:
            packages = ", ".join(
                f"{package} ({bump.value})" for package, bump in changeset.releases.items()
            )
            print(f"{name}: {packages}")
            first_line = changeset.summary.splitlines()[0] if changeset.summary else ""
            if first_line:
                print(f"  {first_line}")
        return EXIT_SUCCESS
