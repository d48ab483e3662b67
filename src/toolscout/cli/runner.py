"""CLI runner: parses arguments, loads configuration and dispatches commands."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Dict, Iterable, Optional

from toolscout.cli.arguments import build_parser
from toolscout.cli.commands import (
    ChangesetCommand,
    Command,
    DetectCommand,
    PlanCommand,
    SyncCommand,
)
from toolscout.cli.config_bridge import ConfigBridge
from toolscout.cli.exit_codes import EXIT_INVALID_USAGE, EXIT_SUCCESS
from toolscout.config import ConfigError, load_config
from toolscout.core.logging import configure_logging, get_logger

LOGGER = get_logger(__name__)


def get_version() -> str:
    """Return the installed toolscout version."""
    try:
        return version("toolscout")
    except PackageNotFoundError:
        # Fallback for editable installs that have not yet built metadata.
        from toolscout import __version__

        return __version__


class CLIRunner:
    """Runs a single toolscout CLI invocation."""

    def __init__(self) -> None:
        self.parser = build_parser()
        self.commands: Dict[str, Command] = {
            command.name: command
            for command in (DetectCommand(), PlanCommand(), ChangesetCommand(), SyncCommand())
        }

    def run(self, argv: Optional[Iterable[str]] = None) -> int:
        """Parse arguments and execute the selected command.

        Args:
            argv: Command-line arguments (defaults to sys.argv).

        Returns:
            Exit code.
        """
        argv_list = list(argv) if argv is not None else None

        try:
            args = self.parser.parse_args(argv_list)
        except SystemExit as e:
            # argparse exits 0 for --help and 2 for usage errors
            return EXIT_SUCCESS if e.code in (0, None) else EXIT_INVALID_USAGE

        # Configure logging as early as possible.
        configure_logging(debug=args.debug, verbose=args.verbose, quiet=args.quiet)

        if args.version:
            print(get_version())
            return EXIT_SUCCESS

        command = self.commands.get(args.command) if args.command else None
        if command is None:
            self.parser.print_help()
            return EXIT_SUCCESS

        project_root = Path(getattr(args, "path", ".")).resolve()
        try:
            config = load_config(
                project_root=project_root,
                cli_config_path=getattr(args, "config", None),
                cli_overrides=ConfigBridge.args_to_overrides(args),
            )
        except ConfigError as e:
            LOGGER.error(str(e))
            return EXIT_INVALID_USAGE

        LOGGER.debug(f"Running '{command.name}' with config from {config.sources}")
        return command.execute(args, config)
