"""toolscout CLI package.

This package provides the command-line interface for toolscout.
"""

from __future__ import annotations

from typing import Iterable, Optional

from toolscout.cli.runner import CLIRunner, get_version
from toolscout.cli.arguments import build_parser
from toolscout.cli.exit_codes import (
    EXIT_SUCCESS,
    EXIT_OPERATION_FAILED,
    EXIT_INVALID_USAGE,
)


def main(argv: Optional[Iterable[str]] = None) -> int:
    """CLI entrypoint.

    Returns an exit code suitable for use as a console script.

    Args:
        argv: Command-line arguments (defaults to sys.argv).

    Returns:
        Exit code.
    """
    runner = CLIRunner()
    return runner.run(argv)


__all__ = [
    "main",
    "build_parser",
    "get_version",
    "CLIRunner",
    "EXIT_SUCCESS",
    "EXIT_OPERATION_FAILED",
    "EXIT_INVALID_USAGE",
]


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
