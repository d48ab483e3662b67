"""Logging helpers for toolscout.

All modules obtain their logger through :func:`get_logger` so that a single
call to :func:`configure_logging` from the CLI controls verbosity everywhere.
Log records go to stderr; stdout is reserved for command output.
"""

from __future__ import annotations

import logging
import sys

ROOT_LOGGER_NAME = "toolscout"
LOG_FORMAT = "%(levelname)s [%(name)s] %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a logger namespaced under the toolscout root logger.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        Logger instance.
    """
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(
    debug: bool = False,
    verbose: bool = False,
    quiet: bool = False,
) -> None:
    """Configure the toolscout root logger.

    Precedence: debug > verbose > quiet > default (warnings).

    Args:
        debug: Enable DEBUG level.
        verbose: Enable INFO level.
        quiet: Only show errors.
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)

    # Replace our own handler on repeated calls (tests call main() many times)
    for handler in list(root.handlers):
        if getattr(handler, "_toolscout_handler", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._toolscout_handler = True  # type: ignore[attr-defined]
    root.addHandler(handler)
