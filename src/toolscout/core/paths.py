"""Path helpers for the toolscout home directory."""

from __future__ import annotations

import os
from pathlib import Path

# Default directory name under user home
DEFAULT_HOME_DIR_NAME = ".toolscout"

# Environment variable to override home directory
TOOLSCOUT_HOME_ENV = "TOOLSCOUT_HOME"


def get_toolscout_home() -> Path:
    """Get the toolscout home directory path.

    Resolution order:
    1. TOOLSCOUT_HOME environment variable (if set)
    2. ~/.toolscout (default)

    Returns:
        Path to the toolscout home directory.
    """
    env_home = os.environ.get(TOOLSCOUT_HOME_ENV)
    if env_home:
        return Path(env_home)
    return Path.home() / DEFAULT_HOME_DIR_NAME
