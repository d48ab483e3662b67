"""Command generation module.

This module provides builders for:
- Package manager install and script commands
- Hook framework installation
- Changeset CLI invocations
"""

from toolscout.generation.commands import (
    CommandBuilder,
    KNOWN_SCRIPTS,
    PlannedCommand,
    format_command,
)

__all__ = [
    "CommandBuilder",
    "KNOWN_SCRIPTS",
    "PlannedCommand",
    "format_command",
]
