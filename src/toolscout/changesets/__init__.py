"""Changeset file support."""

from toolscout.changesets.changeset import (
    Bump,
    Changeset,
    ChangesetError,
    DEFAULT_CHANGESET_DIR,
    generate_name,
    parse_bump,
    parse_changeset,
    read_changesets,
    write_changeset,
)

__all__ = [
    "Bump",
    "Changeset",
    "ChangesetError",
    "DEFAULT_CHANGESET_DIR",
    "generate_name",
    "parse_bump",
    "parse_changeset",
    "read_changesets",
    "write_changeset",
]
