"""Changeset files.

A changeset is a Markdown file in ``.changeset/`` with a YAML front matter
block mapping package identifiers to a bump level, followed by a freeform
summary::

    ---
    "@acme/ui": minor
    "acme-cli": patch
    ---

    Add dark mode toggle.
"""

from __future__ import annotations

import hashlib
import json
import re
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional

import yaml

from toolscout.core.logging import get_logger

LOGGER = get_logger(__name__)

DEFAULT_CHANGESET_DIR = ".changeset"
CHANGESET_README = "README.md"

FRONT_MATTER_PATTERN = re.compile(r"\A---[ \t]*\r?\n(.*?)^---[ \t]*(?:\r?\n|\Z)(.*)\Z", re.DOTALL | re.MULTILINE)
SLUG_PATTERN = re.compile(r"[^a-z0-9]+")
MAX_SLUG_WORDS = 5


class ChangesetError(Exception):
    """Changeset parsing or writing error."""

    pass


class Bump(str, Enum):
    """Semantic version bump levels."""

    MAJOR = "major"
    MINOR = "minor"
    PATCH = "patch"


def parse_bump(value: str) -> Bump:
    """Convert a string to a Bump.

    Raises:
        ChangesetError: If the value is not major, minor or patch.
    """
    try:
        return Bump(str(value).strip().lower())
    except ValueError:
        raise ChangesetError(
            f"Invalid bump '{value}' (expected one of: major, minor, patch)"
        ) from None


@dataclass
class Changeset:
    """A pending release-note entry."""

    releases: Dict[str, Bump] = field(default_factory=dict)
    summary: str = ""

    def validate(self) -> None:
        """Check the changeset can be written.

        Raises:
            ChangesetError: If no packages are listed or a name is empty.
        """
        if not self.releases:
            raise ChangesetError("A changeset must list at least one package")
        for name in self.releases:
            if not name or not name.strip():
                raise ChangesetError("Package names must not be empty")

    def render(self) -> str:
        """Serialize to the changeset file format."""
        self.validate()
        lines = ["---"]
        for name, bump in self.releases.items():
            # JSON strings are valid YAML double-quoted scalars
            lines.append(f"{json.dumps(name, ensure_ascii=False)}: {bump.value}")
        lines.append("---")
        lines.append("")
        lines.append(self.summary.strip())
        return "\n".join(lines) + "\n"

    @property
    def highest_bump(self) -> Bump:
        """The most significant bump among all releases."""
        self.validate()
        order = [Bump.PATCH, Bump.MINOR, Bump.MAJOR]
        return max(self.releases.values(), key=order.index)


def parse_changeset(text: str, source: str = "<string>") -> Changeset:
    """Parse changeset file contents.

    Args:
        text: File contents.
        source: Name used in error messages.

    Returns:
        Parsed Changeset.

    Raises:
        ChangesetError: On missing or malformed front matter or unknown bumps.
    """
    match = FRONT_MATTER_PATTERN.match(text)
    if not match:
        raise ChangesetError(f"{source}: missing '---' front matter block")

    front_matter, body = match.group(1), match.group(2)
    try:
        data = yaml.safe_load(front_matter)
    except yaml.YAMLError as e:
        raise ChangesetError(f"{source}: invalid front matter: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ChangesetError(
            f"{source}: front matter must be a mapping, got {type(data).__name__}"
        )

    releases = {str(name): parse_bump(bump) for name, bump in data.items()}
    changeset = Changeset(releases=releases, summary=body.strip())
    try:
        changeset.validate()
    except ChangesetError as e:
        raise ChangesetError(f"{source}: {e}") from e
    return changeset


def generate_name(changeset: Changeset) -> str:
    """Generate a file name (without extension) for a changeset.

    Combines a slug of the first words of the summary with a short hash of
    the rendered content, so identical changesets get identical names.
    """
    words = SLUG_PATTERN.sub(" ", changeset.summary.lower()).split()
    slug = "-".join(words[:MAX_SLUG_WORDS]) or "changeset"
    digest = hashlib.sha1(changeset.render().encode("utf-8")).hexdigest()[:8]
    return f"{slug}-{digest}"


def write_changeset(
    project_root: Path,
    changeset: Changeset,
    name: Optional[str] = None,
    directory: str = DEFAULT_CHANGESET_DIR,
) -> Path:
    """Write a changeset file into the project's changeset directory.

    Args:
        project_root: Project root directory.
        changeset: Changeset to write.
        name: Optional file name without extension.
        directory: Changeset directory relative to the project root.

    Returns:
        Path of the written file.

    Raises:
        ChangesetError: If the changeset is invalid or the file already exists.
    """
    content = changeset.render()
    file_name = f"{name or generate_name(changeset)}.md"
    changeset_dir = project_root / directory
    path = changeset_dir / file_name

    changeset_dir.mkdir(parents=True, exist_ok=True)
    try:
        with path.open("x", encoding="utf-8") as f:
            f.write(content)
    except FileExistsError as e:
        raise ChangesetError(f"Changeset already exists: {path}") from e
    LOGGER.info(f"Wrote changeset {path}")
    return path


def read_changesets(
    project_root: Path,
    directory: str = DEFAULT_CHANGESET_DIR,
) -> List[tuple[str, Changeset]]:
    """Read all pending changesets.

    Args:
        project_root: Project root directory.
        directory: Changeset directory relative to the project root.

    Returns:
        List of (name, Changeset) sorted by name. Empty if the directory
        does not exist.

    Raises:
        ChangesetError: If any changeset file is malformed.
    """
    changeset_dir = project_root / directory
    if not changeset_dir.is_dir():
        LOGGER.debug(f"No changeset directory at {changeset_dir}")
        return []

    changesets = []
    for path in sorted(changeset_dir.glob("*.md")):
        if path.name == CHANGESET_README:
            continue
        text = path.read_text(encoding="utf-8")
        changesets.append((path.stem, parse_changeset(text, source=str(path))))
    return changesets
