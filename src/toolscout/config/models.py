"""Configuration data models for toolscout.

Defines typed configuration classes that represent .toolscout.yml structure.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from toolscout.changesets.changeset import DEFAULT_CHANGESET_DIR
from toolscout.sync.commands_sync import default_targets

DEFAULT_SYNC_SOURCE = "commands"


@dataclass
class SyncConfig:
    """Command document sync configuration."""

    source: str = DEFAULT_SYNC_SOURCE  # Relative to the project root
    targets: List[str] = field(default_factory=list)  # Empty = default assistant dirs
    exclude: List[str] = field(default_factory=list)  # Gitignore-style patterns

    def resolve_source(self, project_root: Path) -> Path:
        """Resolve the source directory against the project root."""
        source = Path(self.source).expanduser()
        if not source.is_absolute():
            source = project_root / source
        return source

    def resolve_targets(self) -> List[Path]:
        """Resolve target directories, falling back to the defaults."""
        if not self.targets:
            return default_targets()
        return [Path(target).expanduser() for target in self.targets]


@dataclass
class ChangesetConfig:
    """Changeset file configuration."""

    directory: str = DEFAULT_CHANGESET_DIR


@dataclass
class ToolscoutConfig:
    """Complete toolscout configuration."""

    # Explicit tool overrides; None = detect from marker files
    package_manager: Optional[str] = None
    hook_system: Optional[str] = None

    sync: SyncConfig = field(default_factory=SyncConfig)
    changesets: ChangesetConfig = field(default_factory=ChangesetConfig)

    # Track config sources for debugging
    _config_sources: List[str] = field(default_factory=list, repr=False)

    @property
    def sources(self) -> List[str]:
        """Where this configuration was loaded from."""
        return list(self._config_sources)
