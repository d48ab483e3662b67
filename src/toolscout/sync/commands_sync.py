"""Command document sync.

Mirrors a directory of agent command documents into each assistant's
command directory. Behaves like ``rsync -a --delete``: new and changed
files are copied with their metadata, and anything in the target that is
not in the source is removed. Targets are processed in order and the sync
stops at the first target that fails.
"""

from __future__ import annotations

import filecmp
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

import pathspec

from toolscout.core.logging import get_logger

LOGGER = get_logger(__name__)

# Assistant command directories, relative to the user's home
DEFAULT_TARGET_DIRS = (
    ".cursor/commands",
    ".claude/commands",
    ".codex/prompts",
    ".config/opencode/command",
    ".config/amp/commands",
    ".kilocode/workflows",
)


class SyncError(Exception):
    """Command sync failure."""

    pass


@dataclass
class SyncResult:
    """Outcome of syncing one target directory."""

    target: Path
    copied: List[str] = field(default_factory=list)
    removed: List[str] = field(default_factory=list)
    unchanged: List[str] = field(default_factory=list)

    @property
    def changed(self) -> bool:
        """Check if the target was modified (or would be, in a dry run)."""
        return bool(self.copied or self.removed)


def default_targets(home: Optional[Path] = None) -> List[Path]:
    """Resolve DEFAULT_TARGET_DIRS against the user's home directory."""
    base = home if home is not None else Path.home()
    return [base / relative for relative in DEFAULT_TARGET_DIRS]


def _build_spec(exclude: Iterable[str]) -> Optional[pathspec.PathSpec]:
    patterns = [p for p in exclude if p]
    if not patterns:
        return None
    return pathspec.GitIgnoreSpec.from_lines(patterns)


def _is_excluded(spec: Optional[pathspec.PathSpec], relative: str) -> bool:
    if spec is None:
        return False
    return spec.match_file(relative.replace("\\", "/"))


def _list_tree(root: Path, spec: Optional[pathspec.PathSpec]) -> tuple[List[str], List[str]]:
    """Return (files, directories) under root as sorted POSIX relative paths."""
    files: List[str] = []
    dirs: List[str] = []
    for path in sorted(root.rglob("*")):
        relative = path.relative_to(root).as_posix()
        is_dir = path.is_dir() and not path.is_symlink()
        # Trailing slash lets directory-only patterns ("drafts/") match
        if _is_excluded(spec, f"{relative}/" if is_dir else relative):
            continue
        if is_dir:
            dirs.append(relative)
        else:
            files.append(relative)
    return files, dirs


def sync_directory(
    source: Path,
    target: Path,
    exclude: Sequence[str] = (),
    dry_run: bool = False,
) -> SyncResult:
    """Mirror source into a single target directory.

    Args:
        source: Directory holding the command documents.
        target: Directory to mirror into.
        exclude: Gitignore-style patterns of paths to skip.
        dry_run: Report what would change without touching the target.

    Returns:
        SyncResult for the target.

    Raises:
        OSError: If the target cannot be created or written.
    """
    spec = _build_spec(exclude)
    result = SyncResult(target=target)

    source_files, source_dirs = _list_tree(source, spec)

    if not dry_run:
        target.mkdir(parents=True, exist_ok=True)
        for relative in source_dirs:
            dst = target / relative
            if dst.is_symlink() or (dst.exists() and not dst.is_dir()):
                dst.unlink()
            dst.mkdir(parents=True, exist_ok=True)

    for relative in source_files:
        src = source / relative
        dst = target / relative
        if dst.is_file() and filecmp.cmp(src, dst, shallow=False):
            result.unchanged.append(relative)
            continue
        if not dry_run:
            if dst.is_dir():
                shutil.rmtree(dst)
            dst.parent.mkdir(parents=True, exist_ok=True)
            shutil.copy2(src, dst)
        result.copied.append(relative)

    if target.is_dir():
        source_entries = set(source_files) | set(source_dirs)
        target_files, target_dirs = _list_tree(target, spec)
        # Everything still in the target afterwards, excluded entries included
        remaining = {p.relative_to(target).as_posix() for p in target.rglob("*")}
        for relative in target_files:
            if relative not in source_entries:
                if not dry_run:
                    (target / relative).unlink()
                remaining.discard(relative)
                result.removed.append(relative)
        # Deepest directories first so parents are empty when reached
        for relative in sorted(target_dirs, key=lambda d: d.count("/"), reverse=True):
            if relative in source_entries:
                continue
            prefix = relative + "/"
            if any(entry.startswith(prefix) for entry in remaining):
                # Still holds excluded entries
                continue
            if not dry_run:
                (target / relative).rmdir()
            remaining.discard(relative)
            result.removed.append(prefix)

    return result


def sync_commands(
    source: Path,
    targets: Sequence[Path],
    exclude: Sequence[str] = (),
    dry_run: bool = False,
) -> List[SyncResult]:
    """Mirror a command document directory into every target.

    Args:
        source: Directory holding the command documents.
        targets: Target directories, processed in order.
        exclude: Gitignore-style patterns of paths to skip.
        dry_run: Report what would change without touching any target.

    Returns:
        One SyncResult per target.

    Raises:
        SyncError: If the source is missing or a target fails. Targets after
            the failing one are not attempted.
    """
    if not source.is_dir():
        raise SyncError(f"Source directory not found: {source}")

    results: List[SyncResult] = []
    for target in targets:
        target = target.expanduser()
        try:
            result = sync_directory(source, target, exclude=exclude, dry_run=dry_run)
        except OSError as e:
            LOGGER.error(f"Failed syncing {source} -> {target}: {e}")
            raise SyncError(f"Failed syncing {source} -> {target}: {e}") from e
        LOGGER.info(
            f"Synced {source} -> {target} "
            f"({len(result.copied)} copied, {len(result.removed)} removed)"
        )
        results.append(result)
    return results
