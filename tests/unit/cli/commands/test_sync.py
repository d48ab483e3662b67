"""Tests for sync command."""

from __future__ import annotations

from argparse import Namespace
from pathlib import Path

from toolscout.cli.commands.sync import SyncCommand
from toolscout.cli.exit_codes import EXIT_OPERATION_FAILED, EXIT_SUCCESS
from toolscout.config.models import SyncConfig, ToolscoutConfig


def _config(targets, source: str = "commands", exclude=None) -> ToolscoutConfig:
    return ToolscoutConfig(
        sync=SyncConfig(source=source, targets=[str(t) for t in targets], exclude=exclude or [])
    )


class TestSyncCommand:
    """Tests for SyncCommand."""

    def test_command_name(self) -> None:
        assert SyncCommand().name == "sync"

    def test_syncs_to_targets(self, make_project, tmp_path: Path, capsys) -> None:
        root = make_project()
        (root / "commands").mkdir()
        (root / "commands" / "pr.md").write_text("# PR\n")
        targets = [tmp_path / "claude", tmp_path / "cursor"]

        exit_code = SyncCommand().execute(Namespace(path=str(root), dry_run=False), _config(targets))

        assert exit_code == EXIT_SUCCESS
        for target in targets:
            assert (target / "pr.md").read_text() == "# PR\n"
        out = capsys.readouterr().out
        assert out.count("Synced") == 2
        assert "(1 copied, 0 removed, 0 unchanged)" in out

    def test_dry_run(self, make_project, tmp_path: Path, capsys) -> None:
        root = make_project()
        (root / "commands").mkdir()
        (root / "commands" / "pr.md").write_text("# PR\n")
        target = tmp_path / "claude"

        SyncCommand().execute(Namespace(path=str(root), dry_run=True), _config([target]))

        assert not target.exists()
        assert "Would sync" in capsys.readouterr().out

    def test_missing_source(self, make_project, tmp_path: Path, capsys) -> None:
        root = make_project()
        exit_code = SyncCommand().execute(
            Namespace(path=str(root), dry_run=False), _config([tmp_path / "t"])
        )
        assert exit_code == EXIT_OPERATION_FAILED
        assert "Source directory not found" in capsys.readouterr().out
