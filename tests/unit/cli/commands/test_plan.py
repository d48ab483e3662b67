"""Tests for plan command."""

from __future__ import annotations

from argparse import Namespace
from pathlib import Path

from toolscout.cli.commands.plan import PlanCommand
from toolscout.cli.exit_codes import EXIT_INVALID_USAGE, EXIT_SUCCESS


def _args(path: Path, only: str = "all") -> Namespace:
    return Namespace(path=str(path), only=only)


class TestPlanCommand:
    """Tests for PlanCommand."""

    def test_command_name(self) -> None:
        assert PlanCommand().name == "plan"

    def test_bootstrap_plan(self, make_project, capsys) -> None:
        root = make_project("pnpm-lock.yaml", "lefthook.yml")
        assert PlanCommand().execute(_args(root, "bootstrap")) == EXIT_SUCCESS
        out = capsys.readouterr().out
        assert "Bootstrap:" in out
        assert "$ pnpm install" in out
        assert "$ pnpm run lefthook:install" in out
        assert "$ pnpm run ruler:apply" in out
        assert "Verify:" not in out

    def test_verify_plan(self, make_project, capsys) -> None:
        root = make_project("yarn.lock")
        PlanCommand().execute(_args(root, "verify"))
        out = capsys.readouterr().out
        assert "Bootstrap:" not in out
        for script in ["ruler:check", "check", "format", "lint", "test"]:
            assert f"$ yarn run {script}" in out

    def test_all_with_pre_commit(self, make_project, capsys) -> None:
        root = make_project(".pre-commit-config.yaml")
        PlanCommand().execute(_args(root))
        out = capsys.readouterr().out
        assert "$ pre-commit install" in out
        assert "Bootstrap:" in out and "Verify:" in out

    def test_missing_directory(self, tmp_path: Path) -> None:
        assert PlanCommand().execute(_args(tmp_path / "nope")) == EXIT_INVALID_USAGE
