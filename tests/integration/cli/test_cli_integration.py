"""Integration tests for the toolscout CLI.

These tests run full CLI invocations against temporary project directories.
"""

from __future__ import annotations

import json
import tempfile
from pathlib import Path

import pytest

from toolscout import cli
from toolscout.changesets import Bump, read_changesets
from toolscout.cli.exit_codes import EXIT_INVALID_USAGE, EXIT_OPERATION_FAILED, EXIT_SUCCESS

pytestmark = pytest.mark.integration


class TestDetectIntegration:
    """End-to-end tests for `toolscout detect`."""

    def test_detect_json(self, capsys) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            root = Path(tmpdir)
            (root / "pnpm-lock.yaml").write_text("lockfileVersion: '9.0'\n")
            (root / ".pre-commit-config.yaml").write_text("repos: []\n")

            exit_code = cli.main(["detect", str(root), "--format", "json"])

            assert exit_code == EXIT_SUCCESS
            data = json.loads(capsys.readouterr().out)
            assert data["package_manager"] == "pnpm"
            assert data["hook_system"] == "pre-commit"

    def test_cli_override_beats_project_config(self, capsys) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            root = Path(tmpdir)
            (root / "yarn.lock").write_text("")
            (root / ".toolscout.yml").write_text("package_manager: pnpm\n")

            cli.main(["detect", str(root), "--format", "json", "--package-manager", "bun"])

            data = json.loads(capsys.readouterr().out)
            assert data["package_manager"] == "bun"
            assert data["overrides"] == ["package_manager"]

    def test_project_config_override(self, capsys) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            root = Path(tmpdir)
            (root / "yarn.lock").write_text("")
            (root / ".toolscout.yml").write_text("package_manager: pnpm\n")

            cli.main(["detect", str(root), "--format", "json"])

            assert json.loads(capsys.readouterr().out)["package_manager"] == "pnpm"

    def test_invalid_config_override(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            root = Path(tmpdir)
            (root / ".toolscout.yml").write_text("hook_system: husky\n")

            assert cli.main(["detect", str(root)]) == EXIT_INVALID_USAGE


class TestPlanIntegration:
    """End-to-end tests for `toolscout plan`."""

    def test_bootstrap_for_bun_and_lefthook(self, capsys) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            root = Path(tmpdir)
            (root / "bun.lock").write_text("")
            (root / ".lefthook.yml").write_text("pre-commit: {}\n")

            exit_code = cli.main(["plan", str(root), "--only", "bootstrap"])

            assert exit_code == EXIT_SUCCESS
            out = capsys.readouterr().out
            assert "$ bun install" in out
            assert "$ bun run lefthook:install" in out


class TestChangesetIntegration:
    """End-to-end tests for `toolscout changeset`."""

    def test_add_then_list(self, capsys) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            root = Path(tmpdir)

            exit_code = cli.main([
                "changeset", "add", str(root),
                "--package", "@acme/ui:minor",
                "--package", "acme-cli:patch",
                "--summary", "Add dark mode toggle.",
                "--non-interactive",
            ])
            assert exit_code == EXIT_SUCCESS

            [(_, changeset)] = read_changesets(root)
            assert changeset.releases == {"@acme/ui": Bump.MINOR, "acme-cli": Bump.PATCH}

            capsys.readouterr()
            assert cli.main(["changeset", "list", str(root)]) == EXIT_SUCCESS
            assert "@acme/ui (minor), acme-cli (patch)" in capsys.readouterr().out


class TestSyncIntegration:
    """End-to-end tests for `toolscout sync`."""

    def test_sync_with_config_and_flags(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            root = Path(tmpdir) / "repo"
            (root / "commands").mkdir(parents=True)
            (root / "commands" / "bootstrap.md").write_text("# Bootstrap\n")
            (root / "commands" / "draft.md").write_text("# Draft\n")
            config_target = Path(tmpdir) / "from-config"
            (root / ".toolscout.yml").write_text(
                f"sync:\n  targets:\n    - {config_target}\n  exclude:\n    - draft.md\n"
            )

            assert cli.main(["sync", str(root)]) == EXIT_SUCCESS
            assert (config_target / "bootstrap.md").exists()
            assert not (config_target / "draft.md").exists()

            flag_target = Path(tmpdir) / "from-flag"
            assert cli.main(["sync", str(root), "--target", str(flag_target)]) == EXIT_SUCCESS
            assert (flag_target / "bootstrap.md").exists()

    def test_sync_missing_source(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            root = Path(tmpdir)
            exit_code = cli.main(["sync", str(root), "--target", str(root / "out")])
            assert exit_code == EXIT_OPERATION_FAILED
