"""Tests for CLI argument parsing and dispatch."""

from __future__ import annotations

import argparse
from pathlib import Path
from unittest.mock import patch

from toolscout.cli import build_parser, get_version
from toolscout.cli.config_bridge import ConfigBridge
from toolscout.cli.exit_codes import EXIT_INVALID_USAGE, EXIT_SUCCESS
from toolscout.cli.runner import CLIRunner
from toolscout.config.models import ToolscoutConfig
from toolscout.core.models import HookSystem, PackageManager


class TestBuildParser:
    """Tests for CLI argument parser."""

    def test_global_flags(self) -> None:
        parser = build_parser()
        assert isinstance(parser, argparse.ArgumentParser)
        for flag in ["--version", "--debug", "--verbose", "--quiet"]:
            assert any(flag in a.option_strings for a in parser._actions)

    def test_detect_defaults(self) -> None:
        args = build_parser().parse_args(["detect"])
        assert args.command == "detect"
        assert args.path == "."
        assert args.format == "text"
        assert args.package_manager is None

    def test_sync_repeated_options(self) -> None:
        args = build_parser().parse_args(
            ["sync", "--target", "/a", "--target", "/b", "--exclude", "*.tmp", "--dry-run"]
        )
        assert args.targets == ["/a", "/b"]
        assert args.exclude == ["*.tmp"]
        assert args.dry_run is True

    def test_changeset_add(self) -> None:
        args = build_parser().parse_args(
            ["changeset", "add", "--package", "@a/b:minor", "--summary", "Hi"]
        )
        assert args.changeset_action == "add"
        assert args.packages == ["@a/b:minor"]


class TestConfigBridge:
    """Tests for ConfigBridge."""

    def test_only_explicit_flags_become_overrides(self) -> None:
        args = build_parser().parse_args(["detect"])
        assert ConfigBridge.args_to_overrides(args) == {}

    def test_override_flags(self) -> None:
        args = build_parser().parse_args(
            ["plan", "--package-manager", "yarn", "--hook-system", "pre-commit"]
        )
        assert ConfigBridge.args_to_overrides(args) == {
            "package_manager": "yarn",
            "hook_system": "pre-commit",
        }

    def test_sync_flags(self) -> None:
        args = build_parser().parse_args(["sync", "--source", "cmds", "--target", "/t"])
        assert ConfigBridge.args_to_overrides(args) == {
            "sync": {"source": "cmds", "targets": ["/t"]},
        }

    def test_build_detector_from_config(self, make_project) -> None:
        config = ToolscoutConfig(package_manager="bun", hook_system="pre_commit")
        env = ConfigBridge.build_detector(config).detect(make_project("yarn.lock"))
        assert env.package_manager == PackageManager.BUN
        assert env.hook_system == HookSystem.PRE_COMMIT


class TestCLIRunner:
    """Tests for CLIRunner.run."""

    def test_help_exits_successfully(self, capsys) -> None:
        assert CLIRunner().run(["--help"]) == EXIT_SUCCESS
        assert "usage:" in capsys.readouterr().out.lower()

    def test_no_command_prints_help(self, capsys) -> None:
        assert CLIRunner().run([]) == EXIT_SUCCESS
        assert "usage:" in capsys.readouterr().out.lower()

    def test_version(self, capsys) -> None:
        assert CLIRunner().run(["--version"]) == EXIT_SUCCESS
        assert capsys.readouterr().out.strip() == get_version()

    def test_bad_arguments(self, capsys) -> None:
        assert CLIRunner().run(["detect", "--package-manager", "cargo"]) == EXIT_INVALID_USAGE

    def test_config_error(self, tmp_path: Path) -> None:
        (tmp_path / ".toolscout.yml").write_text("package_manager: [unclosed\n")
        assert CLIRunner().run(["detect", str(tmp_path)]) == EXIT_INVALID_USAGE

    def test_unreadable_config_is_usage_error(self, tmp_path: Path) -> None:
        (tmp_path / "cfgdir").mkdir()
        exit_code = CLIRunner().run(["detect", str(tmp_path), "--config", str(tmp_path / "cfgdir")])
        assert exit_code == EXIT_INVALID_USAGE

    def test_dispatches_with_loaded_config(self, tmp_path: Path) -> None:
        (tmp_path / ".toolscout.yml").write_text("hook_system: lefthook\n")
        runner = CLIRunner()
        with patch.object(runner.commands["detect"], "execute", return_value=0) as execute:
            assert runner.run(["detect", str(tmp_path), "--package-manager", "pnpm"]) == 0
        config = execute.call_args[0][1]
        assert config.hook_system == "lefthook"
        assert config.package_manager == "pnpm"
