"""Tests for core models."""

from __future__ import annotations

from pathlib import Path

import pytest

from toolscout.core.models import (
    HookSystem,
    MarkerConflict,
    PackageManager,
    ToolEnvironment,
    parse_hook_system,
    parse_package_manager,
)


class TestParsePackageManager:
    """Tests for parse_package_manager function."""

    def test_parses_known_names(self) -> None:
        assert parse_package_manager("pnpm") == PackageManager.PNPM
        assert parse_package_manager(" Bun ") == PackageManager.BUN

    def test_empty_means_no_override(self) -> None:
        assert parse_package_manager(None) is None
        assert parse_package_manager("") is None

    def test_unknown_name_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown package manager 'cargo'"):
            parse_package_manager("cargo")


class TestParseHookSystem:
    """Tests for parse_hook_system function."""

    def test_parses_known_names(self) -> None:
        assert parse_hook_system("lefthook") == HookSystem.LEFTHOOK
        assert parse_hook_system("none") == HookSystem.NONE

    def test_accepts_underscore_alias(self) -> None:
        assert parse_hook_system("pre_commit") == HookSystem.PRE_COMMIT

    def test_unknown_name_raises(self) -> None:
        with pytest.raises(ValueError, match="Unknown hook system"):
            parse_hook_system("husky")


class TestToolEnvironment:
    """Tests for ToolEnvironment."""

    def test_has_hooks(self) -> None:
        env = ToolEnvironment(Path("/p"), PackageManager.NPM, HookSystem.LEFTHOOK)
        assert env.has_hooks
        env = ToolEnvironment(Path("/p"), PackageManager.NPM, HookSystem.NONE)
        assert not env.has_hooks

    def test_equal_values_compare_equal(self) -> None:
        a = ToolEnvironment(Path("/p"), PackageManager.YARN, HookSystem.NONE)
        b = ToolEnvironment(Path("/p"), PackageManager.YARN, HookSystem.NONE)
        assert a == b
        assert hash(a) == hash(b)


class TestMarkerConflict:
    """Tests for MarkerConflict."""

    def test_describe(self) -> None:
        conflict = MarkerConflict("hook_system", "lefthook", ("pre-commit",))
        assert conflict.describe() == (
            "hook_system: using 'lefthook', ignoring markers for pre-commit"
        )
