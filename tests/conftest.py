"""Shared fixtures for toolscout tests."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Iterator

import pytest

from toolscout.core.logging import ROOT_LOGGER_NAME


@pytest.fixture(autouse=True)
def isolated_home(tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point TOOLSCOUT_HOME at an empty directory so no global config leaks in."""
    home = tmp_path_factory.mktemp("toolscout-home")
    monkeypatch.setenv("TOOLSCOUT_HOME", str(home))
    return home


@pytest.fixture
def make_project(tmp_path: Path) -> Callable[..., Path]:
    """Create a project directory containing the given marker files."""

    def _make(*markers: str) -> Path:
        root = tmp_path / "project"
        root.mkdir(exist_ok=True)
        for marker in markers:
            (root / marker).write_text("")
        return root

    return _make


@pytest.fixture(autouse=True)
def reset_logging() -> Iterator[None]:
    """Undo configure_logging() calls made by CLI tests."""
    yield
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(logging.NOTSET)
    for handler in list(root.handlers):
        root.removeHandler(handler)
