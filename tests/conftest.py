"""Shared fixtures: throwaway application trees under ``tmp_path``."""

import textwrap
from collections.abc import Callable
from pathlib import Path

import pytest

from wingbeat.components.factory import ComponentFactory
from wingbeat.components.kinds import KINDS


@pytest.fixture
def app_dir(tmp_path: Path) -> Path:
    """An empty ``application/`` directory with every kind subdirectory."""
    root = tmp_path / "application"
    for kind in KINDS:
        (root / kind.directory).mkdir(parents=True)
    return root


@pytest.fixture
def write(app_dir: Path) -> Callable[..., Path]:
    """Write a dedented source file relative to the application directory."""

    def _write(relative: str, source: str = "") -> Path:
        path = app_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(source), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def factory(app_dir: Path) -> ComponentFactory:
    """A factory over every kind directory except views."""
    return ComponentFactory(
        {kind.name: app_dir / kind.directory for kind in KINDS if kind.name != "views"}
    )
