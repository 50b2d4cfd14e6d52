"""Shared pytest configuration for wingbeat examples.

Each example directory holds an ``app.py`` defining ``app`` next to its
``application/`` tree. The ``example_app`` fixture executes that file with
the same loader wingbeat uses for component files, once per test.

Component caches (loaded files, instances, singletons) belong to the App,
so a fresh App per test means every test starts from empty caches. Tests
that exercise cross-request caching must send all their requests to the
one App the fixture returned.
"""

from pathlib import Path

import pytest

from wingbeat import App
from wingbeat.components.loader import load_module


@pytest.fixture
def example_app(request: pytest.FixtureRequest) -> App:
    """A fresh App from the ``app.py`` beside the requesting test file."""
    app_path = Path(request.path).parent / "app.py"
    module = load_module(app_path, f"example_{app_path.parent.name}_{request.node.name}")
    assert module is not None, f"{app_path} not found"
    assert isinstance(module.app, App)
    return module.app
