"""Shared pytest configuration for dumact examples.

Each example directory holds an ``app.py`` and a test module. The
``example_app`` fixture runs the sibling ``app.py`` (without its
``__main__`` block) and exposes its globals as attributes, so every test
sees a freshly compiled set of components.
"""

import runpy
from pathlib import Path
from types import SimpleNamespace

import pytest


@pytest.fixture
def example_dir(request: pytest.FixtureRequest) -> Path:
    """Directory of the example under test."""
    return Path(request.path).parent


@pytest.fixture
def example_app(example_dir: Path) -> SimpleNamespace:
    """Globals of the sibling app.py, run in a fresh namespace."""
    namespace = runpy.run_path(str(example_dir / "app.py"), run_name=f"example_{example_dir.name}")
    return SimpleNamespace(**namespace)
