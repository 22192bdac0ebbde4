"""Shared pytest fixtures."""

import tempfile
from pathlib import Path

import pytest

from tuimenu.utils import debug as debug_module


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test data."""
    with tempfile.TemporaryDirectory() as d:
        yield Path(d)


@pytest.fixture
def mock_tuimenu_dir(temp_dir, monkeypatch):
    """Set up a mock ~/.config/tuimenu directory."""
    tuimenu_dir = temp_dir / ".tuimenu"
    tuimenu_dir.mkdir()
    monkeypatch.setenv("TUIMENU_DIR", str(tuimenu_dir))
    debug_module.reload_config()
    yield tuimenu_dir
    debug_module.reload_config()


@pytest.fixture(autouse=True)
def isolate_env(temp_dir, monkeypatch):
    """Keep tests away from the real config dir and TUIMENU_* overrides."""
    import os

    for key in list(os.environ):
        if key.startswith("TUIMENU_"):
            monkeypatch.delenv(key)
    monkeypatch.setenv("TUIMENU_DIR", str(temp_dir / "default"))
    debug_module.reload_config()
