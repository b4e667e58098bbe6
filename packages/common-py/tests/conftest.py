"""Pytest configuration and fixtures for common-py tests."""
import logging

import pytest


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every DOCKFORGE_* variable for the duration of a test."""
    import os

    for key in list(os.environ):
        if key.startswith("DOCKFORGE_"):
            monkeypatch.delenv(key, raising=False)
    yield monkeypatch


@pytest.fixture
def reset_logging():
    """Restore the dockforge logger hierarchy after a test reconfigures it."""
    root = logging.getLogger("dockforge")
    handlers = list(root.handlers)
    level = root.level
    propagate = root.propagate
    yield root
    root.handlers = handlers
    root.setLevel(level)
    root.propagate = propagate
