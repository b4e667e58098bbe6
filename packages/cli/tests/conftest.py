"""Pytest configuration and fixtures for CLI tests."""
import os

import pytest
from typer.testing import CliRunner


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )


@pytest.fixture
def runner():
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run a test inside an empty directory with no DOCKFORGE_* settings."""
    for key in list(os.environ):
        if key.startswith("DOCKFORGE_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def answers_file(workdir):
    """Valid answers file in the working directory."""
    path = workdir / "dockforge.yaml"
    path.write_text(
        "project_name: myapp\n"
        "framework: fastapi\n"
        "python_version: '3.12'\n"
        "port: 8000\n"
        "database: postgresql\n"
        "cache: redis\n"
        "environment: production\n"
    )
    return path


@pytest.fixture
def invalid_answers_file(workdir):
    """Answers file violating several constraints."""
    path = workdir / "invalid.yaml"
    path.write_text("project_name: ''\nframework: rails\nport: 0\n")
    return path
