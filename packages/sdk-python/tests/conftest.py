"""Pytest configuration and fixtures for SDK tests."""
from pathlib import Path

import pytest
import yaml

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


class ComposeLoader(yaml.SafeLoader):
    """SafeLoader that understands the compose merge tags ``!reset`` and ``!override``."""


def _construct_compose_tag(loader, node):
    if isinstance(node, yaml.SequenceNode):
        return loader.construct_sequence(node, deep=True)
    if isinstance(node, yaml.MappingNode):
        return loader.construct_mapping(node, deep=True)
    return loader.construct_scalar(node)


ComposeLoader.add_constructor("!reset", _construct_compose_tag)
ComposeLoader.add_constructor("!override", _construct_compose_tag)


@pytest.fixture
def load_compose():
    """Parse rendered compose text into a dict."""

    def _load(text):
        return yaml.load(text, Loader=ComposeLoader)

    return _load


@pytest.fixture
def fixtures_dir():
    return FIXTURES_DIR


@pytest.fixture
def answers_file(fixtures_dir):
    return fixtures_dir / "answers.yaml"


@pytest.fixture
def scenario_a():
    """FastAPI with PostgreSQL and Redis, production only."""
    return {
        "framework": "fastapi",
        "port": 8000,
        "database": "postgresql",
        "cache": "redis",
        "background_worker": "none",
        "environment": "production",
        "project_name": "myapp",
    }


@pytest.fixture
def scenario_b():
    """Command line application without backing services."""
    return {
        "framework": "cli",
        "database": "none",
        "cache": "none",
        "background_worker": "none",
        "project_name": "tool",
    }
