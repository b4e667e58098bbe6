"""Pytest configuration and fixtures for schema tests."""
import pytest


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "requires_yaml: marks tests that require pyyaml"
    )


@pytest.fixture
def minimal_answers():
    """Smallest valid set of answers."""
    return {"framework": "fastapi", "project_name": "myapp"}


@pytest.fixture
def full_answers():
    """Answers setting every field."""
    return {
        "framework": "django",
        "python_version": "3.11",
        "port": 8080,
        "system_dependencies": ["curl", "libxml2"],
        "database": "postgresql",
        "cache": "redis",
        "background_worker": "celery",
        "extra_services": ["rabbitmq", "nginx"],
        "environment": "both",
        "project_name": "shop-api",
    }
