"""
dockforge Validation Utilities

Field-level checks shared by the schema and the CLI. Each function returns the
normalized value or raises ``ValueError`` with a human readable message, so it
can be used directly inside pydantic validators, where failures from every
field are collected into one report.
"""

import re

from .constants import (
    DEBIAN_PACKAGE_PATTERN,
    FLOATING_TAGS,
    MAX_PORT,
    MIN_PORT,
    PROJECT_NAME_PATTERN,
    PYTHON_VERSION_PATTERN,
)


def validate_port(port: int) -> int:
    """Validate a TCP port number (1-65535)."""
    if isinstance(port, bool) or not isinstance(port, int):
        raise ValueError(f"port must be an integer, got {type(port).__name__}")
    if port < MIN_PORT or port > MAX_PORT:
        raise ValueError(f"port must be between {MIN_PORT} and {MAX_PORT}, got {port}")
    return port


def validate_project_name(name: str) -> str:
    """
    Validate a project name for use in container, volume and network names.

    Examples:
        >>> validate_project_name("my-app")
        'my-app'
        >>> validate_project_name("My_App")
        Traceback (most recent call last):
        ...
        ValueError: project name 'My_App' must contain only lowercase letters, digits and single hyphens
    """
    if not name or not name.strip():
        raise ValueError("project name must not be empty")
    if not re.match(PROJECT_NAME_PATTERN, name):
        raise ValueError(
            f"project name '{name}' must contain only lowercase letters, digits and single hyphens"
        )
    return name


def validate_python_version(version: str) -> str:
    """Validate a pinned CPython 3 version such as ``3.11`` or ``3.12.4``."""
    version = version.strip()
    if version.lower() in FLOATING_TAGS:
        raise ValueError(f"floating tag '{version}' is not allowed, pin a version such as 3.12")
    if not re.match(PYTHON_VERSION_PATTERN, version):
        raise ValueError(f"python version '{version}' must look like 3.MINOR or 3.MINOR.PATCH")
    return version


def validate_system_dependency(package: str) -> str:
    """Validate a Debian package name."""
    package = package.strip()
    if not re.match(DEBIAN_PACKAGE_PATTERN, package):
        raise ValueError(f"'{package}' is not a valid Debian package name")
    return package


def to_python_module(project_name: str) -> str:
    """Derive an importable module name from a project name (``my-app`` -> ``my_app``)."""
    return project_name.replace("-", "_")


__all__ = [
    "validate_port",
    "validate_project_name",
    "validate_python_version",
    "validate_system_dependency",
    "to_python_module",
]
