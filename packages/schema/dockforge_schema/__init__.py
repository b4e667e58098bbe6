"""
dockforge Schema Package

Pydantic models describing the answers that drive artifact generation.

Usage:
    from dockforge_schema import Selection, parse_selection, to_yaml_string

    selection = parse_selection({"framework": "fastapi", "projectName": "myapp"})
    print(to_yaml_string(selection))
"""

from .selection import (
    Selection,
    parse_selection,
    Framework,
    Database,
    Cache,
    BackgroundWorker,
    ExtraService,
    Environment,
)
from .serialization import to_yaml_string, from_yaml_string

__all__ = [
    "Selection",
    "parse_selection",
    "Framework",
    "Database",
    "Cache",
    "BackgroundWorker",
    "ExtraService",
    "Environment",
    "to_yaml_string",
    "from_yaml_string",
]
