"""Dockforge SDK - generate Docker artifacts for Python applications.

This package provides tools for:
- Loading and validating answers files
- Rendering Dockerfile, docker-compose, .env and .dockerignore text
- Writing rendered artifacts to disk

Example:
    >>> from dockforge_sdk import load_selection, render, write_artifacts
    >>> selection = load_selection("dockforge.yaml")
    >>> result = render(selection)
    >>> write_artifacts(result, "deploy/")

Package Structure:
    dockforge_sdk/
    ├── loader.py       - Answers file loading and override merging
    ├── templates/      - Fragment catalog and renderer
    └── writer.py       - Staged, all-or-nothing file writer
"""

from dockforge_common import DOCKFORGE_VERSION

# Loading
from .loader import load_selection, merge_answers, read_answers

# Templates
from .templates import (
    ArtifactKind,
    FragmentKey,
    RenderedArtifact,
    RenderPlan,
    RenderResult,
    TemplateRenderer,
    get_renderer,
    list_fragments,
    plan_fragments,
    render,
    resolve_base_image,
)

# Writing
from .writer import find_conflicts, write_artifacts

__version__ = DOCKFORGE_VERSION

__all__ = [
    # Loading
    "load_selection",
    "merge_answers",
    "read_answers",
    # Templates
    "ArtifactKind",
    "FragmentKey",
    "RenderedArtifact",
    "RenderPlan",
    "RenderResult",
    "TemplateRenderer",
    "get_renderer",
    "list_fragments",
    "plan_fragments",
    "render",
    "resolve_base_image",
    # Writing
    "find_conflicts",
    "write_artifacts",
]
