"""
Template System Module
======================

Fragment catalog and renderer for generating:
- Dockerfiles
- docker-compose documents
- .env templates
- .dockerignore files
"""

from .catalog import FRAGMENTS, FragmentKey, get_fragment, list_fragments
from .renderer import (
    ARTIFACT_FILENAMES,
    ArtifactKind,
    RenderedArtifact,
    RenderPlan,
    RenderResult,
    TemplateContext,
    TemplateRenderer,
    get_renderer,
    plan_fragments,
    render,
    resolve_base_image,
)

__all__ = [
    "FRAGMENTS",
    "FragmentKey",
    "get_fragment",
    "list_fragments",
    "ARTIFACT_FILENAMES",
    "ArtifactKind",
    "RenderedArtifact",
    "RenderPlan",
    "RenderResult",
    "TemplateContext",
    "TemplateRenderer",
    "get_renderer",
    "plan_fragments",
    "render",
    "resolve_base_image",
]
