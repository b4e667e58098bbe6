"""
dockforge Common Package

Shared utilities and primitives used across all dockforge packages.

This package provides:
- Exception classes for consistent error handling
- Constants for supported values, images and defaults
- Validation utilities for input checking
- Structured logging
- Settings read from the environment

Usage:
    from dockforge_common import InvalidSelection, SUPPORTED_FRAMEWORKS
    from dockforge_common import get_logger, get_settings
"""

# Error classes
from .errors import (
    DockforgeError,
    Violation,
    InvalidSelection,
    TemplateIntegrityError,
    SelectionFileError,
    ArtifactWriteError,
)

# Constants
from .constants import (
    DOCKFORGE_VERSION,
    SUPPORTED_FRAMEWORKS,
    SUPPORTED_DATABASES,
    SUPPORTED_CACHES,
    SUPPORTED_WORKERS,
    SUPPORTED_EXTRA_SERVICES,
    SUPPORTED_ENVIRONMENTS,
    LOG_LEVELS,
    DEFAULT_PORT,
    DEFAULT_PYTHON_VERSION,
    DEFAULT_ENVIRONMENT,
    DEFAULT_SELECTION_FILE,
    ServiceImages,
    ArtifactNames,
)

# Validation utilities
from .validation import (
    validate_port,
    validate_project_name,
    validate_python_version,
    validate_system_dependency,
    to_python_module,
)

# Logger
from .logger import (
    DockforgeLogger,
    get_logger,
    configure_logging,
)

# Settings
from .config import Settings, get_settings

__version__ = DOCKFORGE_VERSION

__all__ = [
    # Errors
    "DockforgeError",
    "Violation",
    "InvalidSelection",
    "TemplateIntegrityError",
    "SelectionFileError",
    "ArtifactWriteError",
    # Constants
    "DOCKFORGE_VERSION",
    "SUPPORTED_FRAMEWORKS",
    "SUPPORTED_DATABASES",
    "SUPPORTED_CACHES",
    "SUPPORTED_WORKERS",
    "SUPPORTED_EXTRA_SERVICES",
    "SUPPORTED_ENVIRONMENTS",
    "LOG_LEVELS",
    "DEFAULT_PORT",
    "DEFAULT_PYTHON_VERSION",
    "DEFAULT_ENVIRONMENT",
    "DEFAULT_SELECTION_FILE",
    "ServiceImages",
    "ArtifactNames",
    # Validation
    "validate_port",
    "validate_project_name",
    "validate_python_version",
    "validate_system_dependency",
    "to_python_module",
    # Logger
    "DockforgeLogger",
    "get_logger",
    "configure_logging",
    # Settings
    "Settings",
    "get_settings",
]
