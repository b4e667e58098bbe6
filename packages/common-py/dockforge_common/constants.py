"""
dockforge Shared Constants

Single source of truth for supported values, defaults, images and artifact
file names. The schema validates against these lists and the renderer uses
the images and file names.

Usage:
    from dockforge_common.constants import SUPPORTED_FRAMEWORKS, ServiceImages

    if framework not in SUPPORTED_FRAMEWORKS:
        ...
"""

# =============================================================================
# VERSION INFORMATION
# =============================================================================

DOCKFORGE_VERSION = "0.1.0"
"""Current dockforge version"""


# =============================================================================
# SUPPORTED VALUES (Must match schema definitions)
# =============================================================================

SUPPORTED_FRAMEWORKS = ["flask", "django", "fastapi", "streamlit", "cli", "other"]
"""Application frameworks with a dedicated run command"""

SUPPORTED_DATABASES = ["none", "postgresql", "mysql", "mongodb", "sqlite"]

SUPPORTED_CACHES = ["none", "redis", "memcached"]

SUPPORTED_WORKERS = ["none", "celery", "rq"]

SUPPORTED_EXTRA_SERVICES = ["nginx", "rabbitmq"]
"""Extra services, listed in compose emission order"""

SUPPORTED_ENVIRONMENTS = ["development", "production", "both"]

LOG_LEVELS = ["debug", "info", "warn", "warning", "error"]


# =============================================================================
# DEFAULT VALUES
# =============================================================================

DEFAULT_PORT = 8000
"""Default application port"""

DEFAULT_PYTHON_VERSION = "3.12"

DEFAULT_ENVIRONMENT = "production"

DEFAULT_SELECTION_FILE = "dockforge.yaml"
"""Default answers file name used by the CLI"""

MIN_PORT = 1
MAX_PORT = 65535


# =============================================================================
# VALIDATION PATTERNS
# =============================================================================

PROJECT_NAME_PATTERN = r"^[a-z0-9]+(-[a-z0-9]+)*$"
"""Docker-safe project name (lowercase alphanumerics separated by single hyphens)"""

PYTHON_VERSION_PATTERN = r"^3\.\d{1,2}(\.\d{1,3})?$"
"""Pinned CPython 3 version (3.MINOR or 3.MINOR.PATCH)"""

DEBIAN_PACKAGE_PATTERN = r"^[a-z0-9][a-z0-9+.-]+$"
"""Debian package name grammar"""

FLOATING_TAGS = ["latest", "slim", "alpine", "3", "rc"]
"""Image tags that move over time and are never accepted as a Python version"""


# =============================================================================
# IMAGES
# =============================================================================


class ServiceImages:
    """Pinned images for generated compose services."""

    POSTGRESQL = "postgres:16-alpine"
    MYSQL = "mysql:8.4"
    MONGODB = "mongo:7.0"
    REDIS = "redis:7-alpine"
    MEMCACHED = "memcached:1.6-alpine"
    NGINX = "nginx:1.27-alpine"
    RABBITMQ = "rabbitmq:3.13-management-alpine"


BASE_IMAGE_REPOSITORY = "python"
BASE_IMAGE_VARIANT = "slim"


# =============================================================================
# DATABASE CLIENT LIBRARIES
# =============================================================================

DATABASE_BUILD_PACKAGES = {
    "postgresql": ["libpq-dev"],
    "mysql": ["default-libmysqlclient-dev", "pkg-config"],
}
"""Debian packages needed to compile database drivers in the builder stage"""

DATABASE_RUNTIME_PACKAGES = {
    "postgresql": ["libpq5"],
    "mysql": ["libmariadb3"],
}
"""Debian packages needed by compiled database drivers at runtime"""


# =============================================================================
# ARTIFACT FILE NAMES
# =============================================================================


class ArtifactNames:
    """Conventional file names for rendered artifacts."""

    DOCKERFILE = "Dockerfile"
    COMPOSE = "docker-compose.yml"
    COMPOSE_OVERRIDE = "docker-compose.prod.yml"
    ENV = ".env.example"
    DOCKERIGNORE = ".dockerignore"

