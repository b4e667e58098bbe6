"""
dockforge Selection Schema

Pydantic model for the answers that drive artifact generation.

Design Principles:
- Pure validation: receives dicts, validates structure, returns typed objects
- No file I/O: reading answers files is the SDK's responsibility
- Complete reports: every violated constraint is reported at once through
  ``InvalidSelection`` instead of stopping at the first failure
- Immutable: a Selection never changes after construction

Usage:
    from dockforge_schema import Selection

    selection = Selection(framework="fastapi", project_name="myapp", database="postgresql")
    # camelCase keys are accepted too
    selection = Selection.model_validate({"framework": "flask", "projectName": "shop"})
"""

from typing import Any, Dict, FrozenSet, List, Literal, Tuple

from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from dockforge_common import (
    DEFAULT_ENVIRONMENT,
    DEFAULT_PORT,
    DEFAULT_PYTHON_VERSION,
    InvalidSelection,
    Violation,
    to_python_module,
    validate_port,
    validate_project_name,
    validate_python_version,
    validate_system_dependency,
)

# =============================================================================
# ENUMERATED CHOICES (must match dockforge_common.constants)
# =============================================================================

Framework = Literal["flask", "django", "fastapi", "streamlit", "cli", "other"]
Database = Literal["none", "postgresql", "mysql", "mongodb", "sqlite"]
Cache = Literal["none", "redis", "memcached"]
BackgroundWorker = Literal["none", "celery", "rq"]
ExtraService = Literal["nginx", "rabbitmq"]
Environment = Literal["development", "production", "both"]


def _violations_from_errors(errors: List[Dict[str, Any]], aliases: Dict[str, str]) -> List[Violation]:
    """Translate pydantic error dicts into dockforge Violations."""
    violations: List[Violation] = []
    for err in errors:
        loc: Tuple[Any, ...] = tuple(err.get("loc", ()))
        if loc:
            field = aliases.get(str(loc[0]), str(loc[0]))
        else:
            field = "selection"

        message = err.get("msg", "invalid value")
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        if err.get("type") == "missing":
            message = "field is required"
        elif err.get("type") == "extra_forbidden":
            message = "unknown field"

        # Nested locations point at members of set-valued fields
        if len(loc) > 1:
            message = f"{message} (item {err.get('input')!r})"

        violations.append(Violation(field=field, message=message))
    return violations


# =============================================================================
# SELECTION
# =============================================================================


class Selection(BaseModel):
    """
    Validated application and infrastructure choices.

    Attributes:
        framework: Web framework or application type; selects the run command
        python_version: Pinned CPython version for the base image
        port: Port the application listens on (ignored for ``cli``)
        system_dependencies: Extra Debian packages installed in the image
        database: Database service (``sqlite`` adds a data volume only)
        cache: Cache service
        background_worker: Task queue worker
        extra_services: Reverse proxy and/or message broker
        environment: Which compose flavour(s) to emit
        project_name: Docker-safe name used for containers, volumes and network
    """

    framework: Framework
    python_version: str = DEFAULT_PYTHON_VERSION
    port: int = DEFAULT_PORT
    system_dependencies: FrozenSet[str] = frozenset()
    database: Database = "none"
    cache: Cache = "none"
    background_worker: BackgroundWorker = "none"
    extra_services: FrozenSet[ExtraService] = frozenset()
    environment: Environment = DEFAULT_ENVIRONMENT
    project_name: str

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @model_validator(mode="wrap")
    @classmethod
    def collect_violations(cls, data: Any, handler: Any) -> "Selection":
        """Run field validation and report every failure as one InvalidSelection."""
        try:
            return handler(data)
        except PydanticValidationError as exc:
            aliases = {to_camel(name): name for name in cls.model_fields}
            raise InvalidSelection(_violations_from_errors(exc.errors(), aliases)) from None

    @field_validator("port", mode="before")
    @classmethod
    def validate_port_range(cls, v: Any) -> Any:
        """Validate port is a TCP port (1-65535)"""
        if isinstance(v, str) and v.strip().isdigit():
            v = int(v.strip())
        return validate_port(v)

    @field_validator("project_name")
    @classmethod
    def validate_project_name_format(cls, v: str) -> str:
        """Validate project name is Docker-safe (lowercase, alphanumeric, hyphens)"""
        return validate_project_name(v)

    @field_validator("python_version", mode="before")
    @classmethod
    def validate_python_version_pinned(cls, v: Any) -> str:
        """Reject floating tags such as 'latest'"""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            raise ValueError(f"python version must be a string such as '3.12', got {v!r}")
        if not isinstance(v, str):
            raise ValueError("python version must be a string")
        return validate_python_version(v)

    @field_validator("system_dependencies", mode="before")
    @classmethod
    def validate_system_dependencies(cls, v: Any) -> Any:
        """Validate each entry is a Debian package name"""
        if v is None:
            return frozenset()
        if isinstance(v, str):
            v = [part for part in v.replace(",", " ").split() if part]
        if not isinstance(v, (list, tuple, set, frozenset)):
            raise ValueError("system dependencies must be a list of Debian package names")
        bad = []
        cleaned = []
        for package in v:
            try:
                cleaned.append(validate_system_dependency(str(package)))
            except ValueError:
                bad.append(str(package))
        if bad:
            raise ValueError(f"invalid Debian package name(s): {', '.join(sorted(bad))}")
        return frozenset(cleaned)

    @field_validator("extra_services", mode="before")
    @classmethod
    def normalize_extra_services(cls, v: Any) -> Any:
        """Accept None and comma separated strings"""
        if v is None:
            return frozenset()
        if isinstance(v, str):
            return frozenset(part.strip() for part in v.split(",") if part.strip())
        return v

    # -------------------------------------------------------------------------
    # Derived values
    # -------------------------------------------------------------------------

    @property
    def python_module(self) -> str:
        """Importable module name derived from the project name."""
        return to_python_module(self.project_name)

    @property
    def exposes_port(self) -> bool:
        """CLI applications never expose a port or carry a health check."""
        return self.framework != "cli"

    @property
    def includes_development(self) -> bool:
        return self.environment in ("development", "both")

    @property
    def includes_production(self) -> bool:
        return self.environment in ("production", "both")

    def to_dict(self) -> Dict[str, Any]:
        """
        Plain, deterministically ordered representation.

        Set-valued fields are emitted as sorted lists so serialized answers
        files are stable.
        """
        return {
            "project_name": self.project_name,
            "framework": self.framework,
            "python_version": self.python_version,
            "port": self.port,
            "system_dependencies": sorted(self.system_dependencies),
            "database": self.database,
            "cache": self.cache,
            "background_worker": self.background_worker,
            "extra_services": sorted(self.extra_services),
            "environment": self.environment,
        }


def parse_selection(data: Any) -> Selection:
    """
    Validate raw answers into a Selection.

    Args:
        data: Mapping of answers (snake_case or camelCase keys) or a Selection

    Returns:
        Validated Selection

    Raises:
        InvalidSelection: If any field fails validation (all failures listed)
    """
    if isinstance(data, Selection):
        return data
    return Selection.model_validate(data)


__all__ = [
    "Selection",
    "parse_selection",
    "Framework",
    "Database",
    "Cache",
    "BackgroundWorker",
    "ExtraService",
    "Environment",
]
