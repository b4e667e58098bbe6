"""
dockforge Error Classes

Every error raised by dockforge packages derives from DockforgeError so callers
can catch a single base class. Each error carries a machine-readable ``code``
and can be serialized with ``to_dict()``.

Usage:
    from dockforge_common.errors import InvalidSelection, Violation

    raise InvalidSelection([Violation("port", "must be between 1 and 65535")])
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional


class DockforgeError(Exception):
    """Base class for all dockforge errors."""

    def __init__(self, message: str, code: str = "DOCKFORGE_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize error for JSON output."""
        return {
            "error": self.__class__.__name__,
            "code": self.code,
            "message": self.message,
        }

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class Violation:
    """A single failed constraint on a Selection field."""

    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class InvalidSelection(DockforgeError):
    """
    One or more Selection fields failed validation.

    All violations are reported together so a front-end can re-prompt for
    every bad answer in one round.
    """

    def __init__(self, violations: Iterable[Violation]):
        self.violations: List[Violation] = list(violations)
        details = "; ".join(str(v) for v in self.violations)
        super().__init__(
            f"Invalid selection ({len(self.violations)} violation(s)): {details}",
            code="INVALID_SELECTION",
        )

    @property
    def fields(self) -> List[str]:
        """Names of the fields that failed validation, in report order."""
        return [v.field for v in self.violations]

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["violations"] = [{"field": v.field, "message": v.message} for v in self.violations]
        return data


class TemplateIntegrityError(DockforgeError):
    """
    The fragment catalog is inconsistent.

    Raised for unknown fragment keys and unresolved placeholders. This is a
    defect in the catalog, never a user error.
    """

    def __init__(self, message: str, fragment: Optional[str] = None):
        self.fragment = fragment
        super().__init__(message, code="TEMPLATE_INTEGRITY_ERROR")

    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["fragment"] = self.fragment
        return data


class SelectionFileError(DockforgeError):
    """Answers file is missing, unreadable or not a YAML mapping."""

    def __init__(self, message: str, path: Optional[str] = None):
        self.path = path
        super().__init__(message, code="SELECTION_FILE_ERROR")


class ArtifactWriteError(DockforgeError):
    """Rendered artifacts could not be written to the output directory."""

    def __init__(self, message: str, conflicts: Optional[List[str]] = None):
        self.conflicts = conflicts or []
        super().__init__(message, code="ARTIFACT_WRITE_ERROR")


__all__ = [
    "DockforgeError",
    "Violation",
    "InvalidSelection",
    "TemplateIntegrityError",
    "SelectionFileError",
    "ArtifactWriteError",
]
