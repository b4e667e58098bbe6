"""
Answers File Loader
===================

Reads Selection answers from YAML files and merges command-line overrides
on top of them. Validation itself is delegated to ``dockforge_schema``.
"""

from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml
from pydantic.alias_generators import to_snake

from dockforge_common import SelectionFileError, get_logger
from dockforge_schema import Selection, parse_selection

logger = get_logger(__name__)


def normalize_keys(data: Mapping[str, Any]) -> Dict[str, Any]:
    """Convert camelCase answer keys to snake_case (``projectName`` -> ``project_name``)."""
    return {to_snake(str(key)): value for key, value in data.items()}


def merge_answers(
    base: Mapping[str, Any], overrides: Optional[Mapping[str, Any]] = None
) -> Dict[str, Any]:
    """
    Merge override answers on top of base answers.

    Overrides whose value is ``None`` (an option the user did not pass) or an
    empty collection leave the base answer untouched.
    """
    merged = normalize_keys(base)
    for key, value in normalize_keys(overrides or {}).items():
        if value is None:
            continue
        if isinstance(value, (list, tuple, set, frozenset)) and not value:
            continue
        merged[key] = value
    return merged


def read_answers(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Read a YAML answers file into a dict without validating it.

    Raises:
        SelectionFileError: If the file is missing, not YAML, or not a mapping
    """
    path = Path(path)
    if not path.is_file():
        raise SelectionFileError(f"Answers file not found: {path}", path=str(path))

    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise SelectionFileError(f"Invalid YAML in {path}: {e}", path=str(path)) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise SelectionFileError(
            f"Answers file {path} must contain a mapping, got {type(data).__name__}",
            path=str(path),
        )
    return data


def load_selection(
    path: Optional[Union[str, Path]] = None,
    overrides: Optional[Mapping[str, Any]] = None,
    defaults: Optional[Mapping[str, Any]] = None,
) -> Selection:
    """
    Load and validate a Selection.

    Args:
        path: YAML answers file; ``None`` builds the Selection from overrides only
        overrides: Answers that take precedence over the file
        defaults: Answers used when neither the file nor the overrides set them

    Returns:
        Validated Selection

    Raises:
        SelectionFileError: If the answers file cannot be read
        InvalidSelection: If the merged answers fail validation
    """
    base: Dict[str, Any] = read_answers(path) if path is not None else {}
    answers = merge_answers(merge_answers(defaults or {}, base), overrides)
    logger.debug("Loaded answers", path=str(path) if path else None, keys=",".join(sorted(answers)))
    return parse_selection(answers)
