"""
Selection serialization helpers.

Converts Selections to and from YAML text. Reading files from disk is the
SDK's job (``dockforge_sdk.load_selection``); these helpers work on strings.
"""

from typing import Any

import yaml

from .selection import Selection, parse_selection


def to_yaml_string(selection: Selection) -> str:
    """
    Serialize a Selection to a YAML answers document.

    Keys keep declaration order and set-valued fields are sorted, so the same
    Selection always produces the same text.
    """
    return yaml.safe_dump(selection.to_dict(), sort_keys=False, default_flow_style=False)


def from_yaml_string(text: str) -> Selection:
    """
    Parse and validate a YAML answers document.

    Raises:
        yaml.YAMLError: If the text is not valid YAML
        TypeError: If the document is not a mapping
        InvalidSelection: If any answer fails validation
    """
    data: Any = yaml.safe_load(text)
    if not isinstance(data, dict):
        raise TypeError(f"answers document must be a mapping, got {type(data).__name__}")
    return parse_selection(data)
