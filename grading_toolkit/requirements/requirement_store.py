# AGPL-3.0 License

"""
JSON persistence of requirement maps.

A requirement map associates a key (typically a method signature) with an
ordered list of requirement records. The records are stored as given; this
module does not interpret them.
"""

import json
from pathlib import Path
from typing import Any, Union

from grading_toolkit.errors import InvalidRequirementMapError
from grading_toolkit.log import get_logger

RequirementMap = dict[str, list[dict[str, Any]]]


def to_json_string(requirements: RequirementMap) -> str:
    """Serialize a requirement map as pretty-printed JSON."""
    return json.dumps(requirements, indent=2, ensure_ascii=False)


def from_json_string(json_text: str) -> RequirementMap:
    """
    Deserialize a requirement map.

    Raises:
        json.JSONDecodeError: The text is not JSON
        InvalidRequirementMapError: The JSON is not a mapping of keys to lists
    """
    data = json.loads(json_text)

    if not isinstance(data, dict):
        raise InvalidRequirementMapError(f"Expected a JSON object, got {type(data).__name__}")
    for key, value in data.items():
        if not isinstance(value, list):
            raise InvalidRequirementMapError(
                f"Requirements for '{key}' must be a list, got {type(value).__name__}"
            )

    return data


def load(file: Union[str, Path]) -> RequirementMap:
    """Read a requirement map from a UTF-8 JSON file."""
    file = Path(file)
    requirements = from_json_string(file.read_text(encoding="utf-8"))
    get_logger().debug(f"Loaded requirements for {len(requirements)} keys from {file}")
    return requirements


def save(requirements: RequirementMap, file: Union[str, Path]) -> None:
    """Write a requirement map to a UTF-8 JSON file, creating directories as needed."""
    file = Path(file)
    file.parent.mkdir(parents=True, exist_ok=True)
    file.write_text(to_json_string(requirements), encoding="utf-8")
    get_logger().debug(f"Saved requirements for {len(requirements)} keys to {file}")
