# AGPL-3.0 License

"""
Storage of implementation requirement maps as JSON.
"""

from grading_toolkit.requirements.requirement_store import (
    RequirementMap,
    from_json_string,
    load,
    save,
    to_json_string,
)

__all__ = [
    "RequirementMap",
    "from_json_string",
    "load",
    "save",
    "to_json_string",
]
