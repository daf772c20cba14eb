# AGPL-3.0 License

"""
Discovery of the style ruleset file.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Union

from grading_toolkit.config_loader import get_settings
from grading_toolkit.errors import RulesetNotFoundError
from grading_toolkit.log import get_logger


@dataclass(frozen=True)
class RulesetSelection:
    """
    The ruleset chosen for a run, with every file that could have been chosen.
    """
    path: Path
    candidates: list[Path] = field(default_factory=list)

    @property
    def ambiguous(self) -> bool:
        return len(self.candidates) > 1


def find_files(file_name: str, start_in: Union[str, Path]) -> list[Path]:
    """
    Find every file with the given name below a directory.

    Directories are walked in sorted order so results are deterministic.

    Returns:
        Normalized paths of the matching files
    """
    found = []
    for dir_path, dir_names, file_names in os.walk(start_in):
        dir_names.sort()
        if file_name in file_names:
            found.append(Path(os.path.normpath(os.path.join(dir_path, file_name))))
    return found


def locate_ruleset(
    search_path: Optional[Union[str, Path]] = None,
    file_name: Optional[str] = None
) -> RulesetSelection:
    """
    Locate the ruleset to check against.

    Finding several candidates is not an error: the first one wins and a
    warning is logged.

    Args:
        search_path: Directory to search (defaults to config)
        file_name: Ruleset file name (defaults to config)

    Returns:
        The selected ruleset and all candidates

    Raises:
        RulesetNotFoundError: No file named ``file_name`` exists below ``search_path``
    """
    settings = get_settings().get("style", {})
    if search_path is None:
        search_path = settings.get("ruleset_search_path", "./config")
    if file_name is None:
        file_name = settings.get("ruleset_filename", "checkstyle.xml")

    candidates = find_files(file_name, search_path)
    if not candidates:
        raise RulesetNotFoundError(f"No {file_name} found in {search_path}")

    selection = RulesetSelection(path=candidates[0], candidates=candidates)
    if selection.ambiguous:
        get_logger().warning(
            f"Found {len(candidates)} {file_name} files, using the first: {selection.path}",
            extra={"candidates": [str(c) for c in candidates]}
        )
    return selection
