# AGPL-3.0 License

"""
Discovery of the source files to check.
"""

from pathlib import Path
from typing import Optional, Union

import pathspec

from grading_toolkit.config_loader import get_settings


def find_source_files(
    root: Union[str, Path],
    patterns: Optional[list[str]] = None,
    exclude_patterns: Optional[list[str]] = None
) -> list[Path]:
    """
    Find the source files below ``root``.

    Args:
        root: Directory to search
        patterns: Gitwildmatch patterns of files to include (defaults to config)
        exclude_patterns: Gitwildmatch patterns of files to leave out (defaults to config)

    Returns:
        Sorted paths of the matching files
    """
    settings = get_settings().get("style", {})
    if patterns is None:
        patterns = list(settings.get("source_patterns", ["**/*.java"]))
    if exclude_patterns is None:
        exclude_patterns = list(settings.get("exclude_patterns", []))

    root = Path(root)
    include_spec = pathspec.PathSpec.from_lines("gitwildmatch", patterns)
    exclude_spec = pathspec.PathSpec.from_lines("gitwildmatch", exclude_patterns) if exclude_patterns else None

    found = []
    for path in root.rglob("*"):
        if not path.is_file():
            continue
        relative = path.relative_to(root).as_posix()
        if not include_spec.match_file(relative):
            continue
        if exclude_spec and exclude_spec.match_file(relative):
            continue
        found.append(path)

    return sorted(found)
