# AGPL-3.0 License

"""
Path helpers for shortening file names in reports.
"""

import os
from pathlib import Path
from typing import Optional, Sequence, Union

PathLike = Union[str, Path]


def _normalize(path: PathLike) -> Path:
    return Path(os.path.normpath(Path(path).absolute()))


def common_parent(one: Path, another: Path) -> Optional[Path]:
    """
    Return the deepest common parent of two normalized absolute paths.

    Returns:
        The shared path, the root alone if only the root is shared, or None
        when the paths have different roots (e.g. different drives)
    """
    if one.anchor != another.anchor:
        return None

    shared = 0
    for mine, theirs in zip(one.parts[1:], another.parts[1:]):
        if mine != theirs:
            break
        shared += 1

    return Path(one.anchor).joinpath(*one.parts[1:shared + 1])


def compute_base_dir(files: Sequence[PathLike]) -> str:
    """
    Compute the deepest directory shared by all the given files.

    Each entry contributes its own directory: an existing directory counts as
    itself, anything else as its parent.

    Args:
        files: Paths of the files to be checked

    Returns:
        Absolute normalized common directory, or "" if there is none

    Raises:
        ValueError: If ``files`` is empty
    """
    if not files:
        raise ValueError("paths must not be empty")

    directories = []
    for file in files:
        path = _normalize(file)
        directories.append(path if path.is_dir() else path.parent)

    common = directories[0]
    for directory in directories[1:]:
        common = common_parent(common, directory)
        if common is None:
            return ""

    return str(common)


def relativize(file_name: str, base_directory: Optional[str]) -> str:
    """
    Express ``file_name`` relative to ``base_directory`` when it lies inside it.

    File names outside the base directory are returned unchanged.
    """
    if not base_directory:
        return file_name

    try:
        return str(_normalize(file_name).relative_to(base_directory))
    except ValueError:
        return file_name
