# AGPL-3.0 License

"""
Extraction of a student's source file from a submitted archive.
"""

import shutil
import zipfile
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from grading_toolkit.config_loader import get_settings
from grading_toolkit.errors import SubmissionArchiveError
from grading_toolkit.log import get_logger


@dataclass(frozen=True)
class ExtractedSource:
    """
    A source file copied out of a submission archive.
    """
    path: Path  # where the file was written
    entry_name: str  # name of the entry inside the archive


def find_submission_archive(submission_folder: Union[str, Path], suffix: Optional[str] = None) -> Optional[Path]:
    """
    Find the archive uploaded in a submission folder.

    When several archives are present the most recently modified one wins.

    Args:
        submission_folder: Folder to search (not recursive)
        suffix: Archive file suffix (defaults to config)

    Returns:
        Path to the archive, or None if there is none
    """
    if suffix is None:
        suffix = get_settings().get("submissions", {}).get("archive_suffix", ".zip")

    archives = [
        p for p in Path(submission_folder).iterdir()
        if p.is_file() and p.name.lower().endswith(suffix.lower())
    ]
    if not archives:
        return None

    if len(archives) > 1:
        get_logger().warning(
            f"Found {len(archives)} archives in {submission_folder}, using the newest"
        )
    return max(archives, key=lambda p: p.stat().st_mtime)


def _entry_names(archive: zipfile.ZipFile) -> list[str]:
    return [info.filename.replace("\\", "/") for info in archive.infolist() if not info.is_dir()]


def extract_source_file(
    submission_folder: Union[str, Path],
    dest_dir: Union[str, Path],
    file_name: str,
    expected_root: Optional[str] = None
) -> ExtractedSource:
    """
    Copy a named source file out of a submission's archive.

    An entry under ``expected_root`` is preferred; otherwise the file must be
    unique inside the archive.

    Args:
        submission_folder: Submission folder holding the archive
        dest_dir: Directory to write the file to (created if needed)
        file_name: Bare file name to look for, e.g. ``"LinkedBag.java"``
        expected_root: Source root the file should live under (defaults to config)

    Returns:
        Where the file was written and which entry it came from

    Raises:
        SubmissionArchiveError: No archive, no such file, or more than one candidate
    """
    if expected_root is None:
        expected_root = get_settings().get("submissions", {}).get("expected_source_root", "src/main/java/")

    archive_path = find_submission_archive(submission_folder)
    if archive_path is None:
        raise SubmissionArchiveError(f"No archive found in {submission_folder}")

    with zipfile.ZipFile(archive_path) as archive:
        names = _entry_names(archive)
        matches = [n for n in names if n == file_name or n.endswith("/" + file_name)]
        if not matches:
            raise SubmissionArchiveError(f"{file_name} not found inside {archive_path}")

        under_root = [n for n in matches if f"/{expected_root}" in f"/{n}"]
        candidates = under_root or matches
        if len(candidates) > 1:
            listing = "\n".join(f"  - {n}" for n in candidates)
            raise SubmissionArchiveError(
                f"Ambiguous {file_name} in {archive_path}\nCandidates:\n{listing}"
            )

        entry_name = candidates[0]
        out_file = Path(dest_dir) / file_name
        out_file.parent.mkdir(parents=True, exist_ok=True)
        with archive.open(_zip_entry(archive, entry_name)) as src, open(out_file, "wb") as dst:
            shutil.copyfileobj(src, dst)

    get_logger().debug(f"Extracted {entry_name} from {archive_path} to {out_file}")
    return ExtractedSource(path=out_file, entry_name=entry_name)


def _zip_entry(archive: zipfile.ZipFile, normalized_name: str) -> zipfile.ZipInfo:
    for info in archive.infolist():
        if info.filename.replace("\\", "/") == normalized_name:
            return info
    raise SubmissionArchiveError(f"Entry {normalized_name} disappeared from archive")
