# AGPL-3.0 License

"""
Collection of the submissions found in an LMS export folder.
"""

from pathlib import Path
from typing import Union

from grading_toolkit.errors import InvalidFormatError
from grading_toolkit.log import get_logger
from grading_toolkit.submissions.folder_name import decode_submission_folder_name
from grading_toolkit.submissions.submission_info import SubmissionInfo


def collect_submissions(base_folder: Union[str, Path]) -> dict[str, SubmissionInfo]:
    """
    Decode every submission folder directly inside an LMS export folder.

    Folders whose names cannot be decoded are skipped with a warning.

    Args:
        base_folder: The export folder holding one sub-folder per submission

    Returns:
        Submissions keyed by folder name, in folder-name order
    """
    logger = get_logger()
    base_path = Path(base_folder)
    logger.info(f"Collecting submissions from {base_path.absolute()}")

    submissions: dict[str, SubmissionInfo] = {}
    for folder in sorted(p for p in base_path.iterdir() if p.is_dir()):
        try:
            info = decode_submission_folder_name(folder)
        except InvalidFormatError as e:
            logger.warning(f"Skipping folder: {e}")
            continue

        logger.debug(f"Decoded {folder.name}: {info}")
        submissions[folder.name] = info

    logger.info(f"Collected {len(submissions)} submissions")
    return submissions


def submissions_for_assignment(
    submissions: dict[str, SubmissionInfo],
    assignment_id: str
) -> dict[str, SubmissionInfo]:
    """Keep only the submissions made to the given assignment."""
    return {
        key: info for key, info in submissions.items()
        if info.assignment_id == str(assignment_id)
    }


def submissions_for_group(
    submissions: dict[str, SubmissionInfo],
    group_id: str
) -> dict[str, SubmissionInfo]:
    """Keep only the submissions made by the given group."""
    return {
        key: info for key, info in submissions.items()
        if info.group_id == group_id
    }


def submissions_for_individual(
    submissions: dict[str, SubmissionInfo],
    course_user_id: str
) -> dict[str, SubmissionInfo]:
    """Keep only the individual (non-group) submissions made by the given user."""
    return {
        key: info for key, info in submissions.items()
        if info.group_id is None and info.course_user_id == str(course_user_id)
    }


def latest_submissions(submissions: dict[str, SubmissionInfo]) -> dict[str, SubmissionInfo]:
    """
    Keep the newest submission per submitter and assignment.

    Submissions with an unknown submission time lose to any dated one.
    Order of the surviving entries follows the input order.

    Args:
        submissions: Decoded submissions keyed by folder name

    Returns:
        Filtered submissions keyed by folder name
    """
    newest: dict[tuple[str, str], str] = {}
    for key, info in submissions.items():
        identity = (info.course_user_id, info.assignment_id)
        current = newest.get(identity)
        if current is None or info.submitted_at > submissions[current].submitted_at:
            newest[identity] = key

    keep = set(newest.values())
    return {key: info for key, info in submissions.items() if key in keep}
