# AGPL-3.0 License

"""
Decoding of LMS submission folder names.

An exported submission folder is named either

    ``{courseUserId}-{assignmentId} - {submitter} - {timestamp}``

for an individual submission, or

    ``{courseUserId}-{assignmentId} - {group} - {submitter} - {timestamp}``

for a group submission, where the timestamp looks like ``Jan 5, 2026 601 PM``.
"""

import re
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from grading_toolkit.errors import InvalidFormatError
from grading_toolkit.log import get_logger
from grading_toolkit.submissions.submission_info import SubmissionInfo, TIMESTAMP_SENTINEL

# Lazy on the right so an empty segment between two separators survives as "".
SEGMENT_SEPARATOR = re.compile(r"\s+-\s+?")

MONTHS = {
    name: number for number, name in enumerate(
        ["jan", "feb", "mar", "apr", "may", "jun", "jul", "aug", "sep", "oct", "nov", "dec"],
        start=1,
    )
}

# Tried in order; first match wins.
TIMESTAMP_PATTERNS = [
    # 601 PM, 828 PM, 1201 AM
    re.compile(
        r"^(?P<month>[a-z]{3}) (?P<day>\d{1,2}), (?P<year>\d{4}) "
        r"(?P<hour>\d{1,2})(?P<minute>\d{2}) (?P<meridiem>am|pm)$",
        re.IGNORECASE,
    ),
    # 6:01 PM
    re.compile(
        r"^(?P<month>[a-z]{3}) (?P<day>\d{1,2}), (?P<year>\d{4}) "
        r"(?P<hour>\d{1,2}):(?P<minute>\d{2}) (?P<meridiem>am|pm)$",
        re.IGNORECASE,
    ),
]


def _datetime_from_match(match: re.Match) -> Optional[datetime]:
    month = MONTHS.get(match.group("month").lower())
    hour = int(match.group("hour"))
    minute = int(match.group("minute"))
    if month is None or not 1 <= hour <= 12 or minute > 59:
        return None

    hour = hour % 12
    if match.group("meridiem").lower() == "pm":
        hour += 12

    try:
        return datetime(int(match.group("year")), month, int(match.group("day")), hour, minute)
    except ValueError:
        return None


def parse_submission_time(text: str) -> Optional[datetime]:
    """
    Parse an LMS submission timestamp.

    Month names are English abbreviations, matched case-insensitively.
    Runs of whitespace are collapsed before matching.

    Args:
        text: Timestamp text, e.g. ``"Jan 5, 2026 601 PM"`` or ``"Jan 5, 2026 6:01 PM"``

    Returns:
        The parsed date/time, or None if no pattern matches
    """
    normalized = re.sub(r"\s+", " ", text.strip())

    for pattern in TIMESTAMP_PATTERNS:
        match = pattern.match(normalized)
        if match:
            parsed = _datetime_from_match(match)
            if parsed is not None:
                return parsed

    return None


def decode_submission_folder_name(folder: Union[str, Path]) -> SubmissionInfo:
    """
    Decode a submission folder name into a SubmissionInfo.

    Only the last component of ``folder`` is decoded. An unparsable timestamp
    does not fail the decode; ``submitted_at`` is set to TIMESTAMP_SENTINEL.

    Args:
        folder: Submission folder path or bare folder name

    Returns:
        The decoded submission identity

    Raises:
        InvalidFormatError: The name does not have 3 or 4 segments, or the id
            prefix is not ``{courseUserId}-{assignmentId}``
    """
    folder = Path(folder)
    name = folder.name
    parts = SEGMENT_SEPARATOR.split(name)

    if len(parts) not in (3, 4):
        raise InvalidFormatError(f"Unexpected folder name: {name}")

    ids = parts[0].strip().split("-")
    if len(ids) < 2:
        raise InvalidFormatError(f"Unexpected submission id in folder name: {name}")

    course_user_id = ids[0].strip()
    assignment_id = ids[1].strip()
    group_id = parts[1].strip() if len(parts) == 4 else None
    submitter_name = parts[-2].strip()
    timestamp_text = parts[-1].strip()

    submitted_at = parse_submission_time(timestamp_text)
    if submitted_at is None:
        get_logger().warning(f"Unparsable submission time '{timestamp_text}' in folder name: {name}")
        submitted_at = TIMESTAMP_SENTINEL

    return SubmissionInfo(
        course_user_id=course_user_id,
        assignment_id=assignment_id,
        group_id=group_id,
        submitter_name=submitter_name,
        submitted_at=submitted_at,
        folder=folder,
    )
