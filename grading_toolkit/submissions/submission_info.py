# AGPL-3.0 License

"""
Submission identity record decoded from an LMS export folder name.
"""

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional

# Stands in for a submission time that could not be parsed.
TIMESTAMP_SENTINEL = datetime.min


@dataclass(frozen=True)
class SubmissionInfo:
    """
    Identity of a single submission.

    Attributes:
        course_user_id: Unique id of the submitter (student or group) within the course
        assignment_id: Unique assignment id
        group_id: Group name for a group submission, None for an individual one
        submitter_name: Name ("First Last") of the person who made the submission
        submitted_at: When the submission was made, TIMESTAMP_SENTINEL if unknown
        folder: Path to the submission folder
    """
    course_user_id: str
    assignment_id: str
    group_id: Optional[str]
    submitter_name: str
    submitted_at: datetime
    folder: Path

    @property
    def is_group_submission(self) -> bool:
        return self.group_id is not None

    @property
    def has_timestamp(self) -> bool:
        return self.submitted_at != TIMESTAMP_SENTINEL

    @property
    def first_name(self) -> str:
        parts = self.submitter_name.split()
        return parts[0] if parts else ""

    @property
    def last_name(self) -> str:
        return " ".join(self.submitter_name.split()[1:])
