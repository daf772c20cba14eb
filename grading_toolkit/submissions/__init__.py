# AGPL-3.0 License

"""
Submission intake for LMS exports.

Decodes submission folder names into identity records and pulls student
source files out of submitted archives.
"""

from grading_toolkit.submissions.submission_info import SubmissionInfo, TIMESTAMP_SENTINEL
from grading_toolkit.submissions.folder_name import (
    decode_submission_folder_name,
    parse_submission_time,
)
from grading_toolkit.submissions.intake import (
    collect_submissions,
    latest_submissions,
    submissions_for_assignment,
    submissions_for_group,
    submissions_for_individual,
)
from grading_toolkit.submissions.archive import (
    ExtractedSource,
    extract_source_file,
    find_submission_archive,
)

__all__ = [
    "SubmissionInfo",
    "TIMESTAMP_SENTINEL",
    "decode_submission_folder_name",
    "parse_submission_time",
    "collect_submissions",
    "latest_submissions",
    "submissions_for_assignment",
    "submissions_for_group",
    "submissions_for_individual",
    "ExtractedSource",
    "extract_source_file",
    "find_submission_archive",
]
