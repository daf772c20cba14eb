# AGPL-3.0 License

"""
Style compliance checking.

Runs an external style checker over student source files, collects the
violations it reports, and renders a severity-tallied report.
"""

from grading_toolkit.style.severity import SeverityLevel
from grading_toolkit.style.violation import AuditEvent, Violation
from grading_toolkit.style.result import Result
from grading_toolkit.style.listener import AuditListener, ViolationCollector
from grading_toolkit.style.linter import Linter
from grading_toolkit.style.checkstyle import CheckstyleLinter
from grading_toolkit.style.compliance_checker import run_compliance_check
from grading_toolkit.style.path_utils import compute_base_dir
from grading_toolkit.style.ruleset import RulesetSelection, locate_ruleset
from grading_toolkit.style.sources import find_source_files

__all__ = [
    "SeverityLevel",
    "AuditEvent",
    "Violation",
    "Result",
    "AuditListener",
    "ViolationCollector",
    "Linter",
    "CheckstyleLinter",
    "run_compliance_check",
    "compute_base_dir",
    "RulesetSelection",
    "locate_ruleset",
    "find_source_files",
]
