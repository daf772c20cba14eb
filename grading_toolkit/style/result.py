# AGPL-3.0 License

"""
Outcome of one style compliance run.
"""

from dataclasses import dataclass, field
from io import StringIO
from typing import Optional

from grading_toolkit.style.severity import SeverityLevel
from grading_toolkit.style.violation import Violation


def _zero_counters() -> dict[SeverityLevel, int]:
    return {level: 0 for level in SeverityLevel}


@dataclass
class Result:
    """
    Result of checking a set of source files against a style ruleset.

    A fresh Result reports not compliant; an empty file list is "not run",
    not "compliant".

    Attributes:
        is_compliant: True when the run finished with no violations
        violations: Violations in the order the checker reported them
        violation_counters: Number of violations per severity level, every level present
        report: Header, one line per violation, and the tally block
        summary: Header and tally block only
        base_directory: Common directory of the checked files, used to shorten file names
    """
    is_compliant: bool = False
    violations: list[Violation] = field(default_factory=list)
    violation_counters: dict[SeverityLevel, int] = field(default_factory=_zero_counters)
    report: StringIO = field(default_factory=StringIO, repr=False)
    summary: StringIO = field(default_factory=StringIO, repr=False)
    base_directory: Optional[str] = None

    @property
    def report_text(self) -> str:
        return self.report.getvalue()

    @property
    def summary_text(self) -> str:
        return self.summary.getvalue()

    @property
    def violation_count(self) -> int:
        return len(self.violations)

    def __str__(self) -> str:
        return self.report_text
