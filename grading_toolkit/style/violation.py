# AGPL-3.0 License

"""
Style checker events and the violations built from them.
"""

from dataclasses import dataclass, field
from typing import Optional

from grading_toolkit.style.severity import SeverityLevel


@dataclass(frozen=True)
class AuditEvent:
    """
    A raw event reported by the style checker.

    File-level events carry no line, message or severity.
    """
    file_name: Optional[str] = None
    line: int = 0
    column: int = 0
    message: str = ""
    severity: SeverityLevel = SeverityLevel.ERROR
    source: Optional[str] = None  # id of the rule that fired


@dataclass(frozen=True)
class Violation:
    """
    A single style rule infraction.

    Attributes:
        file: File the violation was found in
        line: 1-based line number
        message: Description of the violation
        severity: Severity level of the violation
        event: The raw checker event, kept for tools that need more detail
    """
    file: str
    line: int
    message: str
    severity: SeverityLevel
    event: Optional[AuditEvent] = field(default=None, repr=False, compare=False)

    @classmethod
    def from_event(cls, event: AuditEvent) -> "Violation":
        return cls(
            file=event.file_name or "",
            line=event.line,
            message=event.message,
            severity=event.severity,
            event=event,
        )

    def __str__(self) -> str:
        return f"{self.file}:{self.line:5,d}  {str(self.severity):<7}  {self.message}"
