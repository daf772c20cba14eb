# AGPL-3.0 License

"""
Shared fixtures for style compliance tests.
"""

import pytest

from grading_toolkit.style.linter import Linter
from grading_toolkit.style.severity import SeverityLevel
from grading_toolkit.style.violation import AuditEvent


class ScriptedLinter(Linter):
    """
    Linter that replays a fixed list of (file, line, message, severity) events.
    """

    def __init__(self, events=None, error=None):
        super().__init__()
        self.events = events or []
        self.error = error
        self.processed = None
        self.destroyed = False

    def process(self, files):
        self.processed = list(files)
        self.fire_audit_started()
        for file_name, line, message, severity in self.events:
            self.fire_error(AuditEvent(
                file_name=file_name,
                line=line,
                message=message,
                severity=severity,
                source="TestCheck",
            ))
            if self.error is not None:
                raise self.error
        self.fire_audit_finished()
        return len(self.events)

    def destroy(self):
        super().destroy()
        self.destroyed = True


@pytest.fixture
def scripted_linter():
    """Factory for linters that replay scripted events."""
    def _make(events=None, error=None):
        return ScriptedLinter(events, error)
    return _make


@pytest.fixture
def all_levels():
    return list(SeverityLevel)
