# AGPL-3.0 License

"""
Listeners notified by a style checker while it runs.
"""

import threading
from typing import Optional

from grading_toolkit.log import get_logger
from grading_toolkit.style.violation import AuditEvent, Violation


class AuditListener:
    """
    Receiver of style checker events.

    Every hook is a no-op; subclasses override the ones they care about.
    """

    def audit_started(self, event: AuditEvent) -> None:
        pass

    def audit_finished(self, event: AuditEvent) -> None:
        pass

    def file_started(self, event: AuditEvent) -> None:
        pass

    def file_finished(self, event: AuditEvent) -> None:
        pass

    def add_error(self, event: AuditEvent) -> None:
        pass

    def add_exception(self, event: AuditEvent, error: Optional[BaseException]) -> None:
        pass


class ViolationCollector(AuditListener):
    """
    Appends a Violation for every reported error, in arrival order.

    The list is guarded by a lock so checkers that report from a worker
    thread are safe as well.
    """

    def __init__(self, violations: Optional[list[Violation]] = None):
        """
        Initialize the collector.

        Args:
            violations: List to append to (a new one if omitted)
        """
        self.violations = violations if violations is not None else []
        self._lock = threading.Lock()
        self.logger = get_logger()

    def add_error(self, event: AuditEvent) -> None:
        violation = Violation.from_event(event)
        with self._lock:
            self.violations.append(violation)
        self.logger.debug(f"Style violation: {violation}")

    def add_exception(self, event: AuditEvent, error: Optional[BaseException]) -> None:
        self.logger.warning(f"Style checker raised an exception for {event.file_name}: {error or event.message}")
