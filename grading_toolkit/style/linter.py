# AGPL-3.0 License

"""
Base class for the external style checkers the toolkit can drive.
"""

from abc import ABC, abstractmethod
from dataclasses import replace
from pathlib import Path
from typing import Optional

from grading_toolkit.style.listener import AuditListener
from grading_toolkit.style.path_utils import relativize
from grading_toolkit.style.violation import AuditEvent


class Linter(ABC):
    """
    Abstract style checker.

    A linter is configured with a ruleset, given listeners, and then asked to
    process a list of files. Events must be delivered to the listeners on the
    thread that called ``process()``, before it returns.

    Using a linter as a context manager guarantees ``destroy()`` runs, which
    drops every registered listener.
    """

    def __init__(self):
        self.listeners: list[AuditListener] = []
        self.ruleset: Optional[Path] = None
        self.base_directory: Optional[str] = None

    def configure(self, ruleset: Path) -> None:
        """
        Bind the linter to a ruleset.

        Args:
            ruleset: Path to the ruleset, in whatever format the linter reads
        """
        self.ruleset = Path(ruleset)

    def set_base_directory(self, base_directory: Optional[str]) -> None:
        """File names reported to listeners are made relative to this directory."""
        self.base_directory = base_directory or None

    def add_listener(self, listener: AuditListener) -> None:
        self.listeners.append(listener)

    def remove_listener(self, listener: AuditListener) -> None:
        if listener in self.listeners:
            self.listeners.remove(listener)

    def destroy(self) -> None:
        """Release the linter's resources and listeners."""
        self.listeners.clear()

    def _relative(self, event: AuditEvent) -> AuditEvent:
        if event.file_name is None:
            return event
        return replace(event, file_name=relativize(event.file_name, self.base_directory))

    def fire_audit_started(self) -> None:
        event = AuditEvent()
        for listener in list(self.listeners):
            listener.audit_started(event)

    def fire_audit_finished(self) -> None:
        event = AuditEvent()
        for listener in list(self.listeners):
            listener.audit_finished(event)

    def fire_file_started(self, file_name: str) -> None:
        event = self._relative(AuditEvent(file_name=file_name))
        for listener in list(self.listeners):
            listener.file_started(event)

    def fire_file_finished(self, file_name: str) -> None:
        event = self._relative(AuditEvent(file_name=file_name))
        for listener in list(self.listeners):
            listener.file_finished(event)

    def fire_error(self, event: AuditEvent) -> None:
        event = self._relative(event)
        for listener in list(self.listeners):
            listener.add_error(event)

    def fire_exception(self, event: AuditEvent, error: Optional[BaseException] = None) -> None:
        event = self._relative(event)
        for listener in list(self.listeners):
            listener.add_exception(event, error)

    @abstractmethod
    def process(self, files: list[Path]) -> int:
        """
        Check the files, reporting events to the listeners.

        Args:
            files: Absolute paths of the files to check

        Returns:
            Number of errors reported
        """
        pass

    def __enter__(self) -> "Linter":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.destroy()
