# AGPL-3.0 License

"""
Checkstyle driven as an external process.

Checkstyle is run with its XML formatter writing to a temporary file; the
report is then replayed to the listeners in document order.
"""

import subprocess
import tempfile
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Optional, Sequence

from grading_toolkit.config_loader import get_settings
from grading_toolkit.errors import LinterFailure
from grading_toolkit.log import get_logger
from grading_toolkit.style.linter import Linter
from grading_toolkit.style.severity import SeverityLevel
from grading_toolkit.style.violation import AuditEvent


class CheckstyleLinter(Linter):
    """
    Runs Checkstyle over a list of files.

    Checkstyle's exit status is the number of error-level violations, so a
    non-zero status alone is not treated as a failure; a missing or malformed
    report is.
    """

    def __init__(self, command: Optional[Sequence[str]] = None, timeout: Optional[float] = None):
        """
        Initialize the adapter.

        Args:
            command: Command that starts Checkstyle (defaults to config)
            timeout: Seconds to wait for Checkstyle, None or 0 to wait forever (defaults to config)
        """
        super().__init__()
        settings = get_settings().get("style", {})
        if command is None:
            command = settings.get("checkstyle_command", ["java", "-jar", "checkstyle.jar"])
        if timeout is None:
            timeout = settings.get("timeout_seconds", 0)

        self.command = list(command)
        self.timeout = timeout or None
        self.logger = get_logger()

    def process(self, files: list[Path]) -> int:
        if self.ruleset is None:
            raise LinterFailure("Checkstyle has not been configured with a ruleset")

        with tempfile.TemporaryDirectory(prefix="checkstyle-") as temp_dir:
            report_path = Path(temp_dir) / "checkstyle-result.xml"
            args = self.command + [
                "-c", str(self.ruleset),
                "-f", "xml",
                "-o", str(report_path),
            ] + [str(f) for f in files]

            self.logger.debug(f"Running: {' '.join(args)}")
            try:
                completed = subprocess.run(
                    args,
                    capture_output=True,
                    text=True,
                    timeout=self.timeout,
                    check=False,
                )
            except FileNotFoundError as e:
                raise LinterFailure(f"Cannot start Checkstyle ({self.command[0]}): {e}") from e
            except subprocess.TimeoutExpired as e:
                raise LinterFailure(f"Checkstyle did not finish within {self.timeout} seconds") from e

            if not report_path.exists() or report_path.stat().st_size == 0:
                details = (completed.stderr or completed.stdout or "").strip()
                raise LinterFailure(
                    f"Checkstyle exited with status {completed.returncode} without a report: {details}"
                )

            report_xml = report_path.read_text(encoding="utf-8")

        return self.replay(report_xml)

    def replay(self, report_xml: str) -> int:
        """
        Deliver the events in a Checkstyle XML report to the listeners.

        Args:
            report_xml: Text of the report

        Returns:
            Number of error events delivered

        Raises:
            LinterFailure: The report is not well-formed Checkstyle XML
        """
        try:
            root = ET.fromstring(report_xml)
        except ET.ParseError as e:
            raise LinterFailure(f"Malformed Checkstyle report: {e}") from e

        if root.tag != "checkstyle":
            raise LinterFailure(f"Unexpected Checkstyle report root element: <{root.tag}>")

        errors = 0
        self.fire_audit_started()
        for file_element in root.iter("file"):
            file_name = file_element.get("name", "")
            self.fire_file_started(file_name)

            for child in file_element:
                if child.tag == "error":
                    self.fire_error(self._error_event(file_name, child))
                    errors += 1
                elif child.tag == "exception":
                    self.fire_exception(
                        AuditEvent(file_name=file_name, message=(child.text or "").strip())
                    )

            self.fire_file_finished(file_name)
        self.fire_audit_finished()

        return errors

    @staticmethod
    def _error_event(file_name: str, element: ET.Element) -> AuditEvent:
        try:
            severity = SeverityLevel.parse(element.get("severity", "error"))
        except ValueError as e:
            raise LinterFailure(f"Unknown severity in Checkstyle report: {element.get('severity')}") from e

        try:
            line = int(element.get("line", "0"))
            column = int(element.get("column", "0"))
        except ValueError as e:
            raise LinterFailure(
                f"Bad position in Checkstyle report for {file_name}: "
                f"line={element.get('line')!r} column={element.get('column')!r}"
            ) from e

        return AuditEvent(
            file_name=file_name,
            line=line,
            column=column,
            message=element.get("message", ""),
            severity=severity,
            source=element.get("source"),
        )
