# AGPL-3.0 License

"""
Unit tests for the Checkstyle adapter.
"""

import subprocess
from pathlib import Path

import pytest

from grading_toolkit.errors import LinterFailure
from grading_toolkit.style.checkstyle import CheckstyleLinter
from grading_toolkit.style.compliance_checker import run_compliance_check
from grading_toolkit.style.listener import AuditListener
from grading_toolkit.style.severity import SeverityLevel

REPORT = """<?xml version="1.0" encoding="UTF-8"?>
<checkstyle version="10.17.0">
<file name="{base}/bags/LinkedBag.java">
<error line="12" column="5" severity="warning" message="&apos;5&apos; is a magic number." source="com.puppycrawl.tools.checkstyle.checks.coding.MagicNumberCheck"/>
<error line="3" severity="error" message="Missing a Javadoc comment." source="com.puppycrawl.tools.checkstyle.checks.javadoc.MissingJavadocTypeCheck"/>
</file>
<file name="{base}/bags/Node.java">
<exception>
<![CDATA[java.lang.IllegalStateException: cannot parse]]>
</exception>
</file>
<file name="{base}/bags/Clean.java">
</file>
</checkstyle>
"""


class RecordingListener(AuditListener):
    """Records the callbacks it receives."""

    def __init__(self):
        self.calls = []

    def audit_started(self, event):
        self.calls.append(("audit_started", None))

    def audit_finished(self, event):
        self.calls.append(("audit_finished", None))

    def file_started(self, event):
        self.calls.append(("file_started", event.file_name))

    def file_finished(self, event):
        self.calls.append(("file_finished", event.file_name))

    def add_error(self, event):
        self.calls.append(("add_error", (event.file_name, event.line, event.severity)))

    def add_exception(self, event, error):
        self.calls.append(("add_exception", event.message))


class TestReplay:
    """Tests for replaying Checkstyle XML reports."""

    def test_events_in_document_order(self, tmp_path):
        """Test that report entries are replayed as callbacks in document order."""
        linter = CheckstyleLinter(command=["checkstyle"])
        linter.set_base_directory(str(tmp_path / "bags"))
        listener = RecordingListener()
        linter.add_listener(listener)

        errors = linter.replay(REPORT.format(base=tmp_path))

        assert errors == 2
        assert listener.calls == [
            ("audit_started", None),
            ("file_started", "LinkedBag.java"),
            ("add_error", ("LinkedBag.java", 12, SeverityLevel.WARNING)),
            ("add_error", ("LinkedBag.java", 3, SeverityLevel.ERROR)),
            ("file_finished", "LinkedBag.java"),
            ("file_started", "Node.java"),
            ("add_exception", "java.lang.IllegalStateException: cannot parse"),
            ("file_finished", "Node.java"),
            ("file_started", "Clean.java"),
            ("file_finished", "Clean.java"),
            ("audit_finished", None),
        ]

    def test_malformed_report(self):
        """Test that unparsable XML raises LinterFailure."""
        with pytest.raises(LinterFailure):
            CheckstyleLinter(command=["checkstyle"]).replay("<checkstyle><file")

    def test_unexpected_root(self):
        """Test that a non-checkstyle root element raises LinterFailure."""
        with pytest.raises(LinterFailure):
            CheckstyleLinter(command=["checkstyle"]).replay("<report/>")

    def test_unknown_severity(self):
        """Test that an unknown severity raises LinterFailure."""
        report = '<checkstyle><file name="A.java"><error line="1" severity="fatal" message="m"/></file></checkstyle>'
        with pytest.raises(LinterFailure):
            CheckstyleLinter(command=["checkstyle"]).replay(report)

    @pytest.mark.parametrize("position", ['line="x"', 'line="1" column="3.5"'])
    def test_non_numeric_position(self, position):
        """Test that a non-numeric line or column raises LinterFailure."""
        report = (
            f'<checkstyle><file name="A.java"><error {position} severity="error" message="m"/>'
            "</file></checkstyle>"
        )
        with pytest.raises(LinterFailure, match="Bad position"):
            CheckstyleLinter(command=["checkstyle"]).replay(report)


class TestProcess:
    """Tests for running the Checkstyle process."""

    def _fake_run(self, report_text, returncode=0, stderr=""):
        calls = []

        def fake_run(args, **kwargs):
            calls.append((args, kwargs))
            if report_text is not None:
                output = Path(args[args.index("-o") + 1])
                output.write_text(report_text, encoding="utf-8")
            return subprocess.CompletedProcess(args, returncode, stdout="", stderr=stderr)

        return fake_run, calls

    def test_runs_configured_command(self, tmp_path, monkeypatch):
        """Test that the command line carries the ruleset, XML output and files."""
        fake_run, calls = self._fake_run(REPORT.format(base=tmp_path), returncode=1)
        monkeypatch.setattr(subprocess, "run", fake_run)
        source = tmp_path / "bags" / "LinkedBag.java"

        result = run_compliance_check(
            tmp_path / "checkstyle.xml",
            [source],
            linter=CheckstyleLinter(command=["java", "-jar", "cs.jar"], timeout=30),
        )

        args, kwargs = calls[0]
        assert args[:3] == ["java", "-jar", "cs.jar"]
        assert args[args.index("-c") + 1] == str(tmp_path / "checkstyle.xml")
        assert args[args.index("-f") + 1] == "xml"
        assert args[-1] == str(source)
        assert kwargs["timeout"] == 30

        assert not result.is_compliant
        assert result.violation_counters[SeverityLevel.ERROR] == 1
        assert result.violation_counters[SeverityLevel.WARNING] == 1
        assert "LinkedBag.java:   12  warning  '5' is a magic number." in result.report_text

    def test_zero_timeout_means_wait_forever(self):
        """Test that a zero timeout disables the process timeout."""
        assert CheckstyleLinter(command=["checkstyle"], timeout=0).timeout is None

    def test_missing_report_fails(self, tmp_path, monkeypatch):
        """Test that a run leaving no report raises LinterFailure."""
        fake_run, _ = self._fake_run(None, returncode=254, stderr="cannot initialize module TreeWalker")
        monkeypatch.setattr(subprocess, "run", fake_run)
        linter = CheckstyleLinter(command=["checkstyle"])
        linter.configure(tmp_path / "checkstyle.xml")

        with pytest.raises(LinterFailure) as excinfo:
            linter.process([tmp_path / "A.java"])

        assert "TreeWalker" in str(excinfo.value)

    def test_command_not_found(self, tmp_path, monkeypatch):
        """Test that a missing executable raises LinterFailure."""
        def fake_run(args, **kwargs):
            raise FileNotFoundError(args[0])

        monkeypatch.setattr(subprocess, "run", fake_run)
        linter = CheckstyleLinter(command=["no-such-java"])
        linter.configure(tmp_path / "checkstyle.xml")

        with pytest.raises(LinterFailure):
            linter.process([tmp_path / "A.java"])

    def test_timeout(self, tmp_path, monkeypatch):
        """Test that an expired timeout raises LinterFailure."""
        def fake_run(args, **kwargs):
            raise subprocess.TimeoutExpired(args, kwargs["timeout"])

        monkeypatch.setattr(subprocess, "run", fake_run)
        linter = CheckstyleLinter(command=["checkstyle"], timeout=5)
        linter.configure(tmp_path / "checkstyle.xml")

        with pytest.raises(LinterFailure):
            linter.process([tmp_path / "A.java"])

    def test_requires_ruleset(self, tmp_path):
        """Test that processing without a ruleset raises LinterFailure."""
        with pytest.raises(LinterFailure):
            CheckstyleLinter(command=["checkstyle"]).process([tmp_path / "A.java"])

    def test_defaults_from_settings(self):
        """Test that command and timeout default to the configured values."""
        linter = CheckstyleLinter()
        assert linter.command == ["java", "-jar", "checkstyle.jar"]
        assert linter.timeout is None
