# AGPL-3.0 License

"""
Unit tests for report rendering.
"""

from grading_toolkit.style.report import render, tally_violations
from grading_toolkit.style.result import Result
from grading_toolkit.style.severity import SeverityLevel
from grading_toolkit.style.violation import Violation


def _finished(violations):
    result = Result()
    result.violations.extend(violations)
    tally_violations(result)
    render(result)
    return result


class TestRender:
    """Tests for render."""

    def test_compliant_report(self):
        """Test the report of a compliant run."""
        result = _finished([])

        assert result.report_text.startswith("Checkstyle Report:\n\n  ✔ No style violations.\n")
        assert result.summary_text == result.report_text
        assert "style violation:" not in result.report_text

    def test_tally_line_per_level_even_when_compliant(self):
        """Test that every level gets a tally line on a compliant run."""
        result = _finished([])

        tallies = [line for line in result.summary_text.splitlines() if line.startswith("\t")]
        assert tallies == [f"\t   no {level} violations" for level in SeverityLevel]

    def test_violation_lines_in_reported_order(self):
        """Test that violation lines follow the reported order."""
        result = _finished([
            Violation("B.java", 7, "second file first", SeverityLevel.WARNING),
            Violation("A.java", 1200, "then this", SeverityLevel.ERROR),
        ])

        lines = result.report_text.splitlines()
        assert lines[2] == "  B.java:    7  warning  second file first"
        assert lines[3] == "  A.java:1,200  error    then this"

    def test_summary_omits_violation_lines(self):
        """Test that the summary leaves out the violation lines."""
        result = _finished([Violation("A.java", 1, "unused import", SeverityLevel.INFO)])

        assert "unused import" in result.report_text
        assert "unused import" not in result.summary_text
        assert "  1 style violation:" in result.summary_text

    def test_singular_and_plural_tallies(self):
        """Test singular and plural wording of the tallies."""
        result = _finished([
            Violation("A.java", 1, "a", SeverityLevel.ERROR),
            Violation("A.java", 2, "b", SeverityLevel.WARNING),
            Violation("A.java", 3, "c", SeverityLevel.WARNING),
        ])

        tallies = [line for line in result.summary_text.splitlines() if line.startswith("\t")]
        assert tallies == [
            "\t   no ignore violations",
            "\t   no info violations",
            "\t    2 warning violations",
            "\t    1 error violation",
        ]
        assert "  3 style violations:" in result.summary_text

    def test_str_is_report(self):
        """Test that str() of a result is its report."""
        result = _finished([Violation("A.java", 1, "a", SeverityLevel.ERROR)])
        assert str(result) == result.report_text


class TestResultDefaults:
    """Tests for a fresh Result."""

    def test_every_level_counted_from_zero(self):
        """Test that a new result has a zero counter for every level."""
        result = Result()

        assert list(result.violation_counters) == list(SeverityLevel)
        assert set(result.violation_counters.values()) == {0}
        assert not result.is_compliant

    def test_results_do_not_share_state(self):
        """Test that separate results do not share lists or buffers."""
        first = Result()
        second = Result()
        first.violations.append(Violation("A.java", 1, "a", SeverityLevel.ERROR))
        first.violation_counters[SeverityLevel.ERROR] += 1

        assert second.violations == []
        assert second.violation_counters[SeverityLevel.ERROR] == 0
