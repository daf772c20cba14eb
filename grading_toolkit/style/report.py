# AGPL-3.0 License

"""
Text rendering of a style compliance Result.
"""

from grading_toolkit.style.result import Result
from grading_toolkit.style.severity import SeverityLevel

REPORT_HEADER = "Checkstyle Report:\n\n"
NO_VIOLATIONS_TEXT = "  ✔ No style violations.\n"


def _plural(count: int) -> str:
    return "" if count == 1 else "s"


def violations_header(count: int) -> str:
    return f"\n  {count:,} style violation{_plural(count)}:\n"


def tally_lines(result: Result) -> str:
    """
    One line per severity level, ascending, including levels with no violations.
    """
    lines = []
    for level in SeverityLevel:
        count = result.violation_counters.get(level, 0)
        shown = "no" if count == 0 else f"{count:5,d}"
        lines.append(f"\t{shown:>5} {level} violation{_plural(count)}\n")
    return "".join(lines)


def tally_violations(result: Result) -> None:
    """Set the verdict and per-severity counters from the collected violations."""
    result.is_compliant = not result.violations
    for violation in result.violations:
        result.violation_counters[violation.severity] += 1


def render(result: Result) -> None:
    """
    Append the report and summary text for a finished run.

    The report lists every violation in the order it was reported; the
    summary has the same header and tallies but no per-violation lines.
    """
    report = result.report
    summary = result.summary

    report.write(REPORT_HEADER)
    summary.write(REPORT_HEADER)

    if result.is_compliant:
        report.write(NO_VIOLATIONS_TEXT)
        summary.write(NO_VIOLATIONS_TEXT)
    else:
        for violation in result.violations:
            report.write(f"  {violation}\n")

        header = violations_header(len(result.violations))
        report.write(header)
        summary.write(header)

    tallies = tally_lines(result)
    report.write(tallies)
    summary.write(tallies)
