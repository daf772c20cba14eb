# AGPL-3.0 License

"""Grading toolkit CLI - Main entrypoint."""

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from grading_toolkit.config_loader import get_settings
from grading_toolkit.errors import GradingToolkitError
from grading_toolkit.log import LoggingFormat, setup_logger
from grading_toolkit.style import find_source_files, locate_ruleset, run_compliance_check
from grading_toolkit.submissions import (
    collect_submissions,
    latest_submissions,
    submissions_for_assignment,
    submissions_for_group,
    submissions_for_individual,
)

app = typer.Typer(
    name="grading-toolkit",
    help="Tools for grading student programming assignments.",
    no_args_is_help=True,
    pretty_exceptions_enable=False,
)

console = Console()
err_console = Console(stderr=True)


@app.callback()
def callback(
    verbose: bool = typer.Option(False, "-V", "--verbose", help="Enable debug logging"),
) -> None:
    """Configure logging before any command runs."""
    settings = get_settings().get("config", {})
    level = "DEBUG" if verbose else settings.get("log_level", "INFO")
    setup_logger(level, LoggingFormat(settings.get("log_format", "CONSOLE").upper()))


@app.command()
def style(
    files: Annotated[
        Optional[list[Path]],
        typer.Argument(help="Source files to check (default: discover under --root)"),
    ] = None,
    ruleset: Annotated[
        Optional[Path],
        typer.Option("--ruleset", "-r", help="Ruleset file (default: search the configured path)"),
    ] = None,
    root: Annotated[
        Path,
        typer.Option("--root", help="Directory to discover source files in"),
    ] = Path("."),
    summary: Annotated[
        bool,
        typer.Option("--summary", "-s", help="Print only the tallies, not every violation"),
    ] = False,
) -> None:
    """Check source files against the coding style ruleset.

    Exits 0 when compliant, 1 when violations were found, 2 on error.
    """
    try:
        if ruleset is None:
            selection = locate_ruleset()
            if selection.ambiguous:
                listing = "\n\t".join(str(c) for c in selection.candidates)
                err_console.print(
                    f"[yellow]found {len(selection.candidates)} ruleset files:[/yellow]\n\t{listing}\n"
                    f"using the first:\n\t{selection.path}\n",
                    highlight=False,
                )
            ruleset = selection.path

        source_files = list(files) if files else find_source_files(root)
        typer.echo(f"\nsource file{'' if len(source_files) == 1 else 's'}:")
        for source_file in source_files:
            typer.echo(str(source_file))
        typer.echo("")

        result = run_compliance_check(ruleset, source_files)
    except (GradingToolkitError, OSError) as e:
        err_console.print(f"[red]Error:[/red] {e}", highlight=False)
        raise typer.Exit(2) from e

    if not source_files:
        err_console.print("[yellow]No source files to check.[/yellow]")
        raise typer.Exit(1)

    typer.echo(result.summary_text if summary else result.report_text)
    raise typer.Exit(0 if result.is_compliant else 1)


@app.command()
def submissions(
    base_folder: Annotated[
        Path,
        typer.Argument(help="LMS export folder holding one folder per submission",
                       exists=True, file_okay=False, dir_okay=True),
    ],
    assignment: Annotated[
        Optional[str],
        typer.Option("--assignment", "-a", help="Only list submissions to this assignment id"),
    ] = None,
    group: Annotated[
        Optional[str],
        typer.Option("--group", "-g", help="Only list submissions made by this group"),
    ] = None,
    user: Annotated[
        Optional[str],
        typer.Option("--user", "-u", help="Only list individual submissions by this course user id"),
    ] = None,
    latest: Annotated[
        bool,
        typer.Option("--latest", help="Only list the newest submission per submitter"),
    ] = False,
) -> None:
    """List the submissions found in an LMS export folder."""
    found = collect_submissions(base_folder)
    if assignment is not None:
        found = submissions_for_assignment(found, assignment)
    if group is not None:
        found = submissions_for_group(found, group)
    if user is not None:
        found = submissions_for_individual(found, user)
    if latest:
        found = latest_submissions(found)

    table = Table(title=f"{len(found)} submission{'' if len(found) == 1 else 's'}")
    table.add_column("User")
    table.add_column("Assignment")
    table.add_column("Group")
    table.add_column("Submitter")
    table.add_column("Submitted")

    for info in found.values():
        table.add_row(
            info.course_user_id,
            info.assignment_id,
            info.group_id or "n/a",
            info.submitter_name,
            info.submitted_at.strftime("%Y-%m-%d %H:%M") if info.has_timestamp else "unknown",
        )

    console.print(table)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
