# AGPL-3.0 License

"""
Style compliance checking of student source files.
"""

from pathlib import Path
from typing import Optional, Sequence, Union

from grading_toolkit.log import get_logger
from grading_toolkit.style.checkstyle import CheckstyleLinter
from grading_toolkit.style.linter import Linter
from grading_toolkit.style.listener import ViolationCollector
from grading_toolkit.style.path_utils import compute_base_dir
from grading_toolkit.style.report import render, tally_violations
from grading_toolkit.style.result import Result


def run_compliance_check(
    ruleset: Union[str, Path],
    files: Sequence[Union[str, Path]],
    linter: Optional[Linter] = None
) -> Result:
    """
    Check source files against a style ruleset.

    An empty file list returns a fresh Result without running the linter;
    that Result is not compliant. Anything the linter raises propagates
    unchanged, and the partially filled Result is discarded.

    Args:
        ruleset: Path to the ruleset understood by the linter
        files: Files to check, in the order they should be processed
        linter: Linter to run (a CheckstyleLinter if omitted)

    Returns:
        The verdict, counts, and rendered report and summary
    """
    result = Result()
    if not files:
        return result

    logger = get_logger()
    if linter is None:
        linter = CheckstyleLinter()

    result.base_directory = compute_base_dir(files)
    absolute_files = [Path(f).absolute() for f in files]
    collector = ViolationCollector(result.violations)

    logger.info(f"Checking style of {len(absolute_files)} file(s) against {ruleset}")
    with linter:
        try:
            linter.configure(Path(ruleset))
            linter.set_base_directory(result.base_directory)
            linter.add_listener(collector)
            linter.process(absolute_files)
        except Exception as e:
            logger.error(f"Style check failed: {e}")
            raise

    tally_violations(result)
    render(result)

    logger.info(
        f"Style check finished: {len(result.violations)} violation(s)",
        extra={"compliant": result.is_compliant, "base_directory": result.base_directory}
    )
    return result
