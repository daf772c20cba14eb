# AGPL-3.0 License

import logging
import sys
from enum import Enum

from loguru import logger


class LoggingFormat(str, Enum):
    CONSOLE = "CONSOLE"
    JSON = "JSON"


def setup_logger(level: str = "INFO", fmt: LoggingFormat = LoggingFormat.CONSOLE):
    """
    Route toolkit logging to stderr.

    Report text is printed on stdout by the command-line driver, so log
    output stays on stderr.
    """
    level: int = logging.getLevelName(level.upper())
    if type(level) is not int:
        level = logging.INFO

    logger.remove(None)
    if fmt == LoggingFormat.JSON:
        logger.add(
            sys.stderr,
            level=level,
            format="{message}",
            colorize=False,
            serialize=True,
        )
    else:  # does not print the 'extra' fields
        logger.add(sys.stderr, level=level, colorize=True)

    return logger


def get_logger(*args, **kwargs):
    return logger
