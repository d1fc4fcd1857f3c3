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
    Configure the shared logger.

    Logs go to stderr; stdout is reserved for the step report.
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
    else:
        logger.add(sys.stderr, level=level, colorize=True)

    return logger


def get_logger(*args, **kwargs):
    return logger
