#!/usr/bin/env python

"""Logger for development and user warnings.

All ksubset modules log with the loguru `logger`. The package disables
its namespace on import so that library users are not spammed; calling
`set_log_level` (the CLI does) enables it and writes to stderr.
"""

import sys
from loguru import logger


LOGFORMAT = (
    "<level>{level: <7}</level> <white>|</white> "
    "<cyan>{file: <18}</cyan> <white>|</white> "
    "<level>{message}</level>"
)


def set_log_level(log_level: str = "INFO"):
    """Add a stderr sink at `log_level` and enable ksubset records."""
    logger.remove()
    logger.add(
        sink=sys.stderr,
        level=log_level,
        colorize=sys.stderr.isatty(),
        format=LOGFORMAT,
    )
    logger.enable("ksubset")
    return logger
