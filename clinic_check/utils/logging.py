# -*- coding: utf-8 -*-

"""Diagnostic logging configuration for clinic-check."""

import logging
import sys
from enum import Enum

import errorhandler


class VerbosityLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def configure_logging(
    level: VerbosityLevel, error_handler: errorhandler.ErrorHandler
) -> None:
    """Send diagnostic logging to stderr at the requested level.

    The colored case output is not logging; it is echoed to stdout by the
    runner and the reporter regardless of verbosity.
    """
    if level == VerbosityLevel.DEBUG:
        lev = logging.DEBUG
    elif level == VerbosityLevel.INFO:
        lev = logging.INFO
    elif level == VerbosityLevel.WARNING:
        lev = logging.WARNING
    elif level == VerbosityLevel.ERROR:
        lev = logging.ERROR
    else:
        lev = logging.CRITICAL
    logger = logging.getLogger()
    handler = logging.StreamHandler(sys.stderr)
    formatter = logging.Formatter("%(levelname)s - %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(lev)
    error_handler.reset()
