"""Logging setup for depclash.

Reports are written to stdout by the applications; diagnostics go through
the standard ``logging`` module to stderr.
"""

import logging
import sys

LOGGER_NAME = "depclash"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | int = "WARNING") -> logging.Logger:
    """Attach a stderr handler to the package logger and set its level.

    Calling this more than once only updates the level.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.WARNING)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
