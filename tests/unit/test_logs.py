"""Tests for logging setup."""

import logging

from depclash.logs import LOGGER_NAME, configure_logging


def test_configure_logging_is_idempotent():
    """Should add a single handler and update the level on repeat calls."""
    logger = configure_logging("debug")
    handlers = list(logger.handlers)

    configure_logging(logging.ERROR)

    assert logger.name == LOGGER_NAME
    assert logger.handlers == handlers
    assert len(handlers) == 1
    assert logger.level == logging.ERROR


def test_module_loggers_are_children():
    """Module loggers should inherit the package handler."""
    configure_logging("info")

    child = logging.getLogger("depclash.walk")

    assert child.getEffectiveLevel() == logging.INFO

    configure_logging("warning")
