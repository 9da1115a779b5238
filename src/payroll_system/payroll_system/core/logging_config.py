"""Logging setup shared by the Flask app, scripts and services."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_ROOT_LOGGER_NAME = "payroll_system"


def get_logger(name: str) -> logging.Logger:
    """Return a child of the package logger, e.g. ``get_logger("payroll.service")``."""
    return logging.getLogger(f"{_ROOT_LOGGER_NAME}.{name}")


def configure_logging(level: str | int = "INFO") -> None:
    """Attach a single stream handler to the package logger.

    Safe to call more than once (e.g. app factory invoked per test).
    """
    logger = logging.getLogger(_ROOT_LOGGER_NAME)
    logger.setLevel(level.upper() if isinstance(level, str) else level)

    if not any(isinstance(h, _PayrollStreamHandler) for h in logger.handlers):
        handler = _PayrollStreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)


class _PayrollStreamHandler(logging.StreamHandler):
    pass
