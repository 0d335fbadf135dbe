"""
Logging configuration for Bill Sync

The entry point calls ``configure_logging()`` once; every other module only
calls ``get_logger(__name__)`` and stays silent until then.
"""

import logging
import os
import sys

_PKG_LOGGER_NAME = "bill_sync"

# Progress lines go to stdout via print, diagnostics to stderr
_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


def _parse_level(level: int | str | None) -> int:
    if level is None:
        level = os.getenv("BILL_SYNC_LOG_LEVEL")
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        level = level.strip().upper()
        if level.isdigit():
            return int(level)
        numeric = getattr(logging, level, None)
        if isinstance(numeric, int):
            return numeric
    return logging.INFO


def configure_logging(level: int | str | None = None) -> None:
    """Send package logs to stderr, at ``level`` or ``BILL_SYNC_LOG_LEVEL`` (default INFO)."""
    logger = logging.getLogger(_PKG_LOGGER_NAME)
    if any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))

    logger.setLevel(_parse_level(level))
    logger.addHandler(handler)
    logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger; the package logger gets a ``NullHandler`` until configured."""
    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
