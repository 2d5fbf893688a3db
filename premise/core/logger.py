"""
Centralized logging configuration.

All modules should use `get_logger(__name__)` to obtain a logger instance.

Handlers belong to the host application. The package only attaches a
NullHandler, plus a stdout handler when ``LOG_TO_STDOUT`` is set.
"""

import logging
import sys

from premise.config import settings
from premise.core.constants import LOG_DATE_FORMAT, LOG_FORMAT

PACKAGE_LOGGER = "premise"

_initialized = False


def _init_logging() -> None:
    """Configure the package logger once."""
    global _initialized
    if _initialized:
        return
    root = logging.getLogger(PACKAGE_LOGGER)
    root.addHandler(logging.NullHandler())
    if settings.log_to_stdout:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))
        root.setLevel(settings.log_level)
        root.addHandler(handler)
    _initialized = True


def get_logger(name: str) -> logging.Logger:
    """
    Get a named logger instance.

    Args:
        name: Usually ``__name__`` of the calling module.

    Returns:
        A logging.Logger under the package logger.
    """
    _init_logging()
    return logging.getLogger(name)
