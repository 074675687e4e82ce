"""Process-wide logger configuration for the ``dirlist`` package."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from .config import load_log_level

LOGGER_NAME = "dirlist"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


def configure_logging(level: int | None = None, stream: TextIO | None = None) -> logging.Logger:
    """Attach a single stderr handler to the ``dirlist`` logger.

    ``level`` defaults to the configured log level. Existing handlers are
    closed and replaced so repeated calls (tests, re-entry from ``main``) do
    not duplicate output.
    """
    if level is None:
        level = load_log_level()
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    return logger
