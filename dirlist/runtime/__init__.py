"""Process-level runtime support: persisted config and logger setup."""

from __future__ import annotations

from .config import load_config, load_log_level
from .logging_setup import configure_logging

__all__ = [
    "configure_logging",
    "load_config",
    "load_log_level",
]
