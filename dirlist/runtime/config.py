"""Persistent JSON config helpers.

Reads diagnostic preferences that never change listing output.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "dirlist"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

DEFAULT_LOG_LEVEL = logging.WARNING
LOG_LEVEL_NAMES = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object. The file is edited by hand;
    dirlist never writes it.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def load_log_level() -> int:
    """Return the configured ``logging`` level, defaulting to ``WARNING``.

    Only string level names from ``LOG_LEVEL_NAMES`` are accepted
    (case-insensitive); anything else falls back to the default.
    """
    value = load_config().get("log_level")
    if not isinstance(value, str):
        return DEFAULT_LOG_LEVEL
    return LOG_LEVEL_NAMES.get(value.strip().upper(), DEFAULT_LOG_LEVEL)
