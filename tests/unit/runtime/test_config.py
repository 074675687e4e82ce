"""Tests for config loading, log-level sanitization and logger setup."""

from __future__ import annotations

import io
import json
import logging
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from dirlist.runtime import config
from dirlist.runtime.logging_setup import LOGGER_NAME, configure_logging


class ConfigBehaviorTests(unittest.TestCase):
    def test_missing_config_yields_default_log_level(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "missing" / "config.json"
            with mock.patch("dirlist.runtime.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {})
                self.assertEqual(config.load_log_level(), logging.WARNING)

    def test_log_level_name_is_case_insensitive(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            config_path.write_text(json.dumps({"log_level": " debug "}), encoding="utf-8")
            with mock.patch("dirlist.runtime.config.CONFIG_PATH", config_path):
                self.assertEqual(config.load_config(), {"log_level": " debug "})
                self.assertEqual(config.load_log_level(), logging.DEBUG)

    def test_malformed_or_mistyped_values_fall_back_to_default(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            config_path = Path(tmp) / "config.json"
            with mock.patch("dirlist.runtime.config.CONFIG_PATH", config_path):
                config_path.write_text("{not json", encoding="utf-8")
                self.assertEqual(config.load_log_level(), logging.WARNING)

                config_path.write_text("[1, 2]", encoding="utf-8")
                self.assertEqual(config.load_config(), {})

                config_path.write_text(json.dumps({"log_level": 10}), encoding="utf-8")
                self.assertEqual(config.load_log_level(), logging.WARNING)

                config_path.write_text(json.dumps({"log_level": "verbose"}), encoding="utf-8")
                self.assertEqual(config.load_log_level(), logging.WARNING)


class LoggingSetupTests(unittest.TestCase):
    def tearDown(self) -> None:
        logger = logging.getLogger(LOGGER_NAME)
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()

    def test_repeated_setup_keeps_a_single_handler(self) -> None:
        stream = io.StringIO()
        configure_logging(logging.INFO, stream=stream)
        logger = configure_logging(logging.INFO, stream=stream)

        logging.getLogger("dirlist.listing").info("hello")

        self.assertEqual(len(logger.handlers), 1)
        self.assertFalse(logger.propagate)
        self.assertEqual(stream.getvalue().count("[INFO] hello"), 1)

    def test_level_defaults_to_configured_value(self) -> None:
        stream = io.StringIO()
        with mock.patch("dirlist.runtime.logging_setup.load_log_level", return_value=logging.ERROR):
            logger = configure_logging(stream=stream)

        logging.getLogger("dirlist.cli").warning("quiet")

        self.assertEqual(logger.level, logging.ERROR)
        self.assertEqual(stream.getvalue(), "")


if __name__ == "__main__":
    unittest.main()
