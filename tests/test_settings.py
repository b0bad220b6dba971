"""Unit tests for settings and logging setup.

Run with: pytest tests/test_settings.py -v
"""

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from festivals.logging_config import LOGGER_NAME, FestivalsHandler, configure_logging
from festivals.settings import Settings


class TestSettings:
    """Tests for Settings.from_env."""

    def test_defaults(self):
        settings = Settings.from_env({})
        assert settings.resource is None
        assert settings.skip_invalid_lines is False
        assert settings.log_level == "WARNING"

    def test_reads_prefixed_variables(self):
        settings = Settings.from_env(
            {
                "FESTIVALS_RESOURCE": "/tmp/festivals.csv",
                "FESTIVALS_SKIP_INVALID_LINES": "true",
                "FESTIVALS_LOG_LEVEL": "debug",
            }
        )
        assert settings.resource == Path("/tmp/festivals.csv")
        assert settings.skip_invalid_lines is True
        assert settings.log_level == "DEBUG"

    def test_blank_variables_are_ignored(self):
        assert Settings.from_env({"FESTIVALS_RESOURCE": "  "}).resource is None

    def test_rejects_unknown_log_level(self):
        with pytest.raises(ValidationError):
            Settings.from_env({"FESTIVALS_LOG_LEVEL": "loud"})


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_sets_level_and_single_handler(self):
        configure_logging("INFO")
        logger = configure_logging("DEBUG")
        installed = [h for h in logger.handlers if isinstance(h, FestivalsHandler)]
        assert len(installed) == 1
        assert logger.name == LOGGER_NAME
        assert logger.level == logging.DEBUG
