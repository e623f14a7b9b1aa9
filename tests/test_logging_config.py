"""
Test Suite: Logging and Configuration
=====================================
"""
import logging
import sys

import pytest

from rocketlayout import config
from rocketlayout.logging_config import setup_logging


@pytest.fixture
def package_logger():
    logger = logging.getLogger("rocketlayout")
    saved_level = logger.level
    yield logger
    logger.handlers.clear()
    logger.setLevel(saved_level)


class TestSetupLogging:

    def test_repeated_setup_does_not_duplicate_handlers(self, package_logger):
        setup_logging(logging.DEBUG)
        setup_logging(logging.DEBUG)
        assert len(package_logger.handlers) == 1
        assert package_logger.level == logging.DEBUG

    def test_file_handler(self, package_logger, tmp_path):
        log_file = tmp_path / "layout.log"
        setup_logging(logging.DEBUG, log_file=str(log_file))
        assert len(package_logger.handlers) == 2
        for handler in package_logger.handlers:
            handler.flush()
        assert "and to" in log_file.read_text(encoding="utf-8")
        for handler in package_logger.handlers:
            handler.close()

    def test_console_goes_to_stderr(self, package_logger):
        logger = setup_logging(logging.INFO)
        assert logger is package_logger
        (handler,) = package_logger.handlers
        assert handler.stream is sys.stderr


class TestConfig:

    def test_log_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("ROCKETLAYOUT_LOG_LEVEL", "debug")
        assert config.get_log_level() == logging.DEBUG

    def test_unknown_log_level_falls_back(self, monkeypatch):
        monkeypatch.setenv("ROCKETLAYOUT_LOG_LEVEL", "chatty")
        assert config.get_log_level() == logging.INFO

    def test_defaults(self):
        assert config.DEFAULT_BOOSTER_COUNT == 2
