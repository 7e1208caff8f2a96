"""
Task Tracker API - Logging Setup Tests
"""

import logging
from logging.handlers import TimedRotatingFileHandler
from unittest.mock import MagicMock

import pytest

from tracker.logging_setup import setup_logging


@pytest.fixture
def basic_config(monkeypatch):
    """Keep the test from reconfiguring the real root logger."""
    mock = MagicMock()
    monkeypatch.setattr(logging, "basicConfig", mock)
    return mock


class TestSetupLogging:

    def test_console_only_by_default(self, basic_config):
        handlers = setup_logging(level="DEBUG")

        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.StreamHandler)
        assert basic_config.call_args.kwargs["level"] == logging.DEBUG
        assert basic_config.call_args.kwargs["handlers"] == handlers

    def test_log_file_rolls_daily(self, basic_config, tmp_path):
        log_file = tmp_path / "logs" / "tracker.log"

        handlers = setup_logging(level="INFO", log_file=str(log_file), backup_count=7)
        try:
            file_handlers = [h for h in handlers if isinstance(h, TimedRotatingFileHandler)]
            assert len(file_handlers) == 1
            assert file_handlers[0].when == "MIDNIGHT"
            assert file_handlers[0].backupCount == 7
            assert file_handlers[0].baseFilename == str(log_file)
            assert log_file.parent.is_dir()
        finally:
            for handler in handlers:
                handler.close()

    def test_unknown_level_falls_back_to_info(self, basic_config):
        setup_logging(level="chatty")
        assert basic_config.call_args.kwargs["level"] == logging.INFO
