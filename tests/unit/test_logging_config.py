"""Tests for logging setup."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest

from youtube_stats.infrastructure.config.models import LoggingConfig
from youtube_stats.infrastructure.logging_config import setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Keep logging changes from leaking between tests."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    for handler in root_logger.handlers:
        if handler not in handlers:
            handler.close()
    root_logger.handlers = handlers
    root_logger.setLevel(level)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_level_from_config(self) -> None:
        """Test the configured level is applied."""
        setup_logging(LoggingConfig(level="WARNING"))
        assert logging.getLogger().level == logging.WARNING

    def test_verbose_forces_debug(self) -> None:
        """Test verbose mode enables debug logging."""
        setup_logging(LoggingConfig(level="ERROR"), verbose=True)
        assert logging.getLogger().level == logging.DEBUG

    def test_file_handler(self, tmp_path: Path) -> None:
        """Test a rotating file handler is added when a path is configured."""
        log_file = tmp_path / "logs" / "stats.log"

        setup_logging(LoggingConfig(file_path=str(log_file), max_file_size=2048, backup_count=2))

        file_handlers = [
            h for h in logging.getLogger().handlers if isinstance(h, RotatingFileHandler)
        ]
        assert len(file_handlers) == 1
        assert file_handlers[0].maxBytes == 2048
        assert file_handlers[0].backupCount == 2
        assert log_file.parent.exists()

    def test_noisy_loggers_quieted(self) -> None:
        """Test third-party loggers are raised to WARNING."""
        setup_logging(LoggingConfig(level="DEBUG"))
        assert logging.getLogger("googleapiclient.discovery_cache").level == logging.WARNING
