"""Tests for logging setup."""

from __future__ import annotations

import logging

from kaomoji_store.log import configure_logging, logger


class TestConfigureLogging:
    def test_sets_level(self):
        configure_logging("debug")
        assert logger.level == logging.DEBUG

    def test_unknown_level_falls_back_to_warning(self):
        configure_logging("chatty")
        assert logger.level == logging.WARNING

    def test_idempotent(self):
        configure_logging("INFO")
        configure_logging("INFO")
        assert len(logger.handlers) == 1

    def test_file_handler(self, tmp_path):
        log_file = tmp_path / "logs" / "kaomoji.log"
        configure_logging("INFO", log_file)
        logger.info("hello from test")
        for handler in logger.handlers:
            handler.flush()
        assert "hello from test" in log_file.read_text(encoding="utf-8")
