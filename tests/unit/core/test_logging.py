# tests/unit/core/test_logging.py
"""Tests for structured logging configuration."""

import json
import logging

import pytest


class TestLoggingConfig:
    """Tests for logging configuration."""

    def test_get_logger_returns_logger(self) -> None:
        """get_logger returns a bound logger."""
        from cursorq.core.logging import get_logger

        logger = get_logger("test")
        assert hasattr(logger, "info")
        assert hasattr(logger, "error")
        assert hasattr(logger, "bind")

    def test_logger_outputs_structured(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Logger outputs structured JSON."""
        from cursorq.core.logging import configure_logging, get_logger

        configure_logging(json_output=True)
        logger = get_logger("test")

        logger.info("test message", key="value")

        captured = capsys.readouterr()
        log_line = captured.out.strip().split("\n")[-1]
        data = json.loads(log_line)
        assert data["event"] == "test message"
        assert data["key"] == "value"
        assert "_record" not in data
        assert "_from_structlog" not in data

    def test_logger_console_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Logger outputs human-readable in console mode."""
        from cursorq.core.logging import configure_logging, get_logger

        configure_logging(json_output=False)
        logger = get_logger("test")

        logger.info("test message", key="value")

        captured = capsys.readouterr()
        assert "test message" in captured.out
        assert not captured.out.strip().startswith("{")

    def test_stdlib_loggers_emit_json_when_json_output_enabled(self, capsys: pytest.CaptureFixture[str]) -> None:
        """stdlib loggers go through the same processor chain."""
        from cursorq.core.logging import configure_logging

        configure_logging(json_output=True)

        logging.getLogger("test.stdlib.module").info("message from stdlib logger")

        captured = capsys.readouterr()
        data = json.loads(captured.out.strip().split("\n")[-1])
        assert data["event"] == "message from stdlib logger"
        assert "level" in data
        assert "timestamp" in data

    def test_level_applies_to_root_and_noisy_loggers(self) -> None:
        """Root follows the configured level; noisy loggers stay at WARNING or above."""
        from cursorq.core.logging import configure_logging

        configure_logging(level="debug")

        assert logging.getLogger().level == logging.DEBUG
        assert logging.getLogger("dynaconf").getEffectiveLevel() >= logging.WARNING

    def test_configure_from_settings(self, capsys: pytest.CaptureFixture[str]) -> None:
        """LoggingSettings drive configure_logging."""
        from cursorq.core.config import LoggingSettings
        from cursorq.core.logging import configure_logging_from_settings, get_logger

        configure_logging_from_settings(LoggingSettings(level="WARNING", json_output=True))
        logger = get_logger("test")

        logger.info("suppressed")
        logger.warning("kept")

        captured = capsys.readouterr()
        assert "suppressed" not in captured.out
        assert json.loads(captured.out.strip().split("\n")[-1])["event"] == "kept"
