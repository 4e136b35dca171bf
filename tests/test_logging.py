"""Unit tests for structured logging."""

import io
import json

import pytest

from core.errors import InvalidLengthError
from internal.logging import LogLevel, StructuredLogger, get_logger


def _records(stream):
    return [json.loads(line) for line in stream.getvalue().splitlines()]


class TestStructuredLogger:
    """Tests for StructuredLogger."""

    def test_emits_json_lines(self):
        """Records are JSON with level, message and fields."""
        stream = io.StringIO()
        logger = StructuredLogger(LogLevel.DEBUG, stream=stream)
        logger.info("Generated ksuids", count=3)
        record = _records(stream)[0]
        assert record["level"] == "INFO"
        assert record["msg"] == "Generated ksuids"
        assert record["count"] == 3
        assert record["service"] == "ksuid"
        assert "timestamp" in record

    def test_filters_below_level(self):
        """Records below the minimum level are dropped."""
        stream = io.StringIO()
        logger = StructuredLogger(LogLevel.WARN, stream=stream)
        logger.debug("hidden")
        logger.info("hidden")
        logger.warn("shown")
        assert [r["msg"] for r in _records(stream)] == ["shown"]

    def test_error_kind(self):
        """Domain errors add their kind next to the message."""
        stream = io.StringIO()
        logger = StructuredLogger(stream=stream)
        logger.error("Rejected", error=InvalidLengthError("20 bytes", 3))
        record = _records(stream)[0]
        assert record["err_kind"] == "invalid_length"
        assert "20 bytes" in record["err"]

    def test_get_logger_singleton(self):
        """get_logger returns the same instance until reconfigured."""
        assert get_logger() is get_logger()


class TestLogLevel:
    """Tests for LogLevel parsing."""

    @pytest.mark.parametrize("name,level", [
        ("debug", LogLevel.DEBUG),
        ("INFO", LogLevel.INFO),
        ("warning", LogLevel.WARN),
        ("Warn", LogLevel.WARN),
        ("error", LogLevel.ERROR),
    ])
    def test_parse(self, name, level):
        """Config strings map to levels."""
        assert LogLevel.parse(name) == level

    def test_parse_unknown(self):
        """Unknown names are rejected."""
        with pytest.raises(ValueError):
            LogLevel.parse("verbose")
