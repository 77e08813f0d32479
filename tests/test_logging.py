"""
Tests for the logging module.

Tests verify:
- JSON rendering of events
- Level filtering (DEBUG suppressed at WARNING)
- Defaults taken from STDONT_* settings
"""

import json
import logging

import pytest
import structlog

from stdont.logging import configure_logging, get_logger


@pytest.fixture(autouse=True)
def capture_all_levels(caplog: pytest.LogCaptureFixture) -> None:
    """Let every record reach caplog; structlog does the filtering."""
    caplog.set_level(logging.DEBUG)


def _json_lines(caplog: pytest.LogCaptureFixture) -> list[dict]:
    return [json.loads(record.getMessage()) for record in caplog.records]


class TestConfigureLogging:
    def test_json_output(self, caplog):
        configure_logging(level="INFO", json_format=True)
        get_logger("stdont.test").info("ready", answer=42)

        events = _json_lines(caplog)
        assert len(events) == 1
        assert events[0]["event"] == "ready"
        assert events[0]["answer"] == 42
        assert events[0]["level"] == "info"
        assert events[0]["logger"] == "stdont.test"
        assert "timestamp" in events[0]

    def test_without_timestamp(self, caplog):
        configure_logging(level="INFO", json_format=True, add_timestamp=False)
        get_logger("stdont.test").info("ready")

        events = _json_lines(caplog)
        assert "timestamp" not in events[0]

    def test_level_filtering(self, caplog):
        configure_logging(level="WARNING", json_format=True)
        logger = get_logger("stdont.test")
        logger.debug("hidden")
        logger.warning("shown")

        events = _json_lines(caplog)
        assert [e["event"] for e in events] == ["shown"]

    def test_level_from_settings(self, caplog, monkeypatch):
        monkeypatch.setenv("STDONT_LOG_LEVEL", "ERROR")
        configure_logging(json_format=True)
        logger = get_logger("stdont.test")
        logger.warning("hidden")
        logger.error("shown")

        events = _json_lines(caplog)
        assert [e["event"] for e in events] == ["shown"]

    def test_json_from_settings(self, caplog, monkeypatch):
        monkeypatch.setenv("STDONT_JSON_LOGS", "true")
        configure_logging(level="INFO")
        get_logger("stdont.test").info("ready")

        assert _json_lines(caplog)[0]["event"] == "ready"

    def test_console_output(self, caplog):
        configure_logging(level="INFO", json_format=False)
        get_logger("stdont.test").info("console_event")

        out = caplog.records[0].getMessage()
        assert "console_event" in out
        assert not out.lstrip().startswith("{")


class TestGetLogger:
    def test_returns_structlog_logger(self):
        logger = get_logger(__name__)
        assert hasattr(logger, "info")
        assert hasattr(logger, "bind")

    def test_bound_context_rendered(self, caplog):
        configure_logging(level="INFO", json_format=True)
        structlog.contextvars.bind_contextvars(request_id="abc")
        try:
            get_logger("stdont.test").info("with_context")
        finally:
            structlog.contextvars.clear_contextvars()

        assert _json_lines(caplog)[0]["request_id"] == "abc"
