"""Unit tests for structured logging configuration.

Tests the handler configure_structlog installs and its output format.
"""

import io
import json
import logging
from collections.abc import Iterator

import pytest
import structlog

from spanclock.application.observability.logging import (
    LIBRARY_LOGGER_NAME,
    get_logger_for_service,
)
from spanclock.infrastructure.observability import logging as observability_logging
from spanclock.infrastructure.observability.logging import (
    _get_log_level,
    configure_structlog,
)


@pytest.fixture(autouse=True)
def detach_library_handler() -> Iterator[None]:
    yield
    library_logger = logging.getLogger(LIBRARY_LOGGER_NAME)
    if observability_logging._handler is not None:
        library_logger.removeHandler(observability_logging._handler)
        observability_logging._handler = None
    library_logger.setLevel(logging.NOTSET)


def _renderer_name(handler: logging.Handler) -> str:
    formatter = handler.formatter
    assert isinstance(formatter, structlog.stdlib.ProcessorFormatter)
    return type(formatter.processors[-1]).__name__


class TestConfigureStructlog:
    """Tests for configure_structlog function."""

    def test_configure_production_mode(self) -> None:
        handler = configure_structlog(environment="production")

        assert _renderer_name(handler) == "JSONRenderer"

    def test_configure_development_mode(self) -> None:
        handler = configure_structlog(environment="development")

        assert _renderer_name(handler) == "ConsoleRenderer"

    def test_configure_defaults_to_production(self) -> None:
        handler = configure_structlog()

        assert _renderer_name(handler) == "JSONRenderer"

    def test_handler_attached_to_library_logger(self) -> None:
        handler = configure_structlog()

        assert handler in logging.getLogger(LIBRARY_LOGGER_NAME).handlers

    def test_reconfiguring_replaces_handler(self) -> None:
        first = configure_structlog(environment="production")
        second = configure_structlog(environment="development")

        handlers = logging.getLogger(LIBRARY_LOGGER_NAME).handlers
        assert first not in handlers
        assert second in handlers

    def test_leaves_structlog_global_config_alone(self) -> None:
        before = structlog.get_config()["processors"]

        configure_structlog()

        assert structlog.get_config()["processors"] == before


class TestLogLevel:
    """Tests for LOG_LEVEL handling."""

    def test_default_level_is_info(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("LOG_LEVEL", raising=False)

        assert _get_log_level() == logging.INFO

    def test_reads_level_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "debug")

        assert _get_log_level() == logging.DEBUG

    def test_unknown_level_falls_back_to_info(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "chatty")

        assert _get_log_level() == logging.INFO

    def test_applies_level_to_library_logger(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "WARNING")

        configure_structlog()

        assert logging.getLogger(LIBRARY_LOGGER_NAME).level == logging.WARNING


class TestLogOutput:
    """Tests for actual log output format."""

    def test_json_output_structure(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "INFO")
        stream = io.StringIO()
        configure_structlog(environment="production", stream=stream)

        logger = get_logger_for_service("TimestampProviderService", logger_name="spanclock.output")
        logger.info("timestamp_source_selected", source="date")

        log_entry = json.loads(stream.getvalue().strip())
        assert log_entry["event"] == "timestamp_source_selected"
        assert log_entry["level"] == "info"
        assert log_entry["service"] == "TimestampProviderService"
        assert log_entry["component"] == "clock"
        assert log_entry["source"] == "date"
        assert "timestamp" in log_entry

    def test_debug_filtered_at_info_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "INFO")
        stream = io.StringIO()
        configure_structlog(environment="production", stream=stream)

        logger = get_logger_for_service("PlatformRuntimeProbe", logger_name="spanclock.output")
        logger.debug("runtime_clock_detected", runtime="server")

        assert stream.getvalue() == ""
