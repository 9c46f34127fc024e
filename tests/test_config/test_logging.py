"""Testes para config.logging.

Cobre: configure_logging, get_logger, log_fallback,
CorrelationIdFilter e formatters.
"""

from __future__ import annotations

import json
import logging
from unittest.mock import MagicMock

import pytest

from config.logging import (
    DEFAULT_SERVICE_NAME,
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    VALID_LOG_LEVELS,
    CorrelationIdFilter,
    configure_logging,
    create_json_formatter,
    create_text_formatter,
    get_logger,
    log_fallback,
)


def _record(msg: str = "message", name: str = "test") -> logging.LogRecord:
    return logging.LogRecord(
        name=name,
        level=logging.INFO,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestConfigureLogging:
    """Testes para configure_logging."""

    def test_default_level_is_info(self) -> None:
        configure_logging()
        assert logging.getLogger().level == logging.INFO

    @pytest.mark.parametrize(
        ("level", "expected"),
        [("DEBUG", logging.DEBUG), ("warning", logging.WARNING), ("ERROR", logging.ERROR)],
    )
    def test_level_is_case_insensitive(self, level: str, expected: int) -> None:
        configure_logging(level=level)
        assert logging.getLogger().level == expected

    def test_invalid_level_raises(self) -> None:
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="INVALID")

    def test_replaces_existing_handlers(self) -> None:
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging()
        assert len(root.handlers) == 1

    def test_handler_has_correlation_filter(self) -> None:
        configure_logging(correlation_id_getter=lambda: "corr-1")
        handler = logging.getLogger().handlers[0]
        assert any(isinstance(f, CorrelationIdFilter) for f in handler.filters)

    def test_text_output_uses_plain_formatter(self) -> None:
        configure_logging(json_output=False)
        handler = logging.getLogger().handlers[0]
        assert not isinstance(handler.formatter, type(create_json_formatter()))

    def test_quiets_http_client_loggers_outside_debug(self) -> None:
        configure_logging(level="INFO")
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_constants(self) -> None:
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS
        assert DEFAULT_SERVICE_NAME == "tempmail_relay"


class TestGetLogger:
    def test_returns_named_logger(self) -> None:
        logger = get_logger("relay.module")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "relay.module"
        assert get_logger("relay.module") is logger


class TestLogFallback:
    """Testes para log_fallback."""

    def test_basic_fallback(self) -> None:
        logger = MagicMock(spec=logging.Logger)
        log_fallback(logger, "email_summary")
        call_args = logger.info.call_args
        assert call_args[0] == ("Fallback applied for %s", "email_summary")
        extra = call_args[1]["extra"]
        assert extra == {"fallback_used": True, "component": "email_summary"}

    def test_fallback_with_reason_and_elapsed(self) -> None:
        logger = MagicMock(spec=logging.Logger)
        log_fallback(logger, "email_summary", reason="timeout", elapsed_ms=12.5)
        extra = logger.info.call_args[1]["extra"]
        assert extra["reason"] == "timeout"
        assert extra["elapsed_ms"] == 12.5


class TestCorrelationIdFilter:
    """Testes para CorrelationIdFilter."""

    def test_adds_correlation_id_and_service(self) -> None:
        filter_ = CorrelationIdFilter("relay", lambda: "corr-123")
        record = _record()
        assert filter_.filter(record) is True
        assert record.correlation_id == "corr-123"
        assert record.service == "relay"

    def test_preserves_explicit_correlation_id(self) -> None:
        filter_ = CorrelationIdFilter("relay", lambda: "from-getter")
        record = _record()
        record.correlation_id = "explicit-id"
        filter_.filter(record)
        assert record.correlation_id == "explicit-id"

    def test_empty_correlation_id_without_getter(self) -> None:
        filter_ = CorrelationIdFilter("relay")
        record = _record()
        filter_.filter(record)
        assert record.correlation_id == ""


class TestFormatters:
    def test_required_fields(self) -> None:
        assert set(REQUIRED_LOG_FIELDS) == {
            "asctime",
            "levelname",
            "name",
            "message",
            "correlation_id",
            "service",
        }
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_json_formatter_renames_fields(self) -> None:
        record = _record("email_relayed", name="app.use_cases")
        record.correlation_id = "abc-123"
        record.service = "tempmail_relay"
        record.chat_id = "42"

        data = json.loads(create_json_formatter().format(record))

        assert data["message"] == "email_relayed"
        assert data["logger"] == "app.use_cases"
        assert data["level"] == "INFO"
        assert data["correlation_id"] == "abc-123"
        assert data["chat_id"] == "42"

    def test_text_formatter_includes_correlation_id(self) -> None:
        record = _record("webhook_received")
        record.correlation_id = "abc-123"
        output = create_text_formatter().format(record)
        assert "[abc-123]" in output
        assert "webhook_received" in output
