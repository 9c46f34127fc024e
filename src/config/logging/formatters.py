"""Formatters de logging (JSON estruturado e texto para testes)."""

from __future__ import annotations

import logging

from pythonjsonlogger.json import JsonFormatter

# Campos presentes em todo log estruturado, na ordem de saída
REQUIRED_LOG_FIELDS = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

FIELD_RENAME_MAP = {
    "levelname": "level",
    "name": "logger",
}

TEXT_LOG_FORMAT = "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s"


def create_json_formatter() -> JsonFormatter:
    """Cria formatter JSON com campos padronizados.

    Exemplo de output:
        {
            "asctime": "2026-02-02 10:30:00,123",
            "level": "INFO",
            "logger": "app.use_cases.email.relay_inbound_email",
            "message": "email_relayed",
            "correlation_id": "abc-123",
            "service": "tempmail_relay",
            "chat_id": "123"
        }
    """
    format_string = " ".join(f"%({field})s" for field in REQUIRED_LOG_FIELDS)

    return JsonFormatter(
        format_string,
        rename_fields=FIELD_RENAME_MAP,
    )


def create_text_formatter() -> logging.Formatter:
    """Formatter texto (uma linha por evento) para testes e debug local."""
    return logging.Formatter(TEXT_LOG_FORMAT)
