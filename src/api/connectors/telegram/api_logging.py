"""Helpers de logging para a Telegram Bot API (sem token e sem conteúdo)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .errors import TelegramApiError

logger = logging.getLogger(__name__)


def log_api_error(api_error: TelegramApiError, method: str) -> None:
    """Loga resposta não-2xx com status e corpo."""
    logger.error(
        "telegram_api_error",
        extra={
            "method": method,
            "status_code": api_error.status_code,
            "error_code": api_error.error_code,
            "response_body": api_error.description,
        },
    )


def log_transport_error(exc: Exception, method: str) -> None:
    """Loga falha de transporte (timeout, conexão) sem detalhes da URL."""
    logger.error(
        "telegram_transport_error",
        extra={
            "method": method,
            "error_type": type(exc).__name__,
        },
    )


def log_success(method: str, status_code: int) -> None:
    """Loga sucesso sem expor dados sensíveis."""
    logger.debug(
        "telegram_call_ok",
        extra={
            "method": method,
            "status_code": status_code,
        },
    )
