"""Extrator de eventos do webhook Telegram Bot API.

Estrutura do update Telegram (campos usados):
- message.chat.id, message.text
- callback_query.data, callback_query.message.chat.id,
  callback_query.message.message_id

Não faz validação de negócio - apenas extração estrutural.
Formatos não reconhecidos resultam em None (evento ignorado).
"""

from __future__ import annotations

import logging
from typing import Any

from app.protocols.models import CallbackEvent, InboundEvent, StartCommand

logger = logging.getLogger(__name__)

START_COMMAND_PREFIX = "/start"


def _as_dict(value: Any) -> dict[str, Any] | None:
    return value if isinstance(value, dict) else None


def _extract_callback(callback_query: dict[str, Any]) -> CallbackEvent | None:
    message = _as_dict(callback_query.get("message"))
    if message is None:
        return None
    chat = _as_dict(message.get("chat"))
    message_id = message.get("message_id")
    if chat is None or chat.get("id") is None or message_id is None:
        return None
    return CallbackEvent(
        chat_id=chat["id"],
        message_id=message_id,
        data=str(callback_query.get("data") or ""),
    )


def _extract_command(message: dict[str, Any]) -> StartCommand | None:
    text = message.get("text")
    chat = _as_dict(message.get("chat"))
    if not isinstance(text, str) or not text or chat is None or chat.get("id") is None:
        return None
    if not text.strip().startswith(START_COMMAND_PREFIX):
        return None
    return StartCommand(chat_id=chat["id"])


def extract_inbound_event(update: dict[str, Any]) -> InboundEvent | None:
    """Converte um update Telegram em evento interno.

    Um callback_query com mensagem associada tem precedência sobre message.

    Args:
        update: Objeto JSON do update

    Returns:
        StartCommand, CallbackEvent ou None (update não reconhecido).
    """
    callback_query = _as_dict(update.get("callback_query"))
    if callback_query is not None:
        event = _extract_callback(callback_query)
        if event is not None:
            return event

    message = _as_dict(update.get("message"))
    if message is not None:
        return _extract_command(message)

    logger.debug("telegram_update_unrecognized", extra={"keys": sorted(update)[:10]})
    return None
