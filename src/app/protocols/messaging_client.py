"""Protocolos de envio para a API de mensageria (Telegram Bot API)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from .models import TelegramResult


class TelegramClientProtocol(Protocol):
    """Contrato mínimo das três chamadas outbound usadas pelo relay.

    Implementações nunca levantam por status HTTP ou falha de transporte:
    o resultado vem sempre como TelegramResult.
    """

    async def send_message(
        self,
        chat_id: int | str,
        text: str,
        reply_markup: dict[str, Any] | None = None,
    ) -> TelegramResult: ...

    async def send_document(
        self,
        chat_id: int | str,
        *,
        file_name: str,
        content: bytes,
        mime_type: str,
        caption: str,
    ) -> TelegramResult: ...

    async def delete_message(
        self,
        chat_id: int | str,
        message_id: int,
    ) -> TelegramResult: ...
