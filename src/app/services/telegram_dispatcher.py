"""Dispatcher de notificações para o Telegram.

Ordem de entrega:
1. Texto da notificação (com botão "Dismiss")
2. Cada anexo como documento, em sequência e na ordem original

Falhas são logadas pelo cliente HTTP e nunca interrompem o fluxo.
Anexo recusado por tamanho (413) gera um aviso de texto extra.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.telegram.errors import PAYLOAD_TOO_LARGE_STATUS
from api.payload_builders.telegram import (
    build_dismiss_keyboard,
    format_attachment_caption,
    format_size_limit_notice,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from app.protocols.messaging_client import TelegramClientProtocol
    from app.protocols.models import EmailAttachment, TelegramResult
    from config.settings import TelegramSettings

logger = logging.getLogger(__name__)


class TelegramDispatcher:
    """Envia notificações, anexos e remoções pela Bot API."""

    __slots__ = ("_client", "_settings")

    def __init__(self, client: TelegramClientProtocol, settings: TelegramSettings) -> None:
        self._client = client
        self._settings = settings

    async def send_text(
        self,
        chat_id: int | str,
        text: str,
        *,
        dismissible: bool = True,
    ) -> TelegramResult:
        """Envia texto HTML; com botão de remoção quando `dismissible`."""
        reply_markup = build_dismiss_keyboard() if dismissible else None
        result = await self._client.send_message(chat_id, text, reply_markup=reply_markup)
        if not result.ok:
            logger.warning(
                "telegram_send_text_failed",
                extra={"chat_id": str(chat_id), "status_code": result.status_code},
            )
        return result

    async def send_attachment(
        self,
        chat_id: int | str,
        attachment: EmailAttachment,
    ) -> TelegramResult:
        """Envia um anexo como documento, com aviso extra se exceder o limite."""
        file_name = attachment.display_name
        result = await self._client.send_document(
            chat_id,
            file_name=file_name,
            content=attachment.content,
            mime_type=attachment.content_type,
            caption=format_attachment_caption(file_name, attachment.size_bytes),
        )
        if result.ok:
            return result

        logger.warning(
            "telegram_send_attachment_failed",
            extra={
                "chat_id": str(chat_id),
                "status_code": result.status_code,
                "size_bytes": attachment.size_bytes,
            },
        )
        if result.status_code == PAYLOAD_TOO_LARGE_STATUS:
            await self.send_text(
                chat_id,
                format_size_limit_notice(file_name, self._settings.document_limit_mb),
            )
        return result

    async def send_attachments(
        self,
        chat_id: int | str,
        attachments: Iterable[EmailAttachment],
    ) -> list[TelegramResult]:
        """Envia anexos um a um, na ordem; falha em um não impede os demais."""
        results: list[TelegramResult] = []
        for attachment in attachments:
            results.append(await self.send_attachment(chat_id, attachment))
        return results

    async def delete_message(self, chat_id: int | str, message_id: int) -> TelegramResult:
        """Remove a mensagem indicada da conversa."""
        result = await self._client.delete_message(chat_id, message_id)
        if not result.ok:
            logger.warning(
                "telegram_delete_message_failed",
                extra={"chat_id": str(chat_id), "status_code": result.status_code},
            )
        return result
