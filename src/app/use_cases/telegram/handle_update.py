"""Use case: processa um update do webhook Telegram.

Eventos tratados (independentes, sem estado compartilhado):
- /start → envia endereço descartável da conversa (sem botão de remoção)
- callback "dismiss" → remove a mensagem que carregava o botão

Demais updates são aceitos e ignorados.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Literal

from api.normalizers.telegram import extract_inbound_event
from api.payload_builders.telegram import DISMISS_CALLBACK_DATA, format_welcome_message
from app.protocols.models import CallbackEvent, StartCommand

if TYPE_CHECKING:
    from app.services import TelegramDispatcher
    from config.settings import EmailSettings

logger = logging.getLogger(__name__)

UpdateOutcome = Literal["address_issued", "message_dismissed", "ignored"]


class HandleTelegramUpdateUseCase:
    """Trata /start e o callback de remoção."""

    def __init__(
        self,
        *,
        dispatcher: TelegramDispatcher,
        email_settings: EmailSettings,
    ) -> None:
        self._dispatcher = dispatcher
        self._email_settings = email_settings

    async def execute(self, update: dict[str, Any]) -> UpdateOutcome:
        """Executa a ação correspondente ao update.

        Args:
            update: Objeto JSON do update já parseado

        Returns:
            Ação executada ("ignored" para updates não reconhecidos).
        """
        event = extract_inbound_event(update)

        if isinstance(event, CallbackEvent):
            if event.data != DISMISS_CALLBACK_DATA:
                logger.info("telegram_callback_ignored", extra={"chat_id": str(event.chat_id)})
                return "ignored"
            await self._dispatcher.delete_message(event.chat_id, event.message_id)
            logger.info(
                "telegram_message_dismissed",
                extra={"chat_id": str(event.chat_id), "message_id": event.message_id},
            )
            return "message_dismissed"

        if isinstance(event, StartCommand):
            address = self._email_settings.build_address(event.chat_id)
            await self._dispatcher.send_text(
                event.chat_id,
                format_welcome_message(address),
                dismissible=False,
            )
            logger.info("telegram_address_issued", extra={"chat_id": str(event.chat_id)})
            return "address_issued"

        return "ignored"
