"""Use case: relay de um email recebido para o chat Telegram.

Pipeline (sequencial, um email por vez):
1. Resolver token de roteamento do destinatário (sem rota → descarta e loga)
2. Exigir credencial do Telegram (ausente → ConfigurationError)
3. Normalizar corpo (texto completo + trecho)
4. Gerar resumo (nunca falha: fallback fixo)
5. Formatar notificação HTML
6. Enviar texto (uma vez)
7. Enviar anexos em ordem, após o texto, independente do resultado dele
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from api.normalizers.email import extract_routing_token, normalize_body
from api.payload_builders.telegram import format_email_notification
from app.infra.mail.mime_parser import parse_raw_email
from utils.errors import ConfigurationError

if TYPE_CHECKING:
    from ai.services import EmailSummarizer
    from app.protocols.models import ParsedEmail
    from app.services import TelegramDispatcher
    from config.settings import EmailSettings, TelegramSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RelayResult:
    """Resumo do processamento de um email (para logs e testes)."""

    routed: bool
    chat_id: str | None = None
    text_sent: bool = False
    attachments_attempted: int = 0
    attachments_sent: int = 0


class RelayInboundEmailUseCase:
    """Orquestra normalização, resumo, formatação e envio de um email."""

    def __init__(
        self,
        *,
        dispatcher: TelegramDispatcher,
        summarizer: EmailSummarizer,
        telegram_settings: TelegramSettings,
        email_settings: EmailSettings,
    ) -> None:
        self._dispatcher = dispatcher
        self._summarizer = summarizer
        self._telegram_settings = telegram_settings
        self._email_settings = email_settings

    async def execute(self, email: ParsedEmail) -> RelayResult:
        """Processa um email já decodificado.

        Raises:
            ConfigurationError: Se TELEGRAM_BOT_TOKEN não estiver configurado.
        """
        recipient = email.recipient.lower()
        chat_id = extract_routing_token(recipient)
        if chat_id is None:
            logger.warning(
                "email_dropped_no_route",
                extra={"reason": "no_chat_id_in_recipient"},
            )
            return RelayResult(routed=False)

        if not self._telegram_settings.is_configured:
            raise ConfigurationError("TELEGRAM_BOT_TOKEN is not configured in the environment.")

        body = normalize_body(
            email.plain_text,
            email.markup_text,
            max_snippet_chars=self._email_settings.snippet_max_chars,
        )
        summary = await self._summarizer.summarize(body.full_text)

        notification = format_email_notification(
            sender=email.sender,
            recipient=recipient,
            subject=email.subject,
            attachment_count=email.attachment_count,
            summary=summary,
            snippet=body.snippet,
        )
        text_result = await self._dispatcher.send_text(chat_id, notification)

        attachment_results = []
        if email.attachments:
            attachment_results = await self._dispatcher.send_attachments(
                chat_id, email.attachments
            )

        result = RelayResult(
            routed=True,
            chat_id=chat_id,
            text_sent=text_result.ok,
            attachments_attempted=len(attachment_results),
            attachments_sent=sum(1 for item in attachment_results if item.ok),
        )
        logger.info(
            "email_relayed",
            extra={
                "chat_id": chat_id,
                "text_sent": result.text_sent,
                "attachments_attempted": result.attachments_attempted,
                "attachments_sent": result.attachments_sent,
            },
        )
        return result

    async def relay_raw_email(
        self,
        raw: bytes,
        *,
        recipient: str,
        sender: str | None = None,
    ) -> RelayResult:
        """Decodifica o email bruto (MIME) e executa o relay."""
        parsed = parse_raw_email(raw, recipient=recipient, sender=sender)
        return await self.execute(parsed)
