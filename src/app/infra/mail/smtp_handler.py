"""Handler SMTP (aiosmtpd) para recebimento dos emails descartáveis.

Cada destinatário do envelope é processado em sequência pelo relay:
- tempmail+123@dominio → notificação para o chat 123
- tempmail@dominio → descartado em silêncio pelo relay (250)

Envelope sem destinatários nunca chega aqui: o aiosmtpd responde
503 no próprio comando DATA.

Falha de um destinatário não interrompe os seguintes. Com ao menos uma
entrega a resposta é 250; 451 só quando todos falharam.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from aiosmtpd.controller import Controller

from app.infra.mail.mime_parser import MimeParseError
from app.observability import reset_correlation_id, set_correlation_id
from utils.errors import ConfigurationError

if TYPE_CHECKING:
    from aiosmtpd.smtp import SMTP, Envelope, Session

    from app.use_cases.email import RelayInboundEmailUseCase
    from config.settings import EmailSettings

logger = logging.getLogger(__name__)

SMTP_ACCEPTED = "250 Message accepted"
SMTP_PARSE_FAILED = "451 Message parsing failed"
SMTP_NOT_CONFIGURED = "451 Relay not configured"
SMTP_TEMPORARY_ERROR = "451 Temporary error"


class RelaySMTPHandler:
    """Handler aiosmtpd que entrega cada email ao RelayInboundEmailUseCase."""

    def __init__(self, relay: RelayInboundEmailUseCase) -> None:
        self._relay = relay

    async def handle_DATA(self, server: SMTP, session: Session, envelope: Envelope) -> str:  # noqa: N802
        """Processa o comando DATA (ponto de entrada do aiosmtpd)."""
        token = set_correlation_id(None)
        try:
            raw = envelope.original_content or envelope.content or b""
            if isinstance(raw, str):
                raw = raw.encode("utf-8")

            logger.info(
                "smtp_message_received",
                extra={
                    "recipient_count": len(envelope.rcpt_tos),
                    "size_bytes": len(raw),
                },
            )

            failures: list[str] = []
            for recipient in envelope.rcpt_tos:
                status = await self._relay_recipient(
                    raw,
                    recipient=recipient,
                    sender=envelope.mail_from or None,
                )
                if status is not None:
                    failures.append(status)

            if failures and len(failures) == len(envelope.rcpt_tos):
                return failures[0]
            if failures:
                logger.warning(
                    "smtp_partial_delivery",
                    extra={
                        "recipient_count": len(envelope.rcpt_tos),
                        "failed_count": len(failures),
                    },
                )
            return SMTP_ACCEPTED
        finally:
            reset_correlation_id(token)

    async def _relay_recipient(
        self,
        raw: bytes,
        *,
        recipient: str,
        sender: str | None,
    ) -> str | None:
        """Entrega um destinatário. Retorna o status SMTP da falha ou None."""
        try:
            await self._relay.relay_raw_email(raw, recipient=recipient, sender=sender)
        except MimeParseError as exc:
            logger.warning("smtp_mime_parse_failed", extra={"error": str(exc)})
            return SMTP_PARSE_FAILED
        except ConfigurationError as exc:
            logger.error("smtp_relay_not_configured", extra={"error": str(exc)})
            return SMTP_NOT_CONFIGURED
        except Exception:
            logger.exception("smtp_relay_failed")
            return SMTP_TEMPORARY_ERROR
        return None


def create_smtp_controller(
    handler: RelaySMTPHandler,
    settings: EmailSettings,
) -> Controller:
    """Cria o Controller aiosmtpd (thread própria) para o handler."""
    return Controller(
        handler,
        hostname=settings.smtp_host,
        port=settings.smtp_port,
    )
