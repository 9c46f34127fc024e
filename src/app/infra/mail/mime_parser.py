"""Parser MIME: converte o email bruto (RFC 5322) em ParsedEmail.

Usa o pacote `email` da stdlib com policy.default:
- Assunto decodificado (RFC 2047)
- Corpo text/plain e text/html preferidos via get_body()
- Anexos: partes com Content-Disposition attachment ou com filename
"""

from __future__ import annotations

import email
import email.policy
import logging
from email.message import EmailMessage, Message

from app.protocols.models import EmailAttachment, ParsedEmail

logger = logging.getLogger(__name__)


class MimeParseError(ValueError):
    """Email bruto não pôde ser interpretado."""


def parse_raw_email(raw: bytes, *, recipient: str, sender: str | None = None) -> ParsedEmail:
    """Interpreta bytes MIME em ParsedEmail.

    Args:
        raw: Mensagem bruta
        recipient: Destinatário resolvido pelo host (envelope RCPT TO)
        sender: Remetente do envelope; se ausente usa o cabeçalho From

    Returns:
        ParsedEmail imutável.

    Raises:
        MimeParseError: Se a mensagem não puder ser interpretada.
    """
    try:
        msg = email.message_from_bytes(raw, policy=email.policy.default)
    except Exception as exc:
        raise MimeParseError(f"invalid_mime: {type(exc).__name__}") from exc

    if not isinstance(msg, EmailMessage):
        raise MimeParseError("invalid_mime: unexpected message type")

    plain_part = msg.get_body(preferencelist=("plain",))
    html_part = msg.get_body(preferencelist=("html",))
    attachments = _extract_attachments(msg, skip=(plain_part, html_part))

    subject = msg.get("Subject")
    parsed = ParsedEmail(
        sender=sender or str(msg.get("From", "")),
        recipient=recipient,
        subject=str(subject) if subject else None,
        plain_text=_decode_text(plain_part),
        markup_text=_decode_text(html_part),
        attachments=attachments,
    )
    logger.debug(
        "mime_parsed",
        extra={
            "has_plain": parsed.plain_text is not None,
            "has_html": parsed.markup_text is not None,
            "attachment_count": parsed.attachment_count,
        },
    )
    return parsed


def _decode_text(part: Message | None) -> str | None:
    if part is None:
        return None
    try:
        content = part.get_content()
    except (LookupError, UnicodeDecodeError):
        payload = part.get_payload(decode=True) or b""
        return payload.decode("utf-8", errors="replace")
    return content if isinstance(content, str) else None


def _extract_attachments(
    msg: EmailMessage,
    skip: tuple[Message | None, ...],
) -> tuple[EmailAttachment, ...]:
    attachments: list[EmailAttachment] = []
    for part in msg.walk():
        if part.is_multipart() or any(part is body for body in skip):
            continue
        file_name = part.get_filename()
        if part.get_content_disposition() != "attachment" and not file_name:
            continue
        payload = part.get_payload(decode=True)
        attachments.append(
            EmailAttachment(
                content=payload if isinstance(payload, bytes) else b"",
                file_name=file_name,
                mime_type=part.get_content_type(),
            )
        )
    return tuple(attachments)
