"""Formatação das mensagens HTML enviadas ao Telegram.

Funções puras e determinísticas. Cada campo de texto é escapado
exatamente uma vez, aqui.
"""

from __future__ import annotations

from typing import Final

from api.payload_builders.telegram.html import escape_html

SEPARATOR: Final[str] = "━━━━━━━━━━━━━━━━━━━━"
NO_SUBJECT: Final[str] = "No Subject"
NO_READABLE_CONTENT: Final[str] = "No readable text content."


def format_email_notification(
    *,
    sender: str,
    recipient: str,
    subject: str | None,
    attachment_count: int,
    summary: str,
    snippet: str,
) -> str:
    """Monta a notificação de novo email.

    Layout: cabeçalho, bloco de metadados, bloco de resumo, bloco da mensagem.

    Args:
        sender: Remetente
        recipient: Destinatário (exibido em minúsculas)
        subject: Assunto (fallback "No Subject")
        attachment_count: Quantidade de anexos
        summary: Resumo gerado (ou texto de fallback)
        snippet: Trecho do corpo (fallback "No readable text content.")

    Returns:
        Texto HTML pronto para sendMessage.
    """
    return (
        "📥 <b>New Email Received!</b>\n"
        f"{SEPARATOR}\n"
        f"👤 <b>From:</b> <code>{escape_html(sender)}</code>\n"
        f"🎯 <b>To:</b> <code>{escape_html(recipient.lower())}</code>\n"
        f"📑 <b>Subject:</b> <i>{escape_html(subject or NO_SUBJECT)}</i>\n"
        f"📎 <b>Attachments:</b> {attachment_count}\n"
        f"{SEPARATOR}\n"
        f"🤖 <b>AI Summary:</b>\n<i>{escape_html(summary)}</i>\n"
        f"{SEPARATOR}\n\n"
        "📝 <b>Message:</b>\n"
        f"<pre>{escape_html(snippet or NO_READABLE_CONTENT)}</pre>"
    )


def format_attachment_caption(file_name: str, size_bytes: int) -> str:
    """Legenda do documento: nome e tamanho em KB (duas casas)."""
    return (
        f"📎 <b>Attachment:</b> <i>{escape_html(file_name)}</i>\n"
        f"📦 <b>Size:</b> {size_bytes / 1024:.2f} KB"
    )


def format_size_limit_notice(file_name: str, limit_mb: int) -> str:
    """Aviso enviado quando o Telegram recusa o arquivo por tamanho."""
    return (
        "⚠️ <b>Failed to send attachment.</b>\n"
        f"File <i>{escape_html(file_name)}</i> exceeds Telegram's {limit_mb}MB Bot API limit."
    )


def format_welcome_message(address: str) -> str:
    """Mensagem de boas-vindas com o endereço descartável da conversa."""
    return (
        "✨ <b>AI TempMail Bot</b> ✨\n\n"
        "Your secure, disposable email address is active:\n\n"
        f"📧 <code>{escape_html(address)}</code>\n\n"
        "<i>Tap the address to copy. Messages and attachments will be instantly "
        "delivered here with an AI-generated summary.</i>"
    )
