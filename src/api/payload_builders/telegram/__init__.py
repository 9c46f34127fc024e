"""Payload builders Telegram: mensagens HTML e teclados inline."""

from .html import escape_html
from .keyboard import DISMISS_CALLBACK_DATA, build_dismiss_keyboard
from .notification import (
    NO_READABLE_CONTENT,
    NO_SUBJECT,
    format_attachment_caption,
    format_email_notification,
    format_size_limit_notice,
    format_welcome_message,
)

__all__ = [
    "DISMISS_CALLBACK_DATA",
    "NO_READABLE_CONTENT",
    "NO_SUBJECT",
    "build_dismiss_keyboard",
    "escape_html",
    "format_attachment_caption",
    "format_email_notification",
    "format_size_limit_notice",
    "format_welcome_message",
]
