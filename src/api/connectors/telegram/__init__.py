"""Connector Telegram Bot API: cliente HTTP, parsing de erros e webhook."""

from .errors import PAYLOAD_TOO_LARGE_STATUS, TelegramApiError, parse_telegram_error
from .http_client import TelegramHttpClient, create_telegram_http_client
from .webhook import InvalidJsonError, parse_update_body

__all__ = [
    "PAYLOAD_TOO_LARGE_STATUS",
    "InvalidJsonError",
    "TelegramApiError",
    "TelegramHttpClient",
    "create_telegram_http_client",
    "parse_telegram_error",
    "parse_update_body",
]
