"""Serviços de aplicação."""

from app.services.telegram_dispatcher import TelegramDispatcher

__all__ = [
    "TelegramDispatcher",
]
