"""Protocolos e contratos do core da aplicação."""

from .messaging_client import TelegramClientProtocol
from .models import (
    CallbackEvent,
    EmailAttachment,
    InboundEvent,
    NormalizedBody,
    ParsedEmail,
    StartCommand,
    TelegramResult,
)

__all__ = [
    "CallbackEvent",
    "EmailAttachment",
    "InboundEvent",
    "NormalizedBody",
    "ParsedEmail",
    "StartCommand",
    "TelegramClientProtocol",
    "TelegramResult",
]
