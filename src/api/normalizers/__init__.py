"""Normalizers por canal: conversão de payloads externos para modelos internos.

Estrutura:
- email/: roteamento por sub-endereço e normalização do corpo do email
- telegram/: eventos do webhook Telegram Bot API

Cada canal tem seu próprio extractor e normalizer, mantendo SRP.
"""

from .email import extract_routing_token, normalize_body
from .telegram import extract_inbound_event

__all__ = [
    "extract_inbound_event",
    "extract_routing_token",
    "normalize_body",
]
