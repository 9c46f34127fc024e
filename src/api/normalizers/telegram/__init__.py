"""Normalizer Telegram: extração de eventos do webhook.

Responsabilidades:
- Extrair comando /start (emissão de endereço)
- Extrair callback "dismiss" (remoção de notificação)
"""

from .extractor import START_COMMAND_PREFIX, extract_inbound_event

__all__ = [
    "START_COMMAND_PREFIX",
    "extract_inbound_event",
]
