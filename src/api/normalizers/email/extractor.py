"""Extrator do token de roteamento a partir do destinatário do email.

Formato dos endereços descartáveis (sub-endereçamento):
- tempmail+123456789@dominio.com → "123456789"
- tempmail@dominio.com → None (sem rota)

O token é o texto entre o primeiro "+" e o "@" seguinte; pode conter
qualquer caractere exceto "@".
"""

from __future__ import annotations

import re
from re import Pattern
from typing import Final

_ROUTING_TOKEN_PATTERN: Final[Pattern[str]] = re.compile(r"\+([^@]+)@")


def extract_routing_token(recipient: str | None) -> str | None:
    """Extrai o token de roteamento (chat_id) do endereço destinatário.

    A comparação é case-insensitive: o endereço é convertido para
    minúsculas antes da extração.

    Args:
        recipient: Endereço destinatário bruto

    Returns:
        Token não vazio, ou None quando não há sub-endereço (sem rota).

    Exemplos:
        >>> extract_routing_token("TempMail+42@Example.com")
        '42'

        >>> extract_routing_token("tempmail@example.com") is None
        True
    """
    if not recipient:
        return None
    match = _ROUTING_TOKEN_PATTERN.search(recipient.lower())
    if match is None:
        return None
    return match.group(1)
