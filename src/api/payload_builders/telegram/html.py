"""Escape de texto para parse_mode=HTML da Telegram Bot API."""

from __future__ import annotations

from typing import Final

# Ordem importa: "&" primeiro para não re-escapar as entidades geradas
_HTML_REPLACEMENTS: Final[tuple[tuple[str, str], ...]] = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#039;"),
)


def escape_html(text: str) -> str:
    """Escapa &, <, >, aspas duplas e simples (todas as ocorrências).

    Não é idempotente: deve ser aplicado exatamente uma vez por campo.

    Exemplos:
        >>> escape_html("<b>Tom & Jerry's</b>")
        '&lt;b&gt;Tom &amp; Jerry&#039;s&lt;/b&gt;'
    """
    result = text
    for raw, entity in _HTML_REPLACEMENTS:
        result = result.replace(raw, entity)
    return result
