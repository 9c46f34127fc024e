"""Normalizer Email: reduz o corpo do email a texto limpo e limitado.

Regras:
1. Preferir text/plain; senão, derivar texto do HTML removendo tags
   (remoção simples por regex, sem parsing de DOM)
2. Remover espaços nas extremidades
3. Trecho exibível limitado a N caracteres com marcador de truncamento
4. Texto completo (não truncado) exposto para o resumo

O escape para HTML NÃO acontece aqui: é aplicado uma única vez
na formatação da notificação (api/payload_builders/telegram).
"""

from __future__ import annotations

import re
from re import Pattern
from typing import Final

from app.protocols.models import NormalizedBody

DEFAULT_SNIPPET_MAX_CHARS: Final[int] = 500
TRUNCATION_MARKER: Final[str] = "...\n[Message Truncated]"

# Qualquer trecho <...>, inclusive um "<..." sem fechamento no fim do texto
_MARKUP_TAG_PATTERN: Final[Pattern[str]] = re.compile(r"<[^>]*>?")


def strip_markup(markup: str) -> str:
    """Remove todas as tags de um texto HTML.

    Entidades (&amp;, &lt; ...) são mantidas como estão.
    """
    return _MARKUP_TAG_PATTERN.sub("", markup)


def build_snippet(text: str, max_chars: int = DEFAULT_SNIPPET_MAX_CHARS) -> str:
    """Primeiros `max_chars` caracteres, com marcador se houve corte."""
    if len(text) <= max_chars:
        return text
    return text[:max_chars] + TRUNCATION_MARKER


def extract_body_text(plain_text: str | None, markup_text: str | None) -> str:
    """Seleciona o corpo textual preferindo text/plain, já sem espaços nas bordas."""
    if plain_text:
        return plain_text.strip()
    if markup_text:
        return strip_markup(markup_text).strip()
    return ""


def normalize_body(
    plain_text: str | None,
    markup_text: str | None,
    max_snippet_chars: int = DEFAULT_SNIPPET_MAX_CHARS,
) -> NormalizedBody:
    """Normaliza o corpo do email.

    Args:
        plain_text: Parte text/plain (pode ser None)
        markup_text: Parte text/html (pode ser None)
        max_snippet_chars: Limite do trecho exibível

    Returns:
        NormalizedBody com texto completo e trecho exibível.
    """
    full_text = extract_body_text(plain_text, markup_text)
    return NormalizedBody(
        full_text=full_text,
        snippet=build_snippet(full_text, max_snippet_chars),
    )
