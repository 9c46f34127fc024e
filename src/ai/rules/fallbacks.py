"""Fallbacks determinísticos para quando o resumo não pode ser gerado.

Garante texto previsível e não vazio na notificação, mesmo sem IA.
"""

from __future__ import annotations

from typing import Final

# Texto curto demais: resumo nem é solicitado
SUMMARY_SKIPPED: Final[str] = "No content available to summarize."

# Modelo respondeu sem conteúdo
SUMMARY_EMPTY: Final[str] = "Summary generation yielded no result."

# Qualquer falha (timeout, erro de API, resposta malformada)
SUMMARY_UNAVAILABLE: Final[str] = "Automated summary temporarily unavailable."


def fallback_summary(reason: str) -> str:
    """Seleciona o texto de fallback para o motivo informado.

    Args:
        reason: "too_short", "empty_response" ou qualquer outro motivo de falha

    Returns:
        Texto de fallback correspondente.
    """
    if reason == "too_short":
        return SUMMARY_SKIPPED
    if reason == "empty_response":
        return SUMMARY_EMPTY
    return SUMMARY_UNAVAILABLE
