"""Regras determinísticas para IA.

Re-exporta fallbacks do resumo.
"""

from ai.rules.fallbacks import (
    SUMMARY_EMPTY,
    SUMMARY_SKIPPED,
    SUMMARY_UNAVAILABLE,
    fallback_summary,
)

__all__ = [
    "SUMMARY_EMPTY",
    "SUMMARY_SKIPPED",
    "SUMMARY_UNAVAILABLE",
    "fallback_summary",
]
