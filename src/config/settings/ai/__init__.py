"""Settings do resumo por IA (credencial OpenAI e limites de entrada)."""

from __future__ import annotations

from config.settings.ai.openai import OpenAISettings, get_openai_settings
from config.settings.ai.summary import SummarySettings, get_summary_settings

__all__ = [
    "OpenAISettings",
    "SummarySettings",
    "get_openai_settings",
    "get_summary_settings",
]
