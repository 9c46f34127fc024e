"""Clientes de IA concretos (IO)."""

from app.infra.ai.openai_summary_client import OpenAISummaryClient

__all__ = [
    "OpenAISummaryClient",
]
