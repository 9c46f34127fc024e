"""Módulo AI do TempMail Relay.

Resumo automático de emails em uma frase:
- core/: protocolo do colaborador de IA e cliente mock
- prompts/: instrução fixa do resumo
- rules/: fallbacks determinísticos
- services/: EmailSummarizer
"""

# Core
from ai.core import MockSummaryClient, SummaryClientProtocol

# Rules
from ai.rules import (
    SUMMARY_EMPTY,
    SUMMARY_SKIPPED,
    SUMMARY_UNAVAILABLE,
    fallback_summary,
)

# Services
from ai.services import EmailSummarizer

__all__ = [
    "SUMMARY_EMPTY",
    "SUMMARY_SKIPPED",
    "SUMMARY_UNAVAILABLE",
    # Services
    "EmailSummarizer",
    "MockSummaryClient",
    # Core
    "SummaryClientProtocol",
    # Rules
    "fallback_summary",
]
