"""Serviços do módulo AI.

Exporta o serviço de resumo de emails.
"""

from ai.services.email_summarizer import EmailSummarizer

__all__ = [
    "EmailSummarizer",
]
