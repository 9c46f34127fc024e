"""Prompts do módulo AI.

Arquivos:
- email_summary_prompt.py: instrução e limite de entrada do resumo de emails
"""

from ai.prompts.email_summary_prompt import (
    EMAIL_SUMMARY_SYSTEM,
    format_email_summary_prompt,
)

__all__ = [
    "EMAIL_SUMMARY_SYSTEM",
    "format_email_summary_prompt",
]
