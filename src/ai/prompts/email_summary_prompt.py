"""Prompt do resumo de emails (instrução fixa, turno único)."""

from __future__ import annotations

EMAIL_SUMMARY_SYSTEM = (
    "You are a highly efficient assistant. Summarize the following email text "
    "into exactly one concise, informative sentence."
)


def format_email_summary_prompt(text: str, max_chars: int) -> str:
    """Limita o texto enviado ao modelo aos primeiros `max_chars` caracteres.

    Corte por caractere, sem respeitar limite de frase.
    """
    return text[:max_chars]
