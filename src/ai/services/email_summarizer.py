"""Serviço de resumo de emails em uma frase.

Fluxo:
1. Texto abaixo do mínimo → fallback "too_short" (IA não é chamada)
2. Texto limitado aos primeiros N caracteres
3. Chamada única ao colaborador de IA
4. Resposta vazia → fallback "empty_response"
5. Qualquer exceção → fallback de indisponibilidade (nunca propaga)
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from ai.prompts import EMAIL_SUMMARY_SYSTEM, format_email_summary_prompt
from ai.rules import fallback_summary
from config.logging import log_fallback

if TYPE_CHECKING:
    from ai.core import SummaryClientProtocol
    from config.settings import SummarySettings

logger = logging.getLogger(__name__)


class EmailSummarizer:
    """Gera resumo de uma frase para o corpo normalizado de um email."""

    __slots__ = ("_client", "_settings")

    def __init__(self, client: SummaryClientProtocol, settings: SummarySettings) -> None:
        self._client = client
        self._settings = settings

    async def summarize(self, text: str) -> str:
        """Retorna resumo não vazio (ou texto de fallback).

        Args:
            text: Texto completo normalizado (não truncado)

        Returns:
            Resumo aparado ou um dos textos de fallback.
        """
        if len(text) < self._settings.min_chars:
            return fallback_summary("too_short")

        started_at = time.perf_counter()
        user_prompt = format_email_summary_prompt(text, self._settings.max_input_chars)
        try:
            raw = await self._client.complete(
                system_prompt=EMAIL_SUMMARY_SYSTEM,
                user_prompt=user_prompt,
            )
        except Exception as exc:
            logger.error(
                "email_summary_failed",
                extra={"error_type": type(exc).__name__},
            )
            log_fallback(
                logger,
                "email_summary",
                reason=type(exc).__name__,
                elapsed_ms=_elapsed_ms(started_at),
            )
            return fallback_summary("error")

        summary = raw.strip() if isinstance(raw, str) else ""
        if not summary:
            log_fallback(
                logger,
                "email_summary",
                reason="empty_response",
                elapsed_ms=_elapsed_ms(started_at),
            )
            return fallback_summary("empty_response")

        logger.info(
            "email_summary_generated",
            extra={
                "input_chars": len(user_prompt),
                "summary_chars": len(summary),
                "elapsed_ms": _elapsed_ms(started_at),
            },
        )
        return summary


def _elapsed_ms(started_at: float) -> float:
    return round((time.perf_counter() - started_at) * 1000, 2)
