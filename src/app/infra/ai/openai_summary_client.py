"""Cliente OpenAI para o resumo de emails (chat completions, turno único)."""

from __future__ import annotations

import logging
from typing import Any

from openai import AsyncOpenAI

from config.settings.ai.openai import OpenAISettings, get_openai_settings
from config.settings.ai.summary import SummarySettings, get_summary_settings

logger = logging.getLogger(__name__)


class OpenAISummaryClient:
    """Implementa SummaryClientProtocol com AsyncOpenAI.

    O cliente SDK é criado na primeira chamada; erro de construção
    (ex.: API key ausente) é propagado como qualquer falha de chamada.
    Uma única tentativa por chamada (max_retries=0).
    """

    __slots__ = ("_client", "_max_tokens", "_settings")

    def __init__(
        self,
        *,
        settings: OpenAISettings | None = None,
        summary_settings: SummarySettings | None = None,
        client: AsyncOpenAI | None = None,
    ) -> None:
        self._settings = settings or get_openai_settings()
        self._max_tokens = (summary_settings or get_summary_settings()).max_tokens
        self._client = client

    def _get_client(self) -> AsyncOpenAI:
        """Obtém ou cria cliente SDK."""
        if self._client is None:
            self._client = AsyncOpenAI(
                api_key=self._settings.api_key or None,
                timeout=self._settings.timeout_seconds,
                max_retries=0,
            )
        return self._client

    async def complete(self, *, system_prompt: str, user_prompt: str) -> str | None:
        """Executa chamada OpenAI e retorna o conteúdo da primeira escolha."""
        response = await self._get_client().chat.completions.create(
            model=self._settings.model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            max_tokens=self._max_tokens,
        )
        content = _extract_content(response)
        if content is None:
            logger.warning("openai_summary_empty_response", extra={"model": self._settings.model})
        return content


def _extract_content(response: Any) -> str | None:
    choices = getattr(response, "choices", None)
    if not choices:
        return None
    content = choices[0].message.content
    return content if isinstance(content, str) else None
