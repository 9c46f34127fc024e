"""Credencial e modelo do colaborador de resumo (OpenAI chat completions)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_OPENAI_MODEL = "gpt-4o-mini"

_TRUTHY = ("true", "1", "yes")


@dataclass(frozen=True)
class OpenAISettings:
    """Acesso ao modelo de resumo.

    Com `enabled=False` o bootstrap usa o MockSummaryClient e nenhuma
    chamada externa é feita.
    """

    api_key: str = ""
    model: str = DEFAULT_OPENAI_MODEL
    timeout_seconds: float = 30.0
    enabled: bool = True

    @property
    def has_credentials(self) -> bool:
        return bool(self.api_key.strip())

    def validate(self) -> list[str]:
        """Lista de erros (vazia = OK)."""
        errors: list[str] = []
        if self.enabled and not self.has_credentials:
            errors.append("OPENAI_API_KEY ausente com OPENAI_ENABLED=true")
        if not self.model:
            errors.append("OPENAI_MODEL vazio")
        if self.timeout_seconds <= 0:
            errors.append("OPENAI_TIMEOUT_SECONDS deve ser > 0")
        return errors


def _load_openai_from_env() -> OpenAISettings:
    return OpenAISettings(
        api_key=os.getenv("OPENAI_API_KEY", ""),
        model=os.getenv("OPENAI_MODEL", DEFAULT_OPENAI_MODEL),
        timeout_seconds=float(os.getenv("OPENAI_TIMEOUT_SECONDS", "30")),
        enabled=os.getenv("OPENAI_ENABLED", "true").lower() in _TRUTHY,
    )


@lru_cache(maxsize=1)
def get_openai_settings() -> OpenAISettings:
    """Retorna instância cacheada de OpenAISettings."""
    return _load_openai_from_env()
