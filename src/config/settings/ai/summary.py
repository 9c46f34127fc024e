"""Settings do resumo automático de emails.

Limites de entrada do resumo (política ajustável, não contrato).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class SummarySettings:
    """Configurações do resumo por IA.

    Attributes:
        min_chars: Abaixo deste tamanho o resumo não é gerado
        max_input_chars: Máximo de caracteres enviados ao modelo
        max_tokens: Máximo de tokens da resposta
    """

    min_chars: int = 20
    max_input_chars: int = 2000
    max_tokens: int = 120

    def validate(self) -> list[str]:
        """Valida limites do resumo.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if self.min_chars < 0:
            errors.append("SUMMARY_MIN_CHARS deve ser >= 0")

        if self.max_input_chars <= 0:
            errors.append("SUMMARY_MAX_INPUT_CHARS deve ser > 0")

        if self.max_tokens <= 0:
            errors.append("SUMMARY_MAX_TOKENS deve ser > 0")

        return errors


def _load_summary_from_env() -> SummarySettings:
    """Carrega SummarySettings de variáveis de ambiente."""
    return SummarySettings(
        min_chars=int(os.getenv("SUMMARY_MIN_CHARS", "20")),
        max_input_chars=int(os.getenv("SUMMARY_MAX_INPUT_CHARS", "2000")),
        max_tokens=int(os.getenv("SUMMARY_MAX_TOKENS", "120")),
    )


@lru_cache(maxsize=1)
def get_summary_settings() -> SummarySettings:
    """Retorna instância cacheada de SummarySettings."""
    return _load_summary_from_env()
