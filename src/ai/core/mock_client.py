"""Cliente mock de IA para testes e desenvolvimento.

Retorna resumo determinístico (primeira frase do texto) sem chamar LLM real.
"""

from __future__ import annotations

import re
from typing import Final

_SENTENCE_END: Final = re.compile(r"(?<=[.!?])\s+")
_MAX_SENTENCE_CHARS: Final[int] = 200


class MockSummaryClient:
    """Cliente mock de resumo.

    Implementa SummaryClientProtocol com heurística simples:
    devolve a primeira frase do texto (limitada a 200 caracteres).
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, str]] = []

    async def complete(self, *, system_prompt: str, user_prompt: str) -> str | None:
        """Retorna a primeira frase do texto recebido."""
        self.calls.append((system_prompt, user_prompt))
        text = " ".join(user_prompt.split())
        if not text:
            return None
        first_sentence = _SENTENCE_END.split(text, maxsplit=1)[0]
        return first_sentence[:_MAX_SENTENCE_CHARS]
