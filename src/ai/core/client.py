"""Protocolo para clientes de IA.

Define o contrato SummaryClientProtocol para implementações concretas.
ai/ não faz IO direto: a chamada HTTP fica em app/infra/ai.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol


class SummaryClientProtocol(Protocol):
    """Protocolo para o colaborador de completação de texto.

    Define contrato para implementações concretas (OpenAI, mock, etc.).
    Permite injeção de dependência e testabilidade.
    """

    @abstractmethod
    async def complete(self, *, system_prompt: str, user_prompt: str) -> str | None:
        """Executa uma completação de turno único.

        Args:
            system_prompt: Instrução fixa de sistema
            user_prompt: Texto do usuário (já limitado)

        Returns:
            Texto gerado, ou None se o modelo não devolveu conteúdo.

        Raises:
            Exception: Falhas de transporte/API são propagadas ao chamador.
        """
        ...
