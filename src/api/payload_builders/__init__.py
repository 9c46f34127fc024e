"""Payload builders por canal: construção de payloads para APIs externas.

Estrutura:
- telegram/: Telegram Bot API (mensagens HTML, legendas, teclado inline)

Cada canal tem seus próprios builders, garantindo SRP e isolamento de falhas.
"""

__all__: list[str] = []
