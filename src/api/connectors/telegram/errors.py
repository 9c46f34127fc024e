"""Erros e helpers de parsing para a Telegram Bot API."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Final

# Status HTTP devolvido quando o arquivo excede o limite da plataforma
PAYLOAD_TOO_LARGE_STATUS: Final[int] = 413


@dataclass(frozen=True)
class TelegramApiError:
    """Erro retornado pela Bot API ({"ok": false, "error_code", "description"})."""

    status_code: int
    error_code: int
    description: str

    @property
    def is_payload_too_large(self) -> bool:
        return PAYLOAD_TOO_LARGE_STATUS in (self.status_code, self.error_code)


def _decode_body(body: str) -> dict[str, Any]:
    try:
        data = json.loads(body)
    except (json.JSONDecodeError, TypeError):
        return {}
    return data if isinstance(data, dict) else {}


def parse_telegram_error(status_code: int, body: str) -> TelegramApiError:
    """Extrai informações de erro de uma resposta não-2xx.

    Args:
        status_code: Status HTTP da resposta
        body: Corpo bruto da resposta (JSON da Bot API ou texto livre)

    Returns:
        TelegramApiError (com descrição do corpo bruto se não for JSON)
    """
    data = _decode_body(body)
    error_code = data.get("error_code")
    description = data.get("description")
    return TelegramApiError(
        status_code=status_code,
        error_code=error_code if isinstance(error_code, int) else status_code,
        description=str(description) if description else body[:500],
    )
