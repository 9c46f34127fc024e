"""Parse do corpo do webhook Telegram (sem PII)."""

from __future__ import annotations

import json
from typing import Any


class InvalidJsonError(ValueError):
    """JSON inválido (ou não-objeto) no corpo do webhook."""


def parse_update_body(raw_body: bytes) -> dict[str, Any]:
    """Parseia o corpo bruto como objeto JSON de update.

    Raises:
        InvalidJsonError: Se o JSON estiver inválido ou não for objeto

    Returns:
        Update como dict
    """
    try:
        payload = json.loads(raw_body)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidJsonError("invalid_json") from exc

    if not isinstance(payload, dict):
        raise InvalidJsonError("payload_not_object")

    return payload
