"""Testes de parsing de erros e do corpo do webhook Telegram."""

from __future__ import annotations

import pytest

from api.connectors.telegram import InvalidJsonError, parse_telegram_error, parse_update_body


def test_parse_api_error_body() -> None:
    error = parse_telegram_error(
        400, '{"ok": false, "error_code": 400, "description": "Bad Request: chat not found"}'
    )
    assert error.status_code == 400
    assert error.error_code == 400
    assert error.description == "Bad Request: chat not found"
    assert error.is_payload_too_large is False


def test_parse_non_json_body_keeps_raw_text() -> None:
    error = parse_telegram_error(413, "Request Entity Too Large")
    assert error.error_code == 413
    assert error.description == "Request Entity Too Large"
    assert error.is_payload_too_large is True


def test_parse_update_body() -> None:
    assert parse_update_body(b'{"update_id": 1}') == {"update_id": 1}


@pytest.mark.parametrize("raw", [b"not json", b"", b"[1, 2]", b'"text"', b"\xff"])
def test_parse_update_body_rejects_invalid(raw: bytes) -> None:
    with pytest.raises(InvalidJsonError):
        parse_update_body(raw)
