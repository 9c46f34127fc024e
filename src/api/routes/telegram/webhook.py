"""Endpoint de webhook do Telegram.

Endpoints:
- POST /webhook/telegram: recebimento de updates do bot

Fluxo:
1. Parse do JSON (inválido → 500, sem processamento)
2. Processamento inline (/start ou callback "dismiss")
3. 200 OK para qualquer update processado, reconhecido ou não

Falha no processamento (ex.: token do bot ausente) → 500.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Request, Response, status

from api.connectors.telegram.webhook import InvalidJsonError, parse_update_body
from app.observability import get_correlation_id, reset_correlation_id, set_correlation_id

logger = logging.getLogger(__name__)

router = APIRouter()

OK_TEXT = "OK"
INTERNAL_ERROR_TEXT = "Internal Server Error"

# Lazy-loaded use case (inicializado na primeira requisição)
_update_use_case = None


def _get_update_use_case():
    """Obtém o use case de tratamento de updates (lazy-loading)."""
    global _update_use_case
    if _update_use_case is None:
        from app.bootstrap.dependencies import create_handle_update_use_case

        _update_use_case = create_handle_update_use_case()
    return _update_use_case


def _plain_response(content: str, status_code: int) -> Response:
    return Response(content=content, media_type="text/plain", status_code=status_code)


@router.post("", response_model=None)
async def receive_webhook(request: Request) -> Response:
    """Recebimento de updates do Telegram.

    Returns:
        "OK" (200) ou "Internal Server Error" (500), em texto puro.
    """
    token = set_correlation_id(request.headers.get("x-correlation-id"))

    try:
        raw_body = await request.body()
        try:
            update = parse_update_body(raw_body)
        except InvalidJsonError as exc:
            logger.warning(
                "webhook_json_invalid",
                extra={
                    "channel": "telegram",
                    "correlation_id": get_correlation_id(),
                    "error": str(exc),
                },
            )
            return _plain_response(INTERNAL_ERROR_TEXT, status.HTTP_500_INTERNAL_SERVER_ERROR)

        logger.info(
            "webhook_received",
            extra={
                "channel": "telegram",
                "correlation_id": get_correlation_id(),
                "payload_size": len(raw_body),
            },
        )

        try:
            outcome = await _get_update_use_case().execute(update)
        except Exception:
            logger.exception(
                "webhook_processing_failed",
                extra={"channel": "telegram", "correlation_id": get_correlation_id()},
            )
            return _plain_response(INTERNAL_ERROR_TEXT, status.HTTP_500_INTERNAL_SERVER_ERROR)

        logger.info(
            "webhook_processed",
            extra={
                "channel": "telegram",
                "correlation_id": get_correlation_id(),
                "outcome": outcome,
            },
        )
        return _plain_response(OK_TEXT, status.HTTP_200_OK)

    finally:
        reset_correlation_id(token)
