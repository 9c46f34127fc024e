"""Router principal do Telegram: agrega os endpoints do canal."""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.telegram.webhook import router as webhook_router

WEBHOOK_PREFIX = "/webhook/telegram"

router = APIRouter()

# POST /webhook/telegram (sem barra final)
router.include_router(webhook_router, prefix=WEBHOOK_PREFIX)
