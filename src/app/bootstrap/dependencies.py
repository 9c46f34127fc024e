"""Factories de dependências: criação de implementações concretas.

Cada factory lê settings do ambiente e injeta explicitamente nos
serviços e use cases. Nada abaixo do bootstrap consulta o ambiente.
"""

from __future__ import annotations

import logging

from ai.core import MockSummaryClient, SummaryClientProtocol
from ai.services import EmailSummarizer
from api.connectors.telegram import create_telegram_http_client
from app.infra.ai import OpenAISummaryClient
from app.infra.mail import RelaySMTPHandler
from app.services import TelegramDispatcher
from app.use_cases.email import RelayInboundEmailUseCase
from app.use_cases.telegram import HandleTelegramUpdateUseCase
from config.settings import (
    get_email_settings,
    get_openai_settings,
    get_summary_settings,
    get_telegram_settings,
)

logger = logging.getLogger(__name__)


def create_telegram_dispatcher() -> TelegramDispatcher:
    """Cria dispatcher sobre o cliente HTTP da Bot API."""
    settings = get_telegram_settings()
    return TelegramDispatcher(create_telegram_http_client(settings), settings)


def create_summary_client() -> SummaryClientProtocol:
    """Cria client de resumo: OpenAI quando habilitado, mock determinístico caso contrário."""
    openai_settings = get_openai_settings()
    if not openai_settings.enabled:
        logger.info("summary_client_created", extra={"backend": "mock"})
        return MockSummaryClient()

    logger.info(
        "summary_client_created",
        extra={"backend": "openai", "model": openai_settings.model},
    )
    return OpenAISummaryClient(
        settings=openai_settings,
        summary_settings=get_summary_settings(),
    )


def create_email_summarizer() -> EmailSummarizer:
    """Cria serviço de resumo com thresholds do ambiente."""
    return EmailSummarizer(client=create_summary_client(), settings=get_summary_settings())


def create_relay_use_case() -> RelayInboundEmailUseCase:
    """Cria o pipeline de relay email → Telegram."""
    return RelayInboundEmailUseCase(
        dispatcher=create_telegram_dispatcher(),
        summarizer=create_email_summarizer(),
        telegram_settings=get_telegram_settings(),
        email_settings=get_email_settings(),
    )


def create_handle_update_use_case() -> HandleTelegramUpdateUseCase:
    """Cria o handler de updates do webhook Telegram."""
    return HandleTelegramUpdateUseCase(
        dispatcher=create_telegram_dispatcher(),
        email_settings=get_email_settings(),
    )


def create_smtp_handler() -> RelaySMTPHandler:
    """Cria handler aiosmtpd ligado ao pipeline de relay."""
    return RelaySMTPHandler(create_relay_use_case())
