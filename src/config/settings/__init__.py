"""Settings do TempMail Relay, agrupadas por domínio.

Cada domínio expõe um dataclass imutável, carregado do ambiente uma
única vez por getter cacheado. O bootstrap injeta as instâncias nos
serviços; o pipeline não consulta o ambiente.
"""

from __future__ import annotations

from config.settings.ai import (
    OpenAISettings,
    SummarySettings,
    get_openai_settings,
    get_summary_settings,
)
from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.email import (
    EmailSettings,
    get_email_settings,
)
from config.settings.telegram import (
    TELEGRAM_API_BASE_URL,
    TELEGRAM_DOCUMENT_LIMIT_MB,
    TelegramSettings,
    get_telegram_settings,
)

__all__ = [
    "TELEGRAM_API_BASE_URL",
    "TELEGRAM_DOCUMENT_LIMIT_MB",
    "BaseSettings",
    "EmailSettings",
    "Environment",
    "OpenAISettings",
    "SummarySettings",
    "TelegramSettings",
    "get_base_settings",
    "get_email_settings",
    "get_openai_settings",
    "get_summary_settings",
    "get_telegram_settings",
]
