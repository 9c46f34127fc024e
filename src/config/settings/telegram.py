"""Settings específicas de Telegram.

Configurações do canal Telegram via Bot API.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from utils.errors import ConfigurationError

# Constantes da Telegram Bot API
TELEGRAM_API_BASE_URL: str = "https://api.telegram.org"

# Limite de upload de documentos da Bot API (sendDocument)
TELEGRAM_DOCUMENT_LIMIT_MB: int = 50


@dataclass(frozen=True)
class TelegramSettings:
    """Configurações do canal Telegram.

    Attributes:
        bot_token: Token do bot Telegram (obtido via @BotFather)
        api_base_url: URL base da API
        request_timeout_seconds: Timeout para requisições HTTP
        document_limit_mb: Teto de tamanho de arquivo aceito pela Bot API
    """

    # Credenciais
    bot_token: str = ""

    # API
    api_base_url: str = TELEGRAM_API_BASE_URL

    # Timeouts
    request_timeout_seconds: float = 30.0

    # Limites da plataforma
    document_limit_mb: int = TELEGRAM_DOCUMENT_LIMIT_MB

    @property
    def is_configured(self) -> bool:
        """Retorna True se o token do bot está presente."""
        return bool(self.bot_token.strip())

    @property
    def api_endpoint(self) -> str:
        """URL base completa da API com token do bot.

        Raises:
            ConfigurationError: Se TELEGRAM_BOT_TOKEN não estiver configurado.
        """
        if not self.is_configured:
            raise ConfigurationError("TELEGRAM_BOT_TOKEN is not configured in the environment.")
        return f"{self.api_base_url.rstrip('/')}/bot{self.bot_token}"

    def validate(self) -> list[str]:
        """Valida configurações mínimas de Telegram."""
        errors: list[str] = []
        if not self.is_configured:
            errors.append("TELEGRAM_BOT_TOKEN não configurado")
        if self.request_timeout_seconds <= 0:
            errors.append("TELEGRAM_REQUEST_TIMEOUT_SECONDS deve ser > 0")
        if self.document_limit_mb <= 0:
            errors.append("TELEGRAM_DOCUMENT_LIMIT_MB deve ser > 0")
        return errors


def _load_from_env() -> TelegramSettings:
    """Carrega TelegramSettings de variáveis de ambiente."""
    return TelegramSettings(
        bot_token=os.getenv("TELEGRAM_BOT_TOKEN", ""),
        api_base_url=os.getenv("TELEGRAM_API_BASE_URL", TELEGRAM_API_BASE_URL),
        request_timeout_seconds=float(os.getenv("TELEGRAM_REQUEST_TIMEOUT_SECONDS", "30")),
        document_limit_mb=int(
            os.getenv("TELEGRAM_DOCUMENT_LIMIT_MB", str(TELEGRAM_DOCUMENT_LIMIT_MB))
        ),
    )


@lru_cache(maxsize=1)
def get_telegram_settings() -> TelegramSettings:
    """Retorna instância cacheada de TelegramSettings."""
    return _load_from_env()
