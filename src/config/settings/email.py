"""Settings específicas de Email.

Configurações do canal Email: domínio dos endereços descartáveis,
política de snippet e servidor SMTP de recebimento.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_ADDRESS_LOCAL_PART = "tempmail"
DEFAULT_SNIPPET_MAX_CHARS = 500


@dataclass(frozen=True)
class EmailSettings:
    """Configurações do canal Email.

    Attributes:
        domain: Domínio usado para montar os endereços emitidos
        address_local_part: Parte local antes do sub-endereço (+chat_id)
        snippet_max_chars: Tamanho máximo do trecho exibido na notificação
        smtp_enabled: Sobe servidor SMTP (aiosmtpd) junto com a aplicação
        smtp_host: Host de bind do servidor SMTP
        smtp_port: Porta de bind do servidor SMTP
    """

    # Identidade
    domain: str = ""
    address_local_part: str = DEFAULT_ADDRESS_LOCAL_PART

    # Política de conteúdo
    snippet_max_chars: int = DEFAULT_SNIPPET_MAX_CHARS

    # SMTP (recebimento)
    smtp_enabled: bool = False
    smtp_host: str = "0.0.0.0"
    smtp_port: int = 8025

    def build_address(self, chat_id: int | str) -> str:
        """Monta endereço roteável no formato local+<chat_id>@domain."""
        return f"{self.address_local_part}+{chat_id}@{self.domain}"

    def validate(self) -> list[str]:
        """Valida configurações mínimas de Email."""
        errors: list[str] = []
        if not self.domain:
            errors.append("DOMAIN não configurado")
        if not self.address_local_part or "+" in self.address_local_part:
            errors.append("EMAIL_ADDRESS_LOCAL_PART inválido")
        if self.snippet_max_chars <= 0:
            errors.append("EMAIL_SNIPPET_MAX_CHARS deve ser > 0")
        if self.smtp_enabled and not 0 < self.smtp_port < 65536:
            errors.append(f"SMTP_PORT inválido: {self.smtp_port}")
        return errors


def _load_from_env() -> EmailSettings:
    """Carrega EmailSettings de variáveis de ambiente."""
    return EmailSettings(
        domain=os.getenv("DOMAIN", ""),
        address_local_part=os.getenv("EMAIL_ADDRESS_LOCAL_PART", DEFAULT_ADDRESS_LOCAL_PART),
        snippet_max_chars=int(
            os.getenv("EMAIL_SNIPPET_MAX_CHARS", str(DEFAULT_SNIPPET_MAX_CHARS))
        ),
        smtp_enabled=os.getenv("SMTP_ENABLED", "").lower() in ("true", "1", "yes"),
        smtp_host=os.getenv("SMTP_HOST", "0.0.0.0"),
        smtp_port=int(os.getenv("SMTP_PORT", "8025")),
    )


@lru_cache(maxsize=1)
def get_email_settings() -> EmailSettings:
    """Retorna instância cacheada de EmailSettings."""
    return _load_from_env()
