"""Configuração de logging estruturado do relay.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (app/bootstrap)
    configure_logging(level="INFO", service_name="tempmail_relay")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("email_relayed", extra={"chat_id": "123"})

Campos presentes em todo log: asctime, level, logger, message,
correlation_id e service. Corpos de email nunca são logados.
"""

from config.logging.config import (
    DEFAULT_SERVICE_NAME,
    VALID_LOG_LEVELS,
    configure_logging,
    get_logger,
    log_fallback,
)
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    TEXT_LOG_FORMAT,
    create_json_formatter,
    create_text_formatter,
)

__all__ = [
    "DEFAULT_SERVICE_NAME",
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "TEXT_LOG_FORMAT",
    "VALID_LOG_LEVELS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "create_text_formatter",
    "get_logger",
    "log_fallback",
]
