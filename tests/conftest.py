"""Configuração do pytest para o TempMail Relay."""

import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Isola testes que alteram o ambiente das settings cacheadas."""
    from config.settings import (
        get_base_settings,
        get_email_settings,
        get_openai_settings,
        get_summary_settings,
        get_telegram_settings,
    )

    getters = (
        get_base_settings,
        get_email_settings,
        get_openai_settings,
        get_summary_settings,
        get_telegram_settings,
    )
    for getter in getters:
        getter.cache_clear()
    yield
    for getter in getters:
        getter.cache_clear()
