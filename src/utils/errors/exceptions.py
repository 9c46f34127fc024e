"""Exceções de domínio compartilhadas."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Configuração obrigatória ausente ou inválida (fatal para a invocação)."""
