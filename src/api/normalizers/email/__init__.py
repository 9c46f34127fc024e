"""Normalizer Email: roteamento e normalização de emails recebidos.

Responsabilidades:
- Extrair o token de roteamento (chat_id) do destinatário
- Normalizar corpo text/plain ou text/html para texto limpo e limitado
"""

from .extractor import extract_routing_token
from .normalizer import (
    TRUNCATION_MARKER,
    build_snippet,
    extract_body_text,
    normalize_body,
    strip_markup,
)

__all__ = [
    "TRUNCATION_MARKER",
    "build_snippet",
    "extract_body_text",
    "extract_routing_token",
    "normalize_body",
    "strip_markup",
]
