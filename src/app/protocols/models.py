"""Modelos compartilhados entre normalizers, use cases e infraestrutura.

Todos os modelos são imutáveis e vivem apenas durante o processamento
de um único email ou de um único evento do webhook.
"""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_ATTACHMENT_NAME = "unnamed_attachment.bin"
DEFAULT_ATTACHMENT_MIME_TYPE = "application/octet-stream"


@dataclass(frozen=True, slots=True)
class EmailAttachment:
    """Anexo de um email já decodificado."""

    content: bytes
    file_name: str | None = None
    mime_type: str | None = None

    @property
    def display_name(self) -> str:
        """Nome declarado ou nome padrão para envio."""
        return self.file_name or DEFAULT_ATTACHMENT_NAME

    @property
    def content_type(self) -> str:
        """MIME type declarado ou padrão binário."""
        return self.mime_type or DEFAULT_ATTACHMENT_MIME_TYPE

    @property
    def size_bytes(self) -> int:
        return len(self.content)


@dataclass(frozen=True, slots=True)
class ParsedEmail:
    """Email recebido já decodificado (saída do parser MIME)."""

    sender: str
    recipient: str
    subject: str | None = None
    plain_text: str | None = None
    markup_text: str | None = None
    attachments: tuple[EmailAttachment, ...] = field(default_factory=tuple)

    @property
    def attachment_count(self) -> int:
        return len(self.attachments)


@dataclass(frozen=True, slots=True)
class NormalizedBody:
    """Corpo normalizado: texto completo (para resumo) e trecho exibível."""

    full_text: str
    snippet: str


@dataclass(frozen=True, slots=True)
class StartCommand:
    """Comando /start recebido em uma conversa."""

    chat_id: int | str


@dataclass(frozen=True, slots=True)
class CallbackEvent:
    """Callback de botão inline vinculado a uma mensagem enviada."""

    chat_id: int | str
    message_id: int
    data: str


InboundEvent = StartCommand | CallbackEvent


@dataclass(frozen=True, slots=True)
class TelegramResult:
    """Resultado de uma chamada à Bot API (sucesso ou falha já tratada)."""

    ok: bool
    status_code: int | None = None
    description: str | None = None
    message_id: int | None = None
