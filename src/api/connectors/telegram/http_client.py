"""Cliente HTTP para a Telegram Bot API.

Implementa TelegramClientProtocol com httpx:
- sendMessage (JSON, parse_mode=HTML, reply_markup opcional)
- sendDocument (multipart, parse_mode=HTML)
- deleteMessage (JSON)

Uma única tentativa por chamada. Status não-2xx e falhas de transporte
são logados e devolvidos como TelegramResult(ok=False); nunca levantam.
Token ausente levanta ConfigurationError (erro fatal de configuração).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from api.connectors.telegram.api_logging import log_api_error, log_success, log_transport_error
from api.connectors.telegram.errors import parse_telegram_error
from app.protocols.models import TelegramResult

if TYPE_CHECKING:
    from config.settings import TelegramSettings

logger: logging.Logger = logging.getLogger(__name__)

PARSE_MODE_HTML = "HTML"


class TelegramHttpClient:
    """Cliente HTTP da Bot API (uma tentativa, sem retry)."""

    __slots__ = ("_settings", "_transport")

    def __init__(
        self,
        settings: TelegramSettings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Inicializa cliente Telegram.

        Args:
            settings: TelegramSettings (token, URL base, timeout)
            transport: Transport httpx opcional (testes)
        """
        self._settings = settings
        self._transport = transport

    async def send_message(
        self,
        chat_id: int | str,
        text: str,
        reply_markup: dict[str, Any] | None = None,
    ) -> TelegramResult:
        """Envia mensagem de texto HTML."""
        payload: dict[str, Any] = {
            "chat_id": chat_id,
            "text": text,
            "parse_mode": PARSE_MODE_HTML,
        }
        if reply_markup is not None:
            payload["reply_markup"] = reply_markup
        return await self._post("sendMessage", json=payload)

    async def send_document(
        self,
        chat_id: int | str,
        *,
        file_name: str,
        content: bytes,
        mime_type: str,
        caption: str,
    ) -> TelegramResult:
        """Envia arquivo como documento (multipart/form-data)."""
        data = {
            "chat_id": str(chat_id),
            "caption": caption,
            "parse_mode": PARSE_MODE_HTML,
        }
        files = {"document": (file_name, content, mime_type)}
        return await self._post("sendDocument", data=data, files=files)

    async def delete_message(self, chat_id: int | str, message_id: int) -> TelegramResult:
        """Remove uma mensagem enviada anteriormente."""
        return await self._post(
            "deleteMessage",
            json={"chat_id": chat_id, "message_id": message_id},
        )

    async def _post(self, method: str, **kwargs: Any) -> TelegramResult:
        url = f"{self._settings.api_endpoint}/{method}"
        try:
            async with httpx.AsyncClient(
                transport=self._transport,
                timeout=self._settings.request_timeout_seconds,
            ) as client:
                response = await client.post(url, **kwargs)
        except httpx.HTTPError as exc:
            log_transport_error(exc, method)
            return TelegramResult(ok=False, description=type(exc).__name__)

        if not response.is_success:
            api_error = parse_telegram_error(response.status_code, response.text)
            log_api_error(api_error, method)
            return TelegramResult(
                ok=False,
                status_code=response.status_code,
                description=api_error.description,
            )

        log_success(method, response.status_code)
        return TelegramResult(
            ok=True,
            status_code=response.status_code,
            message_id=_extract_message_id(response),
        )


def _extract_message_id(response: httpx.Response) -> int | None:
    try:
        data = response.json()
    except ValueError:
        return None
    result = data.get("result") if isinstance(data, dict) else None
    if isinstance(result, dict) and isinstance(result.get("message_id"), int):
        return result["message_id"]
    return None


def create_telegram_http_client(
    settings: TelegramSettings | None = None,
) -> TelegramHttpClient:
    """Factory para criar cliente Telegram com config padrão.

    Args:
        settings: TelegramSettings opcional. Se None, carrega do ambiente.

    Returns:
        Cliente HTTP configurado para Telegram.
    """
    # Import local para evitar dependência circular
    from config.settings import get_telegram_settings

    return TelegramHttpClient(settings=settings or get_telegram_settings())
