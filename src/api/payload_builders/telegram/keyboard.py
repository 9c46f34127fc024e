"""Builder do teclado inline (reply_markup) das notificações."""

from __future__ import annotations

from typing import Any, Final

DISMISS_CALLBACK_DATA: Final[str] = "dismiss"
DISMISS_BUTTON_TEXT: Final[str] = "🗑️ Dismiss Email"


def build_dismiss_keyboard() -> dict[str, Any]:
    """Teclado com um único botão que remove a própria mensagem."""
    return {
        "inline_keyboard": [
            [{"text": DISMISS_BUTTON_TEXT, "callback_data": DISMISS_CALLBACK_DATA}],
        ]
    }
