"""Use cases do canal Telegram."""

from app.use_cases.telegram.handle_update import HandleTelegramUpdateUseCase, UpdateOutcome

__all__ = [
    "HandleTelegramUpdateUseCase",
    "UpdateOutcome",
]
