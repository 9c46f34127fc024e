"""Use cases do canal Email."""

from app.use_cases.email.relay_inbound_email import RelayInboundEmailUseCase, RelayResult

__all__ = [
    "RelayInboundEmailUseCase",
    "RelayResult",
]
