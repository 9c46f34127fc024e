"""Core do módulo AI.

Exporta protocols e clients para uso externo.
A implementação OpenAISummaryClient está em app/infra/ai/ (IO).
"""

from ai.core.client import SummaryClientProtocol
from ai.core.mock_client import MockSummaryClient

__all__ = [
    "MockSummaryClient",
    "SummaryClientProtocol",
]
