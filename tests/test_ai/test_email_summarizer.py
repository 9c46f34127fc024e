"""Testes do EmailSummarizer (thresholds, fallbacks e chamada ao client)."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from ai.core import MockSummaryClient
from ai.prompts import EMAIL_SUMMARY_SYSTEM
from ai.rules import SUMMARY_EMPTY, SUMMARY_SKIPPED, SUMMARY_UNAVAILABLE
from ai.services import EmailSummarizer
from config.settings import SummarySettings

LONG_TEXT = "The quarterly report is attached. Please review it before Friday."


def _summarizer(client: object, **settings: int) -> EmailSummarizer:
    return EmailSummarizer(client=client, settings=SummarySettings(**settings))  # type: ignore[arg-type]


@pytest.mark.asyncio
async def test_short_text_skips_client() -> None:
    client = AsyncMock()
    client.complete = AsyncMock(side_effect=RuntimeError("must not be called"))

    result = await _summarizer(client).summarize("Hello world")

    assert result == SUMMARY_SKIPPED
    client.complete.assert_not_called()


@pytest.mark.asyncio
async def test_text_at_threshold_is_summarized() -> None:
    client = AsyncMock()
    client.complete = AsyncMock(return_value="Summary.")

    result = await _summarizer(client, min_chars=20).summarize("x" * 20)

    assert result == "Summary."
    client.complete.assert_awaited_once()


@pytest.mark.asyncio
async def test_success_returns_trimmed_summary() -> None:
    client = AsyncMock()
    client.complete = AsyncMock(return_value="  Report attached for review.  \n")

    result = await _summarizer(client).summarize(LONG_TEXT)

    assert result == "Report attached for review."
    kwargs = client.complete.await_args.kwargs
    assert kwargs["system_prompt"] == EMAIL_SUMMARY_SYSTEM
    assert kwargs["user_prompt"] == LONG_TEXT


@pytest.mark.asyncio
async def test_input_is_bounded() -> None:
    client = AsyncMock()
    client.complete = AsyncMock(return_value="ok")

    await _summarizer(client, max_input_chars=2000).summarize("y" * 5000)

    assert client.complete.await_args.kwargs["user_prompt"] == "y" * 2000


@pytest.mark.asyncio
@pytest.mark.parametrize("raw", ["", "   ", None])
async def test_empty_response_fallback(raw: str | None) -> None:
    client = AsyncMock()
    client.complete = AsyncMock(return_value=raw)

    assert await _summarizer(client).summarize(LONG_TEXT) == SUMMARY_EMPTY


@pytest.mark.asyncio
@pytest.mark.parametrize("error", [TimeoutError(), RuntimeError("api down"), ValueError("bad")])
async def test_client_failure_fallback(error: Exception) -> None:
    client = AsyncMock()
    client.complete = AsyncMock(side_effect=error)

    assert await _summarizer(client).summarize(LONG_TEXT) == SUMMARY_UNAVAILABLE


@pytest.mark.asyncio
async def test_with_mock_client_returns_first_sentence() -> None:
    client = MockSummaryClient()

    result = await _summarizer(client).summarize(LONG_TEXT)

    assert result == "The quarterly report is attached."
    assert len(client.calls) == 1
