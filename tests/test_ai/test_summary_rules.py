"""Testes dos fallbacks e do prompt de resumo."""

from __future__ import annotations

import pytest

from ai.core import MockSummaryClient
from ai.prompts import format_email_summary_prompt
from ai.rules import SUMMARY_EMPTY, SUMMARY_SKIPPED, SUMMARY_UNAVAILABLE, fallback_summary


def test_fallback_texts() -> None:
    assert SUMMARY_SKIPPED == "No content available to summarize."
    assert SUMMARY_EMPTY == "Summary generation yielded no result."
    assert SUMMARY_UNAVAILABLE == "Automated summary temporarily unavailable."


@pytest.mark.parametrize(
    ("reason", "expected"),
    [
        ("too_short", SUMMARY_SKIPPED),
        ("empty_response", SUMMARY_EMPTY),
        ("TimeoutError", SUMMARY_UNAVAILABLE),
        ("error", SUMMARY_UNAVAILABLE),
    ],
)
def test_fallback_by_reason(reason: str, expected: str) -> None:
    assert fallback_summary(reason) == expected


def test_prompt_cuts_by_character() -> None:
    assert format_email_summary_prompt("abcdef", 3) == "abc"
    assert format_email_summary_prompt("ab", 3) == "ab"


@pytest.mark.asyncio
async def test_mock_client_empty_input() -> None:
    client = MockSummaryClient()
    assert await client.complete(system_prompt="s", user_prompt="   ") is None


@pytest.mark.asyncio
async def test_mock_client_limits_sentence_length() -> None:
    client = MockSummaryClient()
    result = await client.complete(system_prompt="s", user_prompt="w" * 500)
    assert result == "w" * 200
