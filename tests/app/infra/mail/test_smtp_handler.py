"""Testes do handler SMTP (aiosmtpd) do relay."""

from __future__ import annotations

import smtplib
import socket
from collections.abc import Iterator
from unittest.mock import AsyncMock, MagicMock

import pytest
from aiosmtpd.smtp import Envelope

from app.infra.mail import MimeParseError, RelaySMTPHandler, create_smtp_controller
from app.infra.mail.smtp_handler import (
    SMTP_ACCEPTED,
    SMTP_NOT_CONFIGURED,
    SMTP_PARSE_FAILED,
    SMTP_TEMPORARY_ERROR,
)
from config.settings import EmailSettings
from utils.errors import ConfigurationError

RAW = (
    b"From: a@example.com\r\n"
    b"Subject: Hi\r\n"
    b"Content-Type: text/plain; charset=utf-8\r\n"
    b"\r\n"
    b"Hello world\r\n"
)


def _envelope(rcpt_tos: list[str], content: bytes = RAW) -> Envelope:
    envelope = Envelope()
    envelope.mail_from = "a@example.com"
    envelope.rcpt_tos = rcpt_tos
    envelope.content = content
    envelope.original_content = content
    return envelope


def _relay(side_effect: object = None) -> MagicMock:
    relay = MagicMock()
    relay.relay_raw_email = AsyncMock(side_effect=side_effect)
    return relay


def _free_port() -> int:
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


@pytest.mark.asyncio
async def test_each_recipient_is_relayed_in_order() -> None:
    relay = _relay()
    handler = RelaySMTPHandler(relay)

    status = await handler.handle_DATA(
        MagicMock(), MagicMock(), _envelope(["foo+1@d.com", "foo+2@d.com"])
    )

    assert status == SMTP_ACCEPTED
    calls = relay.relay_raw_email.await_args_list
    assert [call.kwargs["recipient"] for call in calls] == ["foo+1@d.com", "foo+2@d.com"]
    assert calls[0].args[0] == RAW
    assert calls[0].kwargs["sender"] == "a@example.com"


@pytest.mark.asyncio
async def test_missing_configuration_is_temporary_failure() -> None:
    relay = _relay(ConfigurationError("TELEGRAM_BOT_TOKEN is not configured in the environment."))

    status = await RelaySMTPHandler(relay).handle_DATA(
        MagicMock(), MagicMock(), _envelope(["foo+1@d.com"])
    )

    assert status == SMTP_NOT_CONFIGURED
    assert status.startswith("451")


@pytest.mark.asyncio
async def test_unexpected_error_is_temporary_failure() -> None:
    relay = _relay(RuntimeError("boom"))

    status = await RelaySMTPHandler(relay).handle_DATA(
        MagicMock(), MagicMock(), _envelope(["foo+1@d.com"])
    )

    assert status == SMTP_TEMPORARY_ERROR


@pytest.mark.asyncio
async def test_parse_failure_is_temporary_failure() -> None:
    relay = _relay(MimeParseError("invalid_mime"))

    status = await RelaySMTPHandler(relay).handle_DATA(
        MagicMock(), MagicMock(), _envelope(["foo+1@d.com"])
    )

    assert status == SMTP_PARSE_FAILED


@pytest.mark.asyncio
async def test_failure_on_later_recipient_keeps_message_accepted() -> None:
    relay = _relay([None, RuntimeError("boom")])

    status = await RelaySMTPHandler(relay).handle_DATA(
        MagicMock(), MagicMock(), _envelope(["foo+1@d.com", "foo+2@d.com"])
    )

    assert status == SMTP_ACCEPTED
    assert relay.relay_raw_email.await_count == 2


@pytest.mark.asyncio
async def test_failure_on_first_recipient_does_not_stop_the_next() -> None:
    relay = _relay([ConfigurationError("missing token"), None])

    status = await RelaySMTPHandler(relay).handle_DATA(
        MagicMock(), MagicMock(), _envelope(["foo+1@d.com", "foo+2@d.com"])
    )

    assert status == SMTP_ACCEPTED
    recipients = [call.kwargs["recipient"] for call in relay.relay_raw_email.await_args_list]
    assert recipients == ["foo+1@d.com", "foo+2@d.com"]


@pytest.mark.asyncio
async def test_all_recipients_failing_returns_first_failure() -> None:
    relay = _relay([ConfigurationError("missing token"), RuntimeError("boom")])

    status = await RelaySMTPHandler(relay).handle_DATA(
        MagicMock(), MagicMock(), _envelope(["foo+1@d.com", "foo+2@d.com"])
    )

    assert status == SMTP_NOT_CONFIGURED


@pytest.mark.asyncio
async def test_token_miss_is_accepted_without_outbound_calls() -> None:
    from ai.core import MockSummaryClient
    from ai.services import EmailSummarizer
    from app.services import TelegramDispatcher
    from app.use_cases.email import RelayInboundEmailUseCase
    from config.settings import SummarySettings, TelegramSettings
    from tests.fakes.fake_telegram_client import FakeTelegramClient

    client = FakeTelegramClient()
    telegram = TelegramSettings(bot_token="123:abc")
    relay = RelayInboundEmailUseCase(
        dispatcher=TelegramDispatcher(client, telegram),
        summarizer=EmailSummarizer(client=MockSummaryClient(), settings=SummarySettings()),
        telegram_settings=telegram,
        email_settings=EmailSettings(domain="d.com"),
    )

    status = await RelaySMTPHandler(relay).handle_DATA(
        MagicMock(), MagicMock(), _envelope(["tempmail@d.com"])
    )

    assert status == SMTP_ACCEPTED
    assert client.calls == []


def test_controller_uses_email_settings() -> None:
    settings = EmailSettings(domain="d.com", smtp_host="127.0.0.1", smtp_port=2525)

    controller = create_smtp_controller(RelaySMTPHandler(_relay()), settings)

    assert controller.hostname == "127.0.0.1"
    assert controller.port == 2525


class TestSmtpSession:
    """Sessão SMTP real contra o Controller aiosmtpd."""

    @pytest.fixture
    def relay(self) -> MagicMock:
        return _relay()

    @pytest.fixture
    def smtp_port(self, relay: MagicMock) -> Iterator[int]:
        settings = EmailSettings(domain="d.com", smtp_host="127.0.0.1", smtp_port=_free_port())
        controller = create_smtp_controller(RelaySMTPHandler(relay), settings)
        controller.start()
        try:
            yield settings.smtp_port
        finally:
            controller.stop()

    def test_data_without_recipients_is_refused_by_server(
        self, relay: MagicMock, smtp_port: int
    ) -> None:
        with smtplib.SMTP("127.0.0.1", smtp_port) as client:
            client.ehlo()
            client.mail("a@example.com")
            code, _ = client.docmd("DATA")

        assert code == 503
        relay.relay_raw_email.assert_not_called()

    def test_delivery_relays_every_recipient(self, relay: MagicMock, smtp_port: int) -> None:
        with smtplib.SMTP("127.0.0.1", smtp_port) as client:
            refused = client.sendmail("a@example.com", ["foo+1@d.com", "foo+2@d.com"], RAW)

        assert refused == {}
        recipients = [call.kwargs["recipient"] for call in relay.relay_raw_email.await_args_list]
        assert recipients == ["foo+1@d.com", "foo+2@d.com"]
