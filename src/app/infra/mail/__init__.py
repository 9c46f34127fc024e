"""Infraestrutura de email: parser MIME e servidor SMTP (aiosmtpd)."""

from app.infra.mail.mime_parser import MimeParseError, parse_raw_email
from app.infra.mail.smtp_handler import RelaySMTPHandler, create_smtp_controller

__all__ = [
    "MimeParseError",
    "RelaySMTPHandler",
    "create_smtp_controller",
    "parse_raw_email",
]
