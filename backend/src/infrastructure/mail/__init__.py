"""Outbound e-mail transports and templates."""

from src.infrastructure.mail.smtp_mailer import SmtpMailer
from src.infrastructure.mail.in_memory_mailer import InMemoryMailer, SentEmail

__all__ = [
    "SmtpMailer",
    "InMemoryMailer",
    "SentEmail",
]
