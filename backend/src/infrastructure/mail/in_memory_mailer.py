"""
In-memory mail transport: keeps an outbox instead of sending.
Used when MAIL_BACKEND=memory (local development, tests).
"""

from dataclasses import dataclass

from src.domain.ports.mailer import Mailer


@dataclass(frozen=True)
class SentEmail:
    to: str
    subject: str
    html: str


class InMemoryMailer(Mailer):
    def __init__(self):
        self.outbox: list[SentEmail] = []

    async def send(self, to: str, subject: str, html: str) -> None:
        if not to:
            raise ValueError("No recipient address provided.")
        self.outbox.append(SentEmail(to=to, subject=subject, html=html))
