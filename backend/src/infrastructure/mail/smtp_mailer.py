"""
SMTP transport for escalation e-mails.

smtplib is blocking, so the actual exchange runs in a worker thread.
Errors are raised to the caller; the escalation channel logs them.
"""

import asyncio
import logging
import smtplib
from email.message import EmailMessage
from email.utils import formataddr
from typing import Optional

from src.config.settings import Config
from src.domain.ports.mailer import Mailer

logger = logging.getLogger(__name__)


class SmtpMailer(Mailer):
    def __init__(
        self,
        server: Optional[str] = None,
        port: Optional[int] = None,
        user: Optional[str] = None,
        password: Optional[str] = None,
        from_email: Optional[str] = None,
        from_name: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self._server = server or Config.SMTP_SERVER
        self._port = port or Config.SMTP_PORT
        self._user = user if user is not None else Config.SMTP_USER
        self._password = password if password is not None else Config.SMTP_PASSWORD
        self._from_email = from_email or Config.FROM_EMAIL or self._user
        self._from_name = from_name or Config.FROM_NAME
        self._timeout = timeout or Config.SMTP_TIMEOUT

    async def send(self, to: str, subject: str, html: str) -> None:
        if not self._user or not self._password:
            raise RuntimeError("SMTP credentials are not configured.")
        if not to:
            raise ValueError("No recipient address provided.")

        msg = EmailMessage()
        msg["From"] = formataddr((self._from_name, self._from_email))
        msg["To"] = to
        msg["Subject"] = subject
        msg.set_content("This message requires an HTML-capable mail client.")
        msg.add_alternative(html, subtype="html")

        await asyncio.to_thread(self._deliver, msg)
        logger.debug(f"[smtp] sent '{subject}' to {to}")

    def _deliver(self, msg: EmailMessage) -> None:
        with smtplib.SMTP(self._server, self._port, timeout=self._timeout) as server:
            server.starttls()
            server.login(self._user, self._password)
            server.send_message(msg)
