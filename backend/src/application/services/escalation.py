"""
Escalation Channel - best-effort outbound e-mail.

escalate() schedules one send attempt on the running loop and returns at
once. The attempt catches everything it raises: a broken SMTP server is
logged and counted, never surfaced to the request that triggered it. There
is no retry.
"""

import asyncio
import logging
from dataclasses import dataclass

from src.domain.ports.mailer import Mailer
from src.observability.metrics import MetricsErrorType, increment_error, record_email

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EmailNotice:
    to: str
    subject: str
    html: str


class EscalationChannel:
    def __init__(self, mailer: Mailer):
        self._mailer = mailer
        self._pending: set[asyncio.Task] = set()

    def escalate(self, notice: EmailNotice) -> None:
        task = asyncio.create_task(self._attempt(notice))
        # The loop keeps only weak references to tasks.
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)

    async def _attempt(self, notice: EmailNotice) -> None:
        try:
            await self._mailer.send(notice.to, notice.subject, notice.html)
            record_email("sent")
            logger.info(f"[escalation] sent '{notice.subject}' to {notice.to}")
        except Exception as e:
            record_email("failed")
            increment_error(MetricsErrorType.EMAIL_FAILED)
            logger.error(f"[escalation] '{notice.subject}' to {notice.to} failed: {e}")

    @property
    def pending(self) -> int:
        return len(self._pending)

    async def drain(self) -> None:
        """Wait for every scheduled attempt to finish."""
        while self._pending:
            await asyncio.gather(*list(self._pending), return_exceptions=True)
