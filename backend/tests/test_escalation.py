"""EscalationChannel: fire-and-forget e-mail."""

import asyncio

import pytest

from conftest import FailingMailer
from src.application.services import EmailNotice, EscalationChannel
from src.infrastructure.mail import InMemoryMailer
from src.infrastructure.mail.templates import render_new_message, truncate_preview


class SlowMailer(InMemoryMailer):
    def __init__(self):
        super().__init__()
        self.release = asyncio.Event()

    async def send(self, to, subject, html):
        await self.release.wait()
        await super().send(to, subject, html)


@pytest.mark.asyncio
async def test_escalate_returns_before_send_completes():
    mailer = SlowMailer()
    escalation = EscalationChannel(mailer)

    escalation.escalate(EmailNotice("alice@example.com", "Subject", "<p>hi</p>"))

    assert mailer.outbox == []
    assert escalation.pending == 1
    mailer.release.set()
    await escalation.drain()
    assert [e.to for e in mailer.outbox] == ["alice@example.com"]
    assert escalation.pending == 0


@pytest.mark.asyncio
async def test_failed_send_is_swallowed():
    escalation = EscalationChannel(FailingMailer())

    escalation.escalate(EmailNotice("alice@example.com", "Subject", "<p>hi</p>"))
    await escalation.drain()

    assert escalation.pending == 0


def test_preview_is_truncated():
    preview = truncate_preview("x" * 500, limit=200)

    assert len(preview) == 200
    assert preview.endswith("…")


def test_template_escapes_content():
    html = render_new_message("<b>Subject</b>", "http://frontend.test/t/1", "<script>alert(1)</script>")

    assert "<script>" not in html
    assert "&lt;script&gt;" in html
    assert "&lt;b&gt;Subject&lt;/b&gt;" in html
