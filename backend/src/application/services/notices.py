"""E-mail notices raised by thread activity."""

from typing import Optional

from src.application.services.escalation import EmailNotice
from src.config.settings import Config
from src.domain.entities.thread import Thread
from src.domain.entities.user import User
from src.infrastructure.mail.templates import (
    render_new_message,
    render_new_thread,
    render_thread_status,
)


def recipient_address(user: Optional[User]) -> str:
    """The user's own address; admins without one fall back to ADMIN_EMAIL."""
    if user is None:
        return ""
    if user.email:
        return user.email
    return Config.ADMIN_EMAIL if user.is_admin else ""


def new_thread_notice(to: str, thread: Thread, link: str, content: str) -> EmailNotice:
    return EmailNotice(
        to=to,
        subject=f"New thread: {thread.subject}",
        html=render_new_thread(thread.subject, link, content, thread.department.value),
    )


def new_message_notice(to: str, thread: Thread, link: str, content: str) -> EmailNotice:
    return EmailNotice(
        to=to,
        subject=f"New message in thread: {thread.subject}",
        html=render_new_message(thread.subject, link, content),
    )


def thread_status_notice(to: str, thread: Thread, link: str) -> EmailNotice:
    state = "reopened" if thread.is_open else "closed"
    return EmailNotice(
        to=to,
        subject=f"Thread {state}: {thread.subject}",
        html=render_thread_status(thread.subject, link, thread.is_open),
    )
