"""
ThreadNotifier - fans thread activity out to the other participants.

Per recipient: one dispatched notification (live push + unread count) and one
scheduled e-mail. Links follow the recipient's role.
"""

import logging

from src.application.services.escalation import EscalationChannel
from src.application.services.links import thread_url
from src.application.services.notices import (
    new_message_notice,
    new_thread_notice,
    recipient_address,
    thread_status_notice,
)
from src.application.services.notification_dispatcher import NotificationDispatcher
from src.domain.entities.notification import NewMessage, ThreadStatusChange
from src.domain.entities.thread import Thread
from src.domain.entities.user import User
from src.domain.ports.repositories import UserDirectory
from src.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


class ThreadNotifier:
    def __init__(
        self,
        dispatcher: NotificationDispatcher,
        escalation: EscalationChannel,
        user_directory: UserDirectory,
    ):
        self._dispatcher = dispatcher
        self._escalation = escalation
        self._user_directory = user_directory

    async def _lookup(self, user_ids: list[UserId]) -> dict[UserId, User]:
        try:
            return await self._user_directory.get_many(user_ids)
        except Exception as e:
            logger.warning(f"[threads] user lookup failed, using default links: {e}")
            return {}

    async def new_thread(self, thread: Thread, recipient_id: UserId, content: str) -> None:
        """Notify the recipient of a fresh thread; admins also get an e-mail."""
        users = await self._lookup([recipient_id])
        user = users.get(recipient_id)
        link = thread_url(thread.id, user)
        await self._dispatcher.dispatch(
            recipient_id,
            f'New thread "{thread.subject}"',
            NewMessage(thread_id=thread.id, subject=thread.subject, thread_url=link),
        )
        if user is not None and user.is_admin:
            self._schedule(recipient_address(user), new_thread_notice, thread, link, content)

    async def new_message(self, thread: Thread, recipients: list[UserId], content: str) -> None:
        users = await self._lookup(recipients)
        for recipient_id in recipients:
            user = users.get(recipient_id)
            link = thread_url(thread.id, user)
            await self._dispatcher.dispatch(
                recipient_id,
                f'New message in thread "{thread.subject}"',
                NewMessage(thread_id=thread.id, subject=thread.subject, thread_url=link),
            )
            self._schedule(recipient_address(user), new_message_notice, thread, link, content)

    async def status_changed(self, thread: Thread, recipients: list[UserId]) -> None:
        users = await self._lookup(recipients)
        state = "reopened" if thread.is_open else "closed"
        for recipient_id in recipients:
            user = users.get(recipient_id)
            link = thread_url(thread.id, user)
            await self._dispatcher.dispatch(
                recipient_id,
                f'Thread "{thread.subject}" was {state}',
                ThreadStatusChange(
                    thread_id=thread.id,
                    is_open=thread.is_open,
                    subject=thread.subject,
                    thread_url=link,
                ),
            )
            self._schedule(recipient_address(user), thread_status_notice, thread, link)

    def _schedule(self, to: str, build, thread: Thread, *args) -> None:
        if not to:
            logger.debug(f"[threads] no e-mail address for a recipient of thread {thread.id}")
            return
        self._escalation.escalate(build(to, thread, *args))
