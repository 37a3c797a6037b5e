"""
Toggle Thread Status Commands.

Two entry points flip the same Open/Closed state:
- ToggleThreadStatusHandler: the actor must be a participant
- AdminToggleThreadStatusHandler: the actor must have the admin role

Everyone in the thread except the actor is notified and e-mailed. An admin
who is the only participant toggles silently.
"""

import logging
from dataclasses import dataclass

from src.application.common.interfaces import Command, CommandHandler
from src.application.services.thread_notifier import ThreadNotifier
from src.domain.entities.thread import Thread
from src.domain.entities.user import ROLE_ADMIN
from src.domain.exceptions import AccessDeniedError, EntityNotFoundError
from src.domain.ports.repositories import ThreadRepository
from src.domain.value_objects.thread_id import ThreadId
from src.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ToggleThreadStatusCommand(Command[Thread]):
    thread_id: ThreadId
    actor_id: UserId
    actor_role: str


class ToggleThreadStatusHandler(CommandHandler[Thread]):
    def __init__(self, thread_repository: ThreadRepository, notifier: ThreadNotifier):
        self._thread_repository = thread_repository
        self._notifier = notifier

    def _authorize(self, thread: Thread, command: ToggleThreadStatusCommand) -> None:
        if not thread.has_participant(command.actor_id):
            raise AccessDeniedError("You are not a participant of this thread")

    async def execute(self, command: ToggleThreadStatusCommand) -> Thread:
        thread = await self._thread_repository.get_by_id(command.thread_id)
        if thread is None:
            raise EntityNotFoundError("Thread", command.thread_id.value)
        self._authorize(thread, command)

        is_open = thread.toggle_status()
        await self._thread_repository.save(thread)
        logger.info(
            f"[threads] {thread.id} {'opened' if is_open else 'closed'} by {command.actor_id}"
        )

        recipients = thread.other_participants(command.actor_id)
        if not recipients:
            logger.info(f"[threads] {thread.id} has no one else to notify")
            return thread
        await self._notifier.status_changed(thread, recipients)
        return thread


class AdminToggleThreadStatusHandler(ToggleThreadStatusHandler):
    def _authorize(self, thread: Thread, command: ToggleThreadStatusCommand) -> None:
        if command.actor_role != ROLE_ADMIN:
            raise AccessDeniedError("Admin role required")
