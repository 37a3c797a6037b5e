"""
Delete Message Command - admin removal of a single message.

When the removed message was the thread's newest, the thread is pointed at
the newest remaining one. last_message_date is left as it was.
"""

import logging
from dataclasses import dataclass

from src.application.common.interfaces import Command, CommandHandler
from src.domain.entities.user import ROLE_ADMIN
from src.domain.exceptions import AccessDeniedError, EntityNotFoundError
from src.domain.ports.repositories import MessageRepository, ThreadRepository
from src.domain.value_objects.message_id import MessageId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeleteMessageCommand(Command[None]):
    message_id: MessageId
    actor_role: str


class DeleteMessageHandler(CommandHandler[None]):
    def __init__(
        self,
        message_repository: MessageRepository,
        thread_repository: ThreadRepository,
    ):
        self._message_repository = message_repository
        self._thread_repository = thread_repository

    async def execute(self, command: DeleteMessageCommand) -> None:
        if command.actor_role != ROLE_ADMIN:
            raise AccessDeniedError("Admin role required")

        message = await self._message_repository.get_by_id(command.message_id)
        if message is None or not await self._message_repository.delete(command.message_id):
            raise EntityNotFoundError("Message", command.message_id.value)
        logger.info(f"[messages] message {message.id} deleted from thread {message.thread_id}")

        thread = await self._thread_repository.get_by_id(message.thread_id)
        if thread is None or thread.last_message_id != message.id:
            return
        remaining = await self._message_repository.get_by_thread(thread.id, limit=1)
        thread.last_message_id = remaining[-1].id if remaining else None
        await self._thread_repository.save(thread)
