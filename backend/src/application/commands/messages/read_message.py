"""
Read Message Command - open one message.

Opening is allowed for the sender, the recipient and admins. The recipient's
first open flips is_read; that state is separate from notification read-state.
"""

from dataclasses import dataclass

from src.application.common.interfaces import Command, CommandHandler
from src.domain.entities.message import Message
from src.domain.entities.user import ROLE_ADMIN
from src.domain.exceptions import AccessDeniedError, EntityNotFoundError
from src.domain.ports.repositories import MessageRepository
from src.domain.value_objects.message_id import MessageId
from src.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class ReadMessageCommand(Command[Message]):
    message_id: MessageId
    reader_id: UserId
    reader_role: str


class ReadMessageHandler(CommandHandler[Message]):
    def __init__(self, message_repository: MessageRepository):
        self._message_repository = message_repository

    async def execute(self, command: ReadMessageCommand) -> Message:
        message = await self._message_repository.get_by_id(command.message_id)
        if message is None:
            raise EntityNotFoundError("Message", command.message_id.value)
        if not message.is_visible_to(command.reader_id) and command.reader_role != ROLE_ADMIN:
            raise AccessDeniedError("You cannot read this message")

        if message.mark_read_by(command.reader_id):
            await self._message_repository.save(message)
        return message
