"""
Add Message Command.

Appends a message to an existing thread. The recipient is the first
participant other than the sender; every other participant is notified and
e-mailed. Closed threads still accept messages.
"""

import logging
from dataclasses import dataclass

from src.application.common.interfaces import Command, CommandHandler
from src.application.services.attachments import AttachmentUpload, AttachmentUploader
from src.application.services.thread_notifier import ThreadNotifier
from src.domain.entities.message import Message
from src.domain.exceptions import (
    AccessDeniedError,
    DomainValidationError,
    EntityNotFoundError,
)
from src.domain.ports.repositories import MessageRepository, ThreadRepository
from src.domain.value_objects.thread_id import ThreadId
from src.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AddMessageCommand(Command[Message]):
    thread_id: ThreadId
    sender_id: UserId
    content: str
    attachments: tuple[AttachmentUpload, ...] = ()


class AddMessageHandler(CommandHandler[Message]):
    def __init__(
        self,
        thread_repository: ThreadRepository,
        message_repository: MessageRepository,
        uploader: AttachmentUploader,
        notifier: ThreadNotifier,
    ):
        self._thread_repository = thread_repository
        self._message_repository = message_repository
        self._uploader = uploader
        self._notifier = notifier

    async def execute(self, command: AddMessageCommand) -> Message:
        if not command.content or not command.content.strip():
            raise DomainValidationError("Message content is required", field="content")

        thread = await self._thread_repository.get_by_id(command.thread_id)
        if thread is None:
            raise EntityNotFoundError("Thread", command.thread_id.value)
        if not thread.has_participant(command.sender_id):
            raise AccessDeniedError("You are not a participant of this thread")

        recipients = thread.other_participants(command.sender_id)
        if not recipients:
            raise DomainValidationError("Thread has no recipient other than the sender")

        attachments = await self._uploader.upload_all(command.attachments)
        message = Message.create(
            thread_id=thread.id,
            sender_id=command.sender_id,
            recipient_id=recipients[0],
            content=command.content,
            attachments=attachments,
        )
        await self._message_repository.save(message)
        thread.record_message(message.id, message.created_at)
        await self._thread_repository.save(thread)

        if not thread.is_open:
            logger.info(f"[threads] message {message.id} added to closed thread {thread.id}")

        await self._notifier.new_message(thread, recipients, command.content)
        return message
