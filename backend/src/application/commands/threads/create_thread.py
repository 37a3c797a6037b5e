"""
Create Thread Command.

Opens a thread between the initiator and one recipient, stores the first
message and notifies the recipient. Admin recipients are also e-mailed.

Validation order (nothing is written before all of it passes):
1. department present and known
2. content non-empty
3. subject non-empty, recipient != initiator
4. recipient exists in the user directory
"""

import logging
from dataclasses import dataclass

from src.application.common.interfaces import Command, CommandHandler
from src.application.services.attachments import AttachmentUpload, AttachmentUploader
from src.application.services.thread_notifier import ThreadNotifier
from src.domain.entities.message import Message
from src.domain.entities.thread import Thread, parse_department
from src.domain.exceptions import DomainValidationError, EntityNotFoundError
from src.domain.ports.repositories import (
    MessageRepository,
    ThreadRepository,
    UserDirectory,
)
from src.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass
class CreateThreadResult:
    thread: Thread
    message: Message


@dataclass(frozen=True)
class CreateThreadCommand(Command[CreateThreadResult]):
    subject: str
    initiator_id: UserId
    recipient_id: UserId
    department: str | None
    content: str
    attachments: tuple[AttachmentUpload, ...] = ()


class CreateThreadHandler(CommandHandler[CreateThreadResult]):
    def __init__(
        self,
        thread_repository: ThreadRepository,
        message_repository: MessageRepository,
        user_directory: UserDirectory,
        uploader: AttachmentUploader,
        notifier: ThreadNotifier,
    ):
        self._thread_repository = thread_repository
        self._message_repository = message_repository
        self._user_directory = user_directory
        self._uploader = uploader
        self._notifier = notifier

    async def execute(self, command: CreateThreadCommand) -> CreateThreadResult:
        department = parse_department(command.department)
        if not command.content or not command.content.strip():
            raise DomainValidationError("Message content is required", field="content")
        thread = Thread.create(
            subject=command.subject,
            initiator_id=command.initiator_id,
            recipient_id=command.recipient_id,
            department=department,
        )
        recipient = await self._user_directory.get_by_id(command.recipient_id)
        if recipient is None:
            raise EntityNotFoundError("User", command.recipient_id.value)

        attachments = await self._uploader.upload_all(command.attachments)
        message = Message.create(
            thread_id=thread.id,
            sender_id=command.initiator_id,
            recipient_id=command.recipient_id,
            content=command.content,
            attachments=attachments,
        )
        thread.record_message(message.id, message.created_at)

        await self._thread_repository.save(thread)
        await self._message_repository.save(message)
        logger.info(
            f"[threads] {thread.id} opened by {command.initiator_id} "
            f"for {command.recipient_id} ({department.value})"
        )

        await self._notifier.new_thread(thread, command.recipient_id, command.content)
        return CreateThreadResult(thread=thread, message=message)
