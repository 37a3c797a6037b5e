"""
Add Attachment Command - attach files to an already sent message.

Only the sender may attach. Files go through the same uploader as new
messages; when none of them could be stored the command fails instead of
returning an unchanged message.
"""

from dataclasses import dataclass

from src.application.common.interfaces import Command, CommandHandler
from src.application.services.attachments import AttachmentUpload, AttachmentUploader
from src.domain.entities.message import Message
from src.domain.exceptions import (
    AccessDeniedError,
    DomainValidationError,
    EntityNotFoundError,
)
from src.domain.ports.repositories import MessageRepository
from src.domain.value_objects.message_id import MessageId
from src.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class AddAttachmentCommand(Command[Message]):
    message_id: MessageId
    sender_id: UserId
    attachments: tuple[AttachmentUpload, ...]


class AddAttachmentHandler(CommandHandler[Message]):
    def __init__(self, message_repository: MessageRepository, uploader: AttachmentUploader):
        self._message_repository = message_repository
        self._uploader = uploader

    async def execute(self, command: AddAttachmentCommand) -> Message:
        message = await self._message_repository.get_by_id(command.message_id)
        if message is None:
            raise EntityNotFoundError("Message", command.message_id.value)
        if message.sender_id != command.sender_id:
            raise AccessDeniedError("Only the sender can attach files to this message")
        if not command.attachments:
            raise DomainValidationError("An attachment file is required", field="file")

        stored = await self._uploader.upload_all(command.attachments)
        if not stored:
            raise DomainValidationError("The attachment could not be stored", field="file")

        message.add_attachments(stored)
        await self._message_repository.save(message)
        return message
