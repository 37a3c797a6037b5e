"""
Message Entity - A single message in a thread.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from src.domain.exceptions.validation_error import DomainValidationError
from src.domain.value_objects.attachment import Attachment
from src.domain.value_objects.message_id import MessageId
from src.domain.value_objects.thread_id import ThreadId
from src.domain.value_objects.user_id import UserId


@dataclass
class Message:
    id: MessageId
    thread_id: ThreadId
    sender_id: UserId
    recipient_id: UserId
    content: str
    created_at: datetime
    attachments: list[Attachment] = field(default_factory=list)
    is_read: bool = False

    @classmethod
    def create(
        cls,
        thread_id: ThreadId,
        sender_id: UserId,
        recipient_id: UserId,
        content: str,
        attachments: Optional[list[Attachment]] = None,
    ) -> Message:
        """Factory method to create a new Message with a generated ID and timestamp."""
        if content is None or not content.strip():
            raise DomainValidationError("Message content is required", field="content")
        return cls(
            id=MessageId.new(),
            thread_id=thread_id,
            sender_id=sender_id,
            recipient_id=recipient_id,
            content=content,
            created_at=datetime.now(timezone.utc),
            attachments=list(attachments or []),
        )

    def mark_read_by(self, reader_id: UserId) -> bool:
        """Flip is_read on the recipient's first read. Returns True if state changed."""
        if reader_id != self.recipient_id or self.is_read:
            return False
        self.is_read = True
        return True

    def is_visible_to(self, user_id: UserId) -> bool:
        return user_id in (self.sender_id, self.recipient_id)

    def add_attachments(self, attachments: list[Attachment]) -> None:
        self.attachments.extend(attachments)
