"""Message DTOs for API response."""

from datetime import datetime

from src.application.dto.base import CamelModel
from src.domain.entities.message import Message


class AttachmentDTO(CamelModel):
    filename: str
    url: str


class MessageDTO(CamelModel):
    """DTO for message data returned to frontend."""

    id: str
    thread_id: str
    sender_id: str
    recipient_id: str
    content: str
    attachments: list[AttachmentDTO] = []
    is_read: bool
    created_at: datetime

    @classmethod
    def from_entity(cls, message: Message) -> "MessageDTO":
        return cls(
            id=message.id.value,
            thread_id=message.thread_id.value,
            sender_id=message.sender_id.value,
            recipient_id=message.recipient_id.value,
            content=message.content,
            attachments=[AttachmentDTO(**a.to_dict()) for a in message.attachments],
            is_read=message.is_read,
            created_at=message.created_at,
        )


class MessagePageDTO(CamelModel):
    messages: list[MessageDTO]
    current_page: int
    total_pages: int
    total_count: int
