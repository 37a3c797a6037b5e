"""Thread DTOs for API request/response."""

from datetime import datetime
from typing import Optional

from src.application.dto.base import CamelModel
from src.application.dto.message import MessageDTO
from src.domain.entities.message import Message
from src.domain.entities.thread import Thread


class ThreadDTO(CamelModel):
    id: str
    subject: str
    participants: list[str]
    department: str
    is_open: bool
    last_message_id: Optional[str] = None
    last_message_date: datetime
    created_at: datetime

    @classmethod
    def from_entity(cls, thread: Thread) -> "ThreadDTO":
        return cls(
            id=thread.id.value,
            subject=thread.subject,
            participants=[p.value for p in thread.participants],
            department=thread.department.value,
            is_open=thread.is_open,
            last_message_id=thread.last_message_id.value if thread.last_message_id else None,
            last_message_date=thread.last_message_date,
            created_at=thread.created_at,
        )


class ThreadDetailDTO(ThreadDTO):
    messages: list[MessageDTO] = []

    @classmethod
    def from_detail(cls, thread: Thread, messages: list[Message]) -> "ThreadDetailDTO":
        return cls(
            **ThreadDTO.from_entity(thread).model_dump(),
            messages=[MessageDTO.from_entity(m) for m in messages],
        )


class ThreadListDTO(CamelModel):
    threads: list[ThreadDTO]


class ThreadPageDTO(CamelModel):
    threads: list[ThreadDTO]
    current_page: int
    total_pages: int
    total_count: int


class CreateThreadDTO(CamelModel):
    thread: ThreadDTO
    message: MessageDTO
