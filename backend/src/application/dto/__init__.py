"""
DTOs - Data Transfer Objects

DTOs for transferring data between layers:
- thread.py       → ThreadDTO, ThreadDetailDTO, ThreadPageDTO
- message.py      → MessageDTO, AttachmentDTO, MessagePageDTO
- notification.py → NotificationDTO, NotificationPageDTO

Note: These are different from domain entities.
DTOs are for API input/output, entities are for business logic.
"""

from src.application.dto.message import AttachmentDTO, MessageDTO, MessagePageDTO
from src.application.dto.thread import (
    CreateThreadDTO,
    ThreadDTO,
    ThreadDetailDTO,
    ThreadListDTO,
    ThreadPageDTO,
)
from src.application.dto.notification import (
    ModifiedCountDTO,
    NotificationDTO,
    NotificationPageDTO,
    NotificationReadDTO,
    UnreadCountDTO,
)

__all__ = [
    "AttachmentDTO",
    "MessageDTO",
    "MessagePageDTO",
    "CreateThreadDTO",
    "ThreadDTO",
    "ThreadDetailDTO",
    "ThreadListDTO",
    "ThreadPageDTO",
    "ModifiedCountDTO",
    "NotificationDTO",
    "NotificationPageDTO",
    "NotificationReadDTO",
    "UnreadCountDTO",
]
