"""
Notification DTOs for API response.

The REST representation is the same object live `notification` events carry
(application/services/routing.py notification_to_wire), so clients parse one
shape.
"""

from datetime import datetime
from typing import Optional

from src.application.dto.base import CamelModel
from src.application.dto.message import AttachmentDTO
from src.application.services.routing import notification_to_wire
from src.domain.entities.notification import Notification


class NotificationDTO(CamelModel):
    id: str
    user_id: str
    type: str
    message: str
    is_read: bool
    created_at: datetime
    order_id: Optional[str] = None
    order_number: Optional[str] = None
    order_url: Optional[str] = None
    new_status: Optional[str] = None
    thread_id: Optional[str] = None
    subject: Optional[str] = None
    thread_url: Optional[str] = None
    is_open: Optional[bool] = None
    file: Optional[AttachmentDTO] = None

    @classmethod
    def from_entity(cls, notification: Notification) -> "NotificationDTO":
        return cls.model_validate(notification_to_wire(notification))


class NotificationPageDTO(CamelModel):
    notifications: list[NotificationDTO]
    current_page: int
    total_pages: int
    total_count: int


class NotificationReadDTO(CamelModel):
    notification: NotificationDTO
    unread_count: Optional[int] = None


class UnreadCountDTO(CamelModel):
    count: int


class ModifiedCountDTO(CamelModel):
    modified: int
