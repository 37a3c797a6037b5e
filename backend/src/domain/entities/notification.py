"""
Notification Entity - A typed, user-targeted record of an event.

The type-specific part of a notification is a variant: one frozen dataclass
per NotificationType, each carrying only the fields that type needs. Thread
variants never carry an order, order variants never carry a thread.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import ClassVar, Optional, Union

from src.domain.value_objects.attachment import Attachment
from src.domain.value_objects.notification_id import NotificationId
from src.domain.value_objects.order_id import OrderId
from src.domain.value_objects.thread_id import ThreadId
from src.domain.value_objects.user_id import UserId


class NotificationType(str, Enum):
    STATUS_CHANGE = "status_change"
    FILE_ADDED = "file_added"
    THREAD_STATUS_CHANGE = "thread_status_change"
    NEW_MESSAGE = "new_message"
    ORDER_STATUS_CHANGE = "order_status_change"
    NEW_ADMIN_COMMENT = "new_admin_comment"


@dataclass(frozen=True)
class StatusChange:
    type: ClassVar[NotificationType] = NotificationType.STATUS_CHANGE
    order_id: OrderId
    order_number: Optional[str] = None


@dataclass(frozen=True)
class FileAdded:
    type: ClassVar[NotificationType] = NotificationType.FILE_ADDED
    order_id: OrderId
    file: Optional[Attachment] = None
    order_number: Optional[str] = None


@dataclass(frozen=True)
class ThreadStatusChange:
    type: ClassVar[NotificationType] = NotificationType.THREAD_STATUS_CHANGE
    thread_id: ThreadId
    is_open: bool
    subject: Optional[str] = None
    thread_url: Optional[str] = None


@dataclass(frozen=True)
class NewMessage:
    type: ClassVar[NotificationType] = NotificationType.NEW_MESSAGE
    thread_id: ThreadId
    subject: Optional[str] = None
    thread_url: Optional[str] = None


@dataclass(frozen=True)
class OrderStatusChange:
    type: ClassVar[NotificationType] = NotificationType.ORDER_STATUS_CHANGE
    order_id: OrderId
    new_status: str
    order_number: Optional[str] = None
    order_url: Optional[str] = None

    def __post_init__(self):
        if not self.new_status:
            raise ValueError("order_status_change requires new_status")


@dataclass(frozen=True)
class NewAdminComment:
    type: ClassVar[NotificationType] = NotificationType.NEW_ADMIN_COMMENT
    order_id: OrderId
    order_number: Optional[str] = None


NotificationDetail = Union[
    StatusChange,
    FileAdded,
    ThreadStatusChange,
    NewMessage,
    OrderStatusChange,
    NewAdminComment,
]

VARIANTS: dict[NotificationType, type] = {
    NotificationType.STATUS_CHANGE: StatusChange,
    NotificationType.FILE_ADDED: FileAdded,
    NotificationType.THREAD_STATUS_CHANGE: ThreadStatusChange,
    NotificationType.NEW_MESSAGE: NewMessage,
    NotificationType.ORDER_STATUS_CHANGE: OrderStatusChange,
    NotificationType.NEW_ADMIN_COMMENT: NewAdminComment,
}


@dataclass
class Notification:
    id: NotificationId
    user_id: UserId
    detail: NotificationDetail
    message: str
    created_at: datetime
    is_read: bool = False

    @classmethod
    def create(cls, user_id: UserId, detail: NotificationDetail, message: str) -> Notification:
        return cls(
            id=NotificationId.new(),
            user_id=user_id,
            detail=detail,
            message=message,
            created_at=datetime.now(timezone.utc),
        )

    @property
    def type(self) -> NotificationType:
        return self.detail.type

    @property
    def thread_id(self) -> Optional[ThreadId]:
        return getattr(self.detail, "thread_id", None)

    @property
    def order_id(self) -> Optional[OrderId]:
        return getattr(self.detail, "order_id", None)

    def toggle_read(self) -> bool:
        self.is_read = not self.is_read
        return self.is_read

    def mark_read(self) -> None:
        self.is_read = True
