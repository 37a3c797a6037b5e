"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique identifier
- Has behavior (methods)
- Can change state over time
- Pure Python dataclasses (no ORM, no Pydantic)
"""

from src.domain.entities.thread import Thread, parse_department
from src.domain.entities.message import Message
from src.domain.entities.notification import (
    Notification,
    NotificationDetail,
    NotificationType,
    StatusChange,
    FileAdded,
    ThreadStatusChange,
    NewMessage,
    OrderStatusChange,
    NewAdminComment,
)
from src.domain.entities.user import User, ROLE_ADMIN, ROLE_USER

__all__ = [
    "Thread",
    "parse_department",
    "Message",
    "Notification",
    "NotificationDetail",
    "NotificationType",
    "StatusChange",
    "FileAdded",
    "ThreadStatusChange",
    "NewMessage",
    "OrderStatusChange",
    "NewAdminComment",
    "User",
    "ROLE_ADMIN",
    "ROLE_USER",
]
