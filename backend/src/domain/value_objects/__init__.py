"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Has no identity (compared by value, not by ID)
- Is immutable (frozen dataclass)
- Validates itself on creation
- Pure Python (no framework dependencies)
"""

from src.domain.value_objects.user_id import UserId
from src.domain.value_objects.order_id import OrderId
from src.domain.value_objects.thread_id import ThreadId
from src.domain.value_objects.message_id import MessageId
from src.domain.value_objects.notification_id import NotificationId
from src.domain.value_objects.department import Department
from src.domain.value_objects.attachment import Attachment

__all__ = [
    "UserId",
    "OrderId",
    "ThreadId",
    "MessageId",
    "NotificationId",
    "Department",
    "Attachment",
]
