"""
Notification Repository Port - Interface for notification persistence.

The unread count is always answered by count_unread(); nothing caches it.
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities.notification import Notification
from src.domain.value_objects.notification_id import NotificationId
from src.domain.value_objects.order_id import OrderId
from src.domain.value_objects.user_id import UserId


class NotificationRepository(ABC):
    @abstractmethod
    async def get_by_id(self, notification_id: NotificationId) -> Optional[Notification]: ...

    @abstractmethod
    async def get_by_user(
        self, user_id: UserId, skip: int = 0, limit: int = 10
    ) -> list[Notification]:
        """Newest first."""
        ...

    @abstractmethod
    async def get_unread(self, user_id: UserId, limit: int = 20) -> list[Notification]:
        """Unread notifications, newest first."""
        ...

    @abstractmethod
    async def count_by_user(self, user_id: UserId) -> int: ...

    @abstractmethod
    async def count_unread(self, user_id: UserId) -> int: ...

    @abstractmethod
    async def save(self, notification: Notification) -> None: ...

    @abstractmethod
    async def mark_all_read(
        self, user_id: UserId, order_id: Optional[OrderId] = None
    ) -> int:
        """Mark the user's unread notifications (optionally for one order) read. Returns modified count."""
        ...
