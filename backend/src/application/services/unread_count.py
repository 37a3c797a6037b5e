"""
Unread Count Synchronizer.

The unread badge is always recounted from the notification store and pushed
as an `unreadCount` event; there is no cached counter to drift.
"""

import logging
from typing import Optional

from src.application.services.routing import EVENT_UNREAD_COUNT
from src.domain.ports.repositories import NotificationRepository
from src.domain.value_objects.user_id import UserId
from src.infrastructure.realtime.connection_registry import (
    ConnectionRegistry,
    deliver_if_available,
)
from src.observability.metrics import MetricsErrorType, increment_error

logger = logging.getLogger(__name__)


class UnreadCountSynchronizer:
    def __init__(
        self,
        notification_repository: NotificationRepository,
        registry: Optional[ConnectionRegistry] = None,
    ):
        self._notification_repository = notification_repository
        self._registry = registry

    async def push(self, user_id: UserId) -> int:
        """Count unread notifications and push the count. Store errors propagate."""
        count = await self._notification_repository.count_unread(user_id)
        await deliver_if_available(
            self._registry, user_id.value, EVENT_UNREAD_COUNT, {"count": count}
        )
        return count

    async def refresh(self, user_id: UserId) -> Optional[int]:
        """push() for callers whose own write already succeeded: failures are only logged."""
        try:
            return await self.push(user_id)
        except Exception as e:
            logger.error(f"[unread] sync for user {user_id} failed: {e}")
            increment_error(MetricsErrorType.UNREAD_SYNC_FAILED)
            return None
