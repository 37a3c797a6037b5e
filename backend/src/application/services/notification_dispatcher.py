"""
Notification Dispatcher - the single way a notification reaches a user.

Flow:
    persist ──► route by type ──► push through the registry ──► refresh unread count

Persisting is the only step allowed to fail the caller. Push and unread sync
run after the write and only log on failure, so a dead socket never rolls
back a notification.
"""

import logging
from typing import Optional

from src.application.services.routing import NotificationRouter
from src.application.services.unread_count import UnreadCountSynchronizer
from src.domain.entities.notification import Notification, NotificationDetail
from src.domain.ports.repositories import NotificationRepository
from src.domain.value_objects.user_id import UserId
from src.infrastructure.realtime.connection_registry import (
    ConnectionRegistry,
    deliver_if_available,
)
from src.observability.metrics import (
    MetricsErrorType,
    increment_error,
    record_notification_dispatched,
)

logger = logging.getLogger(__name__)


class NotificationDispatcher:
    def __init__(
        self,
        notification_repository: NotificationRepository,
        unread_count: UnreadCountSynchronizer,
        router: NotificationRouter,
        registry: Optional[ConnectionRegistry] = None,
    ):
        self._notification_repository = notification_repository
        self._unread_count = unread_count
        self._router = router
        self._registry = registry

    async def dispatch(
        self, user_id: UserId, message: str, detail: NotificationDetail
    ) -> Notification:
        notification = Notification.create(user_id=user_id, detail=detail, message=message)
        await self._notification_repository.save(notification)
        record_notification_dispatched(notification.type.value)

        event, payload = self._router.route(notification)
        try:
            delivered = await deliver_if_available(
                self._registry, user_id.value, event, payload
            )
            logger.debug(
                f"[dispatch] {notification.type.value} {notification.id} -> "
                f"user {user_id} on {delivered} channel(s)"
            )
        except Exception as e:
            logger.error(f"[dispatch] push of {notification.id} to user {user_id} failed: {e}")
            increment_error(MetricsErrorType.LIVE_PUSH_FAILED)

        await self._unread_count.refresh(user_id)
        return notification
