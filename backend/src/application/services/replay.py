"""
Replay of unread notifications to a newly registered live channel.

Runs on every registration and writes only to the new channel: other tabs
already saw these notifications when they were dispatched.
"""

import logging
from typing import Optional

from src.application.services.routing import (
    EVENT_NOTIFICATION,
    EVENT_UNREAD_COUNT,
    replay_payload,
)
from src.config.settings import Config
from src.domain.ports.live_channel import LiveChannel
from src.domain.ports.repositories import NotificationRepository
from src.domain.value_objects.user_id import UserId
from src.observability.metrics import MetricsErrorType, increment_error

logger = logging.getLogger(__name__)


class NotificationReplayer:
    def __init__(
        self,
        notification_repository: NotificationRepository,
        limit: Optional[int] = None,
    ):
        self._notification_repository = notification_repository
        self._limit = limit or Config.REPLAY_LIMIT

    async def replay(self, user_id: UserId, channel: LiveChannel) -> int:
        """
        Send up to `limit` unread notifications (newest first), then the unread count.

        Returns:
            Number of notifications written to the channel
        """
        sent = 0
        try:
            unread = await self._notification_repository.get_unread(user_id, self._limit)
            for notification in unread:
                await channel.send(EVENT_NOTIFICATION, replay_payload(notification))
                sent += 1
            count = await self._notification_repository.count_unread(user_id)
            await channel.send(EVENT_UNREAD_COUNT, {"count": count})
        except Exception as e:
            logger.warning(f"[replay] user {user_id} via {channel.kind} stopped after {sent}: {e}")
            increment_error(MetricsErrorType.REPLAY_FAILED)
        return sent
