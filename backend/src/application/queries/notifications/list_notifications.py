"""
List Notifications Query - one page of the user's notifications, newest first.

total_pages = ceil(total_count / limit); a user with no notifications gets
page 1 of 0.
"""

import math
from dataclasses import dataclass

from src.application.common.interfaces import Query, QueryHandler
from src.config.settings import Config
from src.domain.entities.notification import Notification
from src.domain.ports.repositories import NotificationRepository
from src.domain.value_objects.user_id import UserId


@dataclass
class NotificationPage:
    notifications: list[Notification]
    current_page: int
    total_pages: int
    total_count: int


@dataclass(frozen=True)
class ListNotificationsQuery(Query[NotificationPage]):
    user_id: UserId
    page: int = 1
    limit: int = Config.NOTIFICATIONS_PAGE_SIZE


class ListNotificationsHandler(QueryHandler[NotificationPage]):
    def __init__(self, notification_repository: NotificationRepository):
        self._notification_repository = notification_repository

    async def execute(self, query: ListNotificationsQuery) -> NotificationPage:
        page = max(query.page, 1)
        limit = max(query.limit, 1)
        total = await self._notification_repository.count_by_user(query.user_id)
        notifications = await self._notification_repository.get_by_user(
            query.user_id, skip=(page - 1) * limit, limit=limit
        )
        return NotificationPage(
            notifications=notifications,
            current_page=page,
            total_pages=math.ceil(total / limit),
            total_count=total,
        )
