"""Unread Count Query - read straight from the store."""

from dataclasses import dataclass

from src.application.common.interfaces import Query, QueryHandler
from src.domain.ports.repositories import NotificationRepository
from src.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class GetUnreadCountQuery(Query[int]):
    user_id: UserId


class GetUnreadCountHandler(QueryHandler[int]):
    def __init__(self, notification_repository: NotificationRepository):
        self._notification_repository = notification_repository

    async def execute(self, query: GetUnreadCountQuery) -> int:
        return await self._notification_repository.count_unread(query.user_id)
