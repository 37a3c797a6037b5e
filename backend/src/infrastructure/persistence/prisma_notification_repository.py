"""
Prisma Notification Repository Implementation.

Variants are flattened into nullable columns by notification_mapping.
"""

from typing import Any, Optional
from prisma import Json, Prisma
from src.domain.entities.notification import Notification
from src.domain.ports.repositories import NotificationRepository
from src.domain.value_objects.notification_id import NotificationId
from src.domain.value_objects.order_id import OrderId
from src.domain.value_objects.user_id import UserId
from src.infrastructure.persistence.notification_mapping import (
    detail_to_columns,
    record_to_notification,
)


class PrismaNotificationRepository(NotificationRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    async def get_by_id(self, notification_id: NotificationId) -> Optional[Notification]:
        record = await self._prisma.notification.find_unique(
            where={"id": notification_id.value}
        )
        return record_to_notification(record) if record else None

    async def get_by_user(
        self, user_id: UserId, skip: int = 0, limit: int = 10
    ) -> list[Notification]:
        records = await self._prisma.notification.find_many(
            where={"user_id": user_id.value},
            order={"created_at": "desc"},
            skip=skip,
            take=limit,
        )
        return [record_to_notification(record) for record in records]

    async def get_unread(self, user_id: UserId, limit: int = 20) -> list[Notification]:
        records = await self._prisma.notification.find_many(
            where={"user_id": user_id.value, "is_read": False},
            order={"created_at": "desc"},
            take=limit,
        )
        return [record_to_notification(record) for record in records]

    async def count_by_user(self, user_id: UserId) -> int:
        return await self._prisma.notification.count(where={"user_id": user_id.value})

    async def count_unread(self, user_id: UserId) -> int:
        return await self._prisma.notification.count(
            where={"user_id": user_id.value, "is_read": False}
        )

    async def save(self, notification: Notification) -> None:
        columns: dict[str, Any] = detail_to_columns(notification.detail)
        if columns["file"] is not None:
            columns["file"] = Json(columns["file"])
        else:
            columns.pop("file")
        await self._prisma.notification.upsert(
            where={"id": notification.id.value},
            data={
                "create": {
                    "id": notification.id.value,
                    "user_id": notification.user_id.value,
                    "type": notification.type.value,
                    "message": notification.message,
                    "is_read": notification.is_read,
                    "created_at": notification.created_at,
                    **columns,
                },
                "update": {
                    "is_read": notification.is_read,
                },
            },
        )

    async def mark_all_read(
        self, user_id: UserId, order_id: Optional[OrderId] = None
    ) -> int:
        where: dict[str, Any] = {"user_id": user_id.value, "is_read": False}
        if order_id is not None:
            where["order_id"] = order_id.value
        return await self._prisma.notification.update_many(
            where=where, data={"is_read": True}
        )
