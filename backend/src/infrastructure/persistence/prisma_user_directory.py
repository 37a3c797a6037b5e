"""
Prisma-backed read access to the shared `users` table.
"""

import logging
from typing import Optional
from prisma import Prisma
from prisma.models import User as PrismaUser
from src.domain.entities.user import User, ROLE_USER
from src.domain.ports.repositories import UserDirectory
from src.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


class PrismaUserDirectory(UserDirectory):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaUser) -> Optional[User]:
        try:
            return User(
                id=UserId(record.id),
                email=record.email,
                role=record.role or ROLE_USER,
                name=record.name,
            )
        except ValueError as e:
            logger.warning(f"[users] unusable user record {record.id}: {e}")
            return None

    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        record = await self._prisma.user.find_unique(where={"id": user_id.value})
        return self._to_entity(record) if record else None

    async def get_many(self, user_ids: list[UserId]) -> dict[UserId, User]:
        if not user_ids:
            return {}
        records = await self._prisma.user.find_many(
            where={"id": {"in": [u.value for u in user_ids]}}
        )
        users = {}
        for record in records:
            user = self._to_entity(record)
            if user:
                users[user.id] = user
        return users
