"""
Prisma Thread Repository Implementation.

Mapping:
- Prisma model fields: id, subject, participants (String[]), department,
  is_open, last_message_id, last_message_date, created_at
- Domain entity: Thread with value objects (ThreadId, UserId, Department, MessageId)
"""

from typing import Optional
from prisma import Prisma
from prisma.models import Thread as PrismaThread
from src.domain.entities.thread import Thread
from src.domain.ports.repositories import ThreadRepository
from src.domain.value_objects.department import Department
from src.domain.value_objects.message_id import MessageId
from src.domain.value_objects.thread_id import ThreadId
from src.domain.value_objects.user_id import UserId


class PrismaThreadRepository(ThreadRepository):
    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        self._prisma = prisma

    def _to_entity(self, record: PrismaThread) -> Thread:
        """Map Prisma record to domain entity."""
        return Thread(
            id=ThreadId(record.id),
            subject=record.subject,
            participants=[UserId(p) for p in record.participants],
            department=Department(record.department),
            created_at=record.created_at,
            last_message_date=record.last_message_date,
            is_open=record.is_open,
            last_message_id=MessageId(record.last_message_id) if record.last_message_id else None,
        )

    async def get_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        record = await self._prisma.thread.find_unique(where={"id": thread_id.value})
        return self._to_entity(record) if record else None

    async def get_by_participant(self, user_id: UserId) -> list[Thread]:
        """Threads the user takes part in, ordered by last_message_date desc."""
        records = await self._prisma.thread.find_many(
            where={"participants": {"has": user_id.value}},
            order={"last_message_date": "desc"},
        )
        return [self._to_entity(record) for record in records]

    async def get_all(self, skip: int = 0, limit: int = 20) -> list[Thread]:
        records = await self._prisma.thread.find_many(
            order={"last_message_date": "desc"},
            skip=skip,
            take=limit,
        )
        return [self._to_entity(record) for record in records]

    async def count_all(self) -> int:
        return await self._prisma.thread.count()

    async def save(self, thread: Thread) -> None:
        """Save (create or update) thread."""
        last_message_id = thread.last_message_id.value if thread.last_message_id else None
        await self._prisma.thread.upsert(
            where={"id": thread.id.value},
            data={
                "create": {
                    "id": thread.id.value,
                    "subject": thread.subject,
                    "participants": [p.value for p in thread.participants],
                    "department": thread.department.value,
                    "is_open": thread.is_open,
                    "last_message_id": last_message_id,
                    "last_message_date": thread.last_message_date,
                    "created_at": thread.created_at,
                },
                "update": {
                    "subject": thread.subject,
                    "is_open": thread.is_open,
                    "last_message_id": last_message_id,
                    "last_message_date": thread.last_message_date,
                },
            },
        )
