"""
Prisma Message Repository Implementation.

Prisma Message Model (from schema.prisma):
    model Message {
        id           String   @id @default(uuid())
        thread_id    String
        sender_id    String
        recipient_id String
        content      String
        attachments  Json     @default("[]")
        is_read      Boolean  @default(false)
        created_at   DateTime @default(now())
    }

Attachments are stored as a JSON list of {filename, url}.
"""

import logging
from typing import Optional
from prisma import Json, Prisma
from prisma.models import Message as PrismaMessage
from src.domain.entities.message import Message
from src.domain.ports.repositories.message_repository import MessageRepository
from src.domain.value_objects.attachment import Attachment
from src.domain.value_objects.message_id import MessageId
from src.domain.value_objects.thread_id import ThreadId
from src.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


class PrismaMessageRepository(MessageRepository):
    """
    Prisma implementation of MessageRepository.

    Handles persistence of Message entities to PostgreSQL via Prisma.
    """

    _prisma: Prisma

    def __init__(self, prisma: Prisma):
        """
        Initialize repository with Prisma client.

        Args:
            prisma: Connected Prisma client (injected by DI container)
        """
        self._prisma = prisma

    def _to_entity(self, record: PrismaMessage) -> Message:
        """
        Map Prisma record to domain entity.

        Args:
            record: Prisma Message model instance

        Returns:
            Domain Message entity with value objects
        """
        attachments = []
        for item in record.attachments or []:
            try:
                attachments.append(Attachment(filename=item["filename"], url=item["url"]))
            except (KeyError, TypeError, ValueError):
                logger.warning(f"[messages] skipping malformed attachment on {record.id}")
        return Message(
            id=MessageId(record.id),
            thread_id=ThreadId(record.thread_id),
            sender_id=UserId(record.sender_id),
            recipient_id=UserId(record.recipient_id),
            content=record.content,
            created_at=record.created_at,
            attachments=attachments,
            is_read=record.is_read,
        )

    async def get_by_id(self, message_id: MessageId) -> Optional[Message]:
        record = await self._prisma.message.find_unique(where={"id": message_id.value})
        return self._to_entity(record) if record else None

    async def get_by_thread(self, thread_id: ThreadId, limit: int = 500) -> list[Message]:
        """
        Get messages for a thread, ordered chronologically (oldest first).

        Queries newest-first with the limit, then reverses, so a long thread
        returns its latest `limit` messages.
        """
        records = await self._prisma.message.find_many(
            where={"thread_id": thread_id.value},
            order={"created_at": "desc"},
            take=limit,
        )
        records.reverse()  # Now oldest first
        return [self._to_entity(record) for record in records]

    async def get_by_user(self, user_id: UserId, limit: int = 100) -> list[Message]:
        records = await self._prisma.message.find_many(
            where={
                "OR": [
                    {"sender_id": user_id.value},
                    {"recipient_id": user_id.value},
                ]
            },
            order={"created_at": "desc"},
            take=limit,
        )
        return [self._to_entity(record) for record in records]

    async def get_all(self, skip: int = 0, limit: int = 50) -> list[Message]:
        records = await self._prisma.message.find_many(
            order={"created_at": "desc"},
            skip=skip,
            take=limit,
        )
        return [self._to_entity(record) for record in records]

    async def count_all(self) -> int:
        return await self._prisma.message.count()

    async def save(self, message: Message) -> None:
        """
        Save (create or update) a message.

        Only is_read and attachments change after creation.
        """
        attachments = Json([a.to_dict() for a in message.attachments])
        await self._prisma.message.upsert(
            where={"id": message.id.value},
            data={
                "create": {
                    "id": message.id.value,
                    "thread_id": message.thread_id.value,
                    "sender_id": message.sender_id.value,
                    "recipient_id": message.recipient_id.value,
                    "content": message.content,
                    "attachments": attachments,
                    "is_read": message.is_read,
                    "created_at": message.created_at,
                },
                "update": {
                    "attachments": attachments,
                    "is_read": message.is_read,
                },
            },
        )

    async def delete(self, message_id: MessageId) -> bool:
        # delete_many reports a count instead of raising on a missing row
        deleted = await self._prisma.message.delete_many(where={"id": message_id.value})
        return deleted > 0
