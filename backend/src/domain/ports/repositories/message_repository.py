"""
Message Repository Port - Interface for message persistence.
Implementations: src/infrastructure/persistence/prisma_message_repository.py,
src/infrastructure/memory/repositories.py
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities.message import Message
from src.domain.value_objects.message_id import MessageId
from src.domain.value_objects.thread_id import ThreadId
from src.domain.value_objects.user_id import UserId


class MessageRepository(ABC):
    @abstractmethod
    async def get_by_id(self, message_id: MessageId) -> Optional[Message]: ...

    @abstractmethod
    async def get_by_thread(
        self, thread_id: ThreadId, limit: int = 500
    ) -> list[Message]:
        """Messages of a thread in creation order (oldest first)."""
        ...

    @abstractmethod
    async def get_by_user(self, user_id: UserId, limit: int = 100) -> list[Message]:
        """Messages sent or received by the user, newest first."""
        ...

    @abstractmethod
    async def get_all(self, skip: int = 0, limit: int = 50) -> list[Message]:
        """Every message, newest first (admin view)."""
        ...

    @abstractmethod
    async def count_all(self) -> int: ...

    @abstractmethod
    async def save(self, message: Message) -> None: ...

    @abstractmethod
    async def delete(self, message_id: MessageId) -> bool:
        """Remove a message. Returns False if it did not exist."""
        ...
