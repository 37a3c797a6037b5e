"""
Thread Repository Port - Interface for thread persistence.
Implementations: src/infrastructure/persistence/prisma_thread_repository.py,
src/infrastructure/memory/repositories.py
"""

from abc import ABC, abstractmethod
from typing import Optional
from src.domain.entities.thread import Thread
from src.domain.value_objects.thread_id import ThreadId
from src.domain.value_objects.user_id import UserId


class ThreadRepository(ABC):
    @abstractmethod
    async def get_by_id(self, thread_id: ThreadId) -> Optional[Thread]: ...

    @abstractmethod
    async def get_by_participant(self, user_id: UserId) -> list[Thread]:
        """Threads the user takes part in, newest activity first."""
        ...

    @abstractmethod
    async def get_all(self, skip: int = 0, limit: int = 20) -> list[Thread]: ...

    @abstractmethod
    async def count_all(self) -> int: ...

    @abstractmethod
    async def save(self, thread: Thread) -> None: ...
