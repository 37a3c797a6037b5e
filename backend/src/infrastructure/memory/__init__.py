"""
In-memory storage backend (STORAGE_BACKEND=memory).

Process-local and non-durable; used for local development and tests.
"""

from src.infrastructure.memory.store import InMemoryStore
from src.infrastructure.memory.repositories import (
    InMemoryThreadRepository,
    InMemoryMessageRepository,
    InMemoryNotificationRepository,
    InMemoryUserDirectory,
)

__all__ = [
    "InMemoryStore",
    "InMemoryThreadRepository",
    "InMemoryMessageRepository",
    "InMemoryNotificationRepository",
    "InMemoryUserDirectory",
]
