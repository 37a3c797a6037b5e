"""
REPOSITORY PORTS - Data persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Defines methods the domain needs
- Does NOT specify implementation (Prisma, in-memory, etc.)

Infrastructure layer provides implementations.
"""

from src.domain.ports.repositories.thread_repository import ThreadRepository
from src.domain.ports.repositories.message_repository import MessageRepository
from src.domain.ports.repositories.notification_repository import NotificationRepository
from src.domain.ports.repositories.user_directory import UserDirectory

__all__ = [
    "ThreadRepository",
    "MessageRepository",
    "NotificationRepository",
    "UserDirectory",
]
