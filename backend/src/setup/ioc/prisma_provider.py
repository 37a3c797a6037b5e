"""
Prisma storage provider (STORAGE_BACKEND=prisma).

Importing this module needs a generated Prisma client:
    prisma generate --schema backend/prisma/schema.prisma
"""

from typing import AsyncIterable
from dishka import Provider, Scope, provide
from prisma import Prisma
from src.domain.ports.repositories import (
    MessageRepository,
    NotificationRepository,
    ThreadRepository,
    UserDirectory,
)
from src.infrastructure.persistence.prisma_message_repository import PrismaMessageRepository
from src.infrastructure.persistence.prisma_notification_repository import (
    PrismaNotificationRepository,
)
from src.infrastructure.persistence.prisma_thread_repository import PrismaThreadRepository
from src.infrastructure.persistence.prisma_user_directory import PrismaUserDirectory


class PrismaProvider(Provider):
    # ==================== DATABASE ====================

    @provide(scope=Scope.APP)
    async def get_prisma(self) -> AsyncIterable[Prisma]:
        """
        Provide Prisma client (singleton, app-scoped).

        - Scope.APP = created ONCE when app starts, shared across all requests
        - async because connect() is async; disconnected when the container closes
        """
        prisma = Prisma()
        await prisma.connect()
        yield prisma
        await prisma.disconnect()

    # ==================== REPOSITORIES ====================

    @provide(scope=Scope.REQUEST)
    def get_thread_repository(self, prisma: Prisma) -> ThreadRepository:
        """
        - Return type is ABSTRACT (ThreadRepository)
        - Implementation is CONCRETE (PrismaThreadRepository)
        - Scope.REQUEST = new instance per HTTP request
        """
        return PrismaThreadRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_message_repository(self, prisma: Prisma) -> MessageRepository:
        return PrismaMessageRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_notification_repository(self, prisma: Prisma) -> NotificationRepository:
        return PrismaNotificationRepository(prisma)

    @provide(scope=Scope.REQUEST)
    def get_user_directory(self, prisma: Prisma) -> UserDirectory:
        return PrismaUserDirectory(prisma)
