"""
Dishka DI Container Setup.

- AppProvider: live delivery, e-mail, attachment storage, services and
  CQRS handlers
- Storage provider, picked by STORAGE_BACKEND:
    "prisma" → PrismaProvider (setup/ioc/prisma_provider.py, imported lazily
               because the Prisma client must be generated first)
    "memory" → InMemoryProvider

Dishka concepts:
- Provider: Class that defines how to create dependencies
- @provide: Decorator to mark factory methods
- Scope: Lifecycle of dependency (APP = singleton, REQUEST = per-request)
- Generator factories: code after `yield` runs when the scope closes

Flow:
  Container → provides → NotificationRepository → to → NotificationDispatcher
                                   ↓                         ↓
                         Prisma or in-memory        ConnectionRegistry (APP)
"""

from typing import AsyncIterable, Optional
from dishka import AsyncContainer, Provider, Scope, make_async_container, provide
from src.application.commands.messages import (
    AddAttachmentHandler,
    DeleteMessageHandler,
    ReadMessageHandler,
)
from src.application.commands.notifications import (
    MarkAllNotificationsReadHandler,
    MarkNotificationReadHandler,
    MarkOrderNotificationsReadHandler,
    ToggleNotificationHandler,
)
from src.application.commands.threads import (
    AddMessageHandler,
    AdminToggleThreadStatusHandler,
    CreateThreadHandler,
    ToggleThreadStatusHandler,
)
from src.application.queries.admin import (
    GetAnyMessageHandler,
    GetAnyThreadHandler,
    ListAllMessagesHandler,
    ListAllThreadsHandler,
)
from src.application.queries.messages import ListMessagesHandler
from src.application.queries.notifications import (
    GetUnreadCountHandler,
    ListNotificationsHandler,
)
from src.application.queries.threads import GetThreadHandler, ListThreadsHandler
from src.application.services import (
    AttachmentUploader,
    EscalationChannel,
    NotificationDispatcher,
    NotificationReplayer,
    NotificationRouter,
    ThreadNotifier,
    UnreadCountSynchronizer,
)
from src.config.settings import Config
from src.domain.ports import FileStorage, Mailer
from src.domain.ports.repositories import (
    MessageRepository,
    NotificationRepository,
    ThreadRepository,
    UserDirectory,
)
from src.infrastructure.mail import InMemoryMailer, SmtpMailer
from src.infrastructure.memory import (
    InMemoryMessageRepository,
    InMemoryNotificationRepository,
    InMemoryStore,
    InMemoryThreadRepository,
    InMemoryUserDirectory,
)
from src.infrastructure.realtime import ConnectionRegistry
from src.infrastructure.storage import FileStorageService


class AppProvider(Provider):
    """
    Application dependency provider.

    A prebuilt mailer or file storage replaces the configured one
    (tests hand in an InMemoryMailer to read the outbox).
    """

    def __init__(
        self,
        mailer: Optional[Mailer] = None,
        file_storage: Optional[FileStorage] = None,
    ):
        super().__init__()
        self._mailer = mailer
        self._file_storage = file_storage

    # ==================== LIVE DELIVERY ====================

    @provide(scope=Scope.APP)
    async def get_connection_registry(self) -> AsyncIterable[ConnectionRegistry]:
        """
        One registry per process.

        - Scope.APP = created ONCE, shared by every request and socket
        - Closing the container closes every live channel
        """
        registry = ConnectionRegistry()
        yield registry
        await registry.close_all()

    @provide(scope=Scope.APP)
    def get_notification_router(self) -> NotificationRouter:
        return NotificationRouter(
            admin_comment_shape=Config.NEW_ADMIN_COMMENT_SHAPE,
            file_added_shape=Config.FILE_ADDED_SHAPE,
        )

    # ==================== E-MAIL & FILES ====================

    @provide(scope=Scope.APP)
    def get_mailer(self) -> Mailer:
        if self._mailer is not None:
            return self._mailer
        if Config.MAIL_BACKEND == "memory":
            return InMemoryMailer()
        return SmtpMailer()

    @provide(scope=Scope.APP)
    async def get_escalation_channel(self, mailer: Mailer) -> AsyncIterable[EscalationChannel]:
        """Pending e-mail attempts are awaited on shutdown."""
        escalation = EscalationChannel(mailer)
        yield escalation
        await escalation.drain()

    @provide(scope=Scope.APP)
    def get_file_storage(self) -> FileStorage:
        if self._file_storage is not None:
            return self._file_storage
        return FileStorageService()

    # ==================== SERVICES ====================

    @provide(scope=Scope.REQUEST)
    def get_unread_count(
        self,
        notification_repository: NotificationRepository,
        registry: ConnectionRegistry,
    ) -> UnreadCountSynchronizer:
        return UnreadCountSynchronizer(notification_repository, registry)

    @provide(scope=Scope.REQUEST)
    def get_dispatcher(
        self,
        notification_repository: NotificationRepository,
        unread_count: UnreadCountSynchronizer,
        router: NotificationRouter,
        registry: ConnectionRegistry,
    ) -> NotificationDispatcher:
        return NotificationDispatcher(
            notification_repository=notification_repository,
            unread_count=unread_count,
            router=router,
            registry=registry,
        )

    @provide(scope=Scope.REQUEST)
    def get_replayer(
        self, notification_repository: NotificationRepository
    ) -> NotificationReplayer:
        return NotificationReplayer(notification_repository, limit=Config.REPLAY_LIMIT)

    @provide(scope=Scope.REQUEST)
    def get_uploader(self, file_storage: FileStorage) -> AttachmentUploader:
        return AttachmentUploader(file_storage)

    @provide(scope=Scope.REQUEST)
    def get_thread_notifier(
        self,
        dispatcher: NotificationDispatcher,
        escalation: EscalationChannel,
        user_directory: UserDirectory,
    ) -> ThreadNotifier:
        return ThreadNotifier(dispatcher, escalation, user_directory)

    # ==================== THREAD HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_create_thread_handler(
        self,
        thread_repository: ThreadRepository,
        message_repository: MessageRepository,
        user_directory: UserDirectory,
        uploader: AttachmentUploader,
        notifier: ThreadNotifier,
    ) -> CreateThreadHandler:
        return CreateThreadHandler(
            thread_repository=thread_repository,
            message_repository=message_repository,
            user_directory=user_directory,
            uploader=uploader,
            notifier=notifier,
        )

    @provide(scope=Scope.REQUEST)
    def get_add_message_handler(
        self,
        thread_repository: ThreadRepository,
        message_repository: MessageRepository,
        uploader: AttachmentUploader,
        notifier: ThreadNotifier,
    ) -> AddMessageHandler:
        return AddMessageHandler(
            thread_repository=thread_repository,
            message_repository=message_repository,
            uploader=uploader,
            notifier=notifier,
        )

    @provide(scope=Scope.REQUEST)
    def get_toggle_thread_status_handler(
        self, thread_repository: ThreadRepository, notifier: ThreadNotifier
    ) -> ToggleThreadStatusHandler:
        return ToggleThreadStatusHandler(thread_repository, notifier)

    @provide(scope=Scope.REQUEST)
    def get_admin_toggle_thread_status_handler(
        self, thread_repository: ThreadRepository, notifier: ThreadNotifier
    ) -> AdminToggleThreadStatusHandler:
        return AdminToggleThreadStatusHandler(thread_repository, notifier)

    @provide(scope=Scope.REQUEST)
    def get_list_threads_handler(
        self, thread_repository: ThreadRepository
    ) -> ListThreadsHandler:
        return ListThreadsHandler(thread_repository)

    @provide(scope=Scope.REQUEST)
    def get_get_thread_handler(
        self,
        thread_repository: ThreadRepository,
        message_repository: MessageRepository,
    ) -> GetThreadHandler:
        return GetThreadHandler(thread_repository, message_repository)

    @provide(scope=Scope.REQUEST)
    def get_list_all_threads_handler(
        self, thread_repository: ThreadRepository
    ) -> ListAllThreadsHandler:
        return ListAllThreadsHandler(thread_repository)

    @provide(scope=Scope.REQUEST)
    def get_get_any_thread_handler(
        self,
        thread_repository: ThreadRepository,
        message_repository: MessageRepository,
    ) -> GetAnyThreadHandler:
        return GetAnyThreadHandler(thread_repository, message_repository)

    # ==================== MESSAGE HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_read_message_handler(
        self, message_repository: MessageRepository
    ) -> ReadMessageHandler:
        return ReadMessageHandler(message_repository)

    @provide(scope=Scope.REQUEST)
    def get_list_messages_handler(
        self, message_repository: MessageRepository
    ) -> ListMessagesHandler:
        return ListMessagesHandler(message_repository)

    @provide(scope=Scope.REQUEST)
    def get_add_attachment_handler(
        self, message_repository: MessageRepository, uploader: AttachmentUploader
    ) -> AddAttachmentHandler:
        return AddAttachmentHandler(message_repository, uploader)

    @provide(scope=Scope.REQUEST)
    def get_delete_message_handler(
        self,
        message_repository: MessageRepository,
        thread_repository: ThreadRepository,
    ) -> DeleteMessageHandler:
        return DeleteMessageHandler(message_repository, thread_repository)

    @provide(scope=Scope.REQUEST)
    def get_list_all_messages_handler(
        self, message_repository: MessageRepository
    ) -> ListAllMessagesHandler:
        return ListAllMessagesHandler(message_repository)

    @provide(scope=Scope.REQUEST)
    def get_get_any_message_handler(
        self, message_repository: MessageRepository
    ) -> GetAnyMessageHandler:
        return GetAnyMessageHandler(message_repository)

    # ==================== NOTIFICATION HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_list_notifications_handler(
        self, notification_repository: NotificationRepository
    ) -> ListNotificationsHandler:
        return ListNotificationsHandler(notification_repository)

    @provide(scope=Scope.REQUEST)
    def get_unread_count_handler(
        self, notification_repository: NotificationRepository
    ) -> GetUnreadCountHandler:
        return GetUnreadCountHandler(notification_repository)

    @provide(scope=Scope.REQUEST)
    def get_toggle_notification_handler(
        self,
        notification_repository: NotificationRepository,
        unread_count: UnreadCountSynchronizer,
    ) -> ToggleNotificationHandler:
        return ToggleNotificationHandler(notification_repository, unread_count)

    @provide(scope=Scope.REQUEST)
    def get_mark_notification_read_handler(
        self,
        notification_repository: NotificationRepository,
        unread_count: UnreadCountSynchronizer,
    ) -> MarkNotificationReadHandler:
        return MarkNotificationReadHandler(notification_repository, unread_count)

    @provide(scope=Scope.REQUEST)
    def get_mark_all_read_handler(
        self,
        notification_repository: NotificationRepository,
        unread_count: UnreadCountSynchronizer,
    ) -> MarkAllNotificationsReadHandler:
        return MarkAllNotificationsReadHandler(notification_repository, unread_count)

    @provide(scope=Scope.REQUEST)
    def get_mark_order_read_handler(
        self,
        notification_repository: NotificationRepository,
        unread_count: UnreadCountSynchronizer,
    ) -> MarkOrderNotificationsReadHandler:
        return MarkOrderNotificationsReadHandler(notification_repository, unread_count)


class InMemoryProvider(Provider):
    """Repositories over a process-local InMemoryStore (STORAGE_BACKEND=memory)."""

    def __init__(self, store: Optional[InMemoryStore] = None):
        super().__init__()
        self._store = store or InMemoryStore()

    @provide(scope=Scope.APP)
    def get_store(self) -> InMemoryStore:
        return self._store

    @provide(scope=Scope.REQUEST)
    def get_thread_repository(self, store: InMemoryStore) -> ThreadRepository:
        return InMemoryThreadRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_message_repository(self, store: InMemoryStore) -> MessageRepository:
        return InMemoryMessageRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_notification_repository(self, store: InMemoryStore) -> NotificationRepository:
        return InMemoryNotificationRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_user_directory(self, store: InMemoryStore) -> UserDirectory:
        return InMemoryUserDirectory(store)


def storage_provider(store: Optional[InMemoryStore] = None) -> Provider:
    if store is not None or Config.STORAGE_BACKEND == "memory":
        return InMemoryProvider(store)
    if Config.STORAGE_BACKEND == "prisma":
        from src.setup.ioc.prisma_provider import PrismaProvider

        return PrismaProvider()
    raise ValueError(
        f"Unknown STORAGE_BACKEND: {Config.STORAGE_BACKEND}. Must be 'prisma' or 'memory'."
    )


def build_container(
    mailer: Optional[Mailer] = None,
    file_storage: Optional[FileStorage] = None,
    store: Optional[InMemoryStore] = None,
) -> AsyncContainer:
    """
    Create and configure the DI container.

    - make_async_container() creates the container with all providers
    - Call this ONCE per app
    """
    return make_async_container(
        AppProvider(mailer=mailer, file_storage=file_storage),
        storage_provider(store),
    )
