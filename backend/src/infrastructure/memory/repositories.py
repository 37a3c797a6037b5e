"""
In-memory repository implementations over InMemoryStore.

Ordering mirrors the Prisma repositories: messages oldest first within a
thread, threads by last_message_date desc, notifications newest first.
"""

from typing import Optional

from src.domain.entities.message import Message
from src.domain.entities.notification import Notification
from src.domain.entities.thread import Thread
from src.domain.entities.user import User
from src.domain.ports.repositories import (
    MessageRepository,
    NotificationRepository,
    ThreadRepository,
    UserDirectory,
)
from src.domain.value_objects.message_id import MessageId
from src.domain.value_objects.notification_id import NotificationId
from src.domain.value_objects.order_id import OrderId
from src.domain.value_objects.thread_id import ThreadId
from src.domain.value_objects.user_id import UserId
from src.infrastructure.memory.store import InMemoryStore


class InMemoryThreadRepository(ThreadRepository):
    def __init__(self, store: InMemoryStore):
        self._store = store

    async def get_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        thread = self._store.threads.get(thread_id.value)
        return self._store.copy(thread) if thread else None

    async def get_by_participant(self, user_id: UserId) -> list[Thread]:
        threads = [t for t in self._store.threads.values() if user_id in t.participants]
        threads.sort(key=lambda t: t.last_message_date, reverse=True)
        return [self._store.copy(t) for t in threads]

    async def get_all(self, skip: int = 0, limit: int = 20) -> list[Thread]:
        threads = sorted(
            self._store.threads.values(), key=lambda t: t.last_message_date, reverse=True
        )
        return [self._store.copy(t) for t in threads[skip : skip + limit]]

    async def count_all(self) -> int:
        return len(self._store.threads)

    async def save(self, thread: Thread) -> None:
        self._store.check_writable("threads")
        self._store.threads[thread.id.value] = self._store.copy(thread)


class InMemoryMessageRepository(MessageRepository):
    def __init__(self, store: InMemoryStore):
        self._store = store

    async def get_by_id(self, message_id: MessageId) -> Optional[Message]:
        message = self._store.messages.get(message_id.value)
        return self._store.copy(message) if message else None

    async def get_by_thread(self, thread_id: ThreadId, limit: int = 500) -> list[Message]:
        messages = [m for m in self._store.messages.values() if m.thread_id == thread_id]
        messages.sort(key=lambda m: m.created_at)
        return [self._store.copy(m) for m in messages[-limit:]]

    async def get_by_user(self, user_id: UserId, limit: int = 100) -> list[Message]:
        messages = [m for m in self._store.messages.values() if m.is_visible_to(user_id)]
        messages.sort(key=lambda m: m.created_at, reverse=True)
        return [self._store.copy(m) for m in messages[:limit]]

    async def get_all(self, skip: int = 0, limit: int = 50) -> list[Message]:
        messages = sorted(self._store.messages.values(), key=lambda m: m.created_at, reverse=True)
        return [self._store.copy(m) for m in messages[skip : skip + limit]]

    async def count_all(self) -> int:
        return len(self._store.messages)

    async def save(self, message: Message) -> None:
        self._store.check_writable("messages")
        self._store.messages[message.id.value] = self._store.copy(message)

    async def delete(self, message_id: MessageId) -> bool:
        self._store.check_writable("messages")
        return self._store.messages.pop(message_id.value, None) is not None


class InMemoryNotificationRepository(NotificationRepository):
    def __init__(self, store: InMemoryStore):
        self._store = store

    def _for_user(self, user_id: UserId) -> list[Notification]:
        # Insertion order breaks created_at ties, so "newest first" is total.
        items = [
            (position, n)
            for position, n in enumerate(self._store.notifications.values())
            if n.user_id == user_id
        ]
        items.sort(key=lambda item: (item[1].created_at, item[0]), reverse=True)
        return [n for _, n in items]

    async def get_by_id(self, notification_id: NotificationId) -> Optional[Notification]:
        notification = self._store.notifications.get(notification_id.value)
        return self._store.copy(notification) if notification else None

    async def get_by_user(
        self, user_id: UserId, skip: int = 0, limit: int = 10
    ) -> list[Notification]:
        return [self._store.copy(n) for n in self._for_user(user_id)[skip : skip + limit]]

    async def get_unread(self, user_id: UserId, limit: int = 20) -> list[Notification]:
        unread = [n for n in self._for_user(user_id) if not n.is_read]
        return [self._store.copy(n) for n in unread[:limit]]

    async def count_by_user(self, user_id: UserId) -> int:
        return len(self._for_user(user_id))

    async def count_unread(self, user_id: UserId) -> int:
        return sum(1 for n in self._for_user(user_id) if not n.is_read)

    async def save(self, notification: Notification) -> None:
        self._store.check_writable("notifications")
        self._store.notifications[notification.id.value] = self._store.copy(notification)

    async def mark_all_read(
        self, user_id: UserId, order_id: Optional[OrderId] = None
    ) -> int:
        self._store.check_writable("notifications")
        modified = 0
        for notification in self._for_user(user_id):
            if notification.is_read:
                continue
            if order_id is not None and notification.order_id != order_id:
                continue
            notification.is_read = True
            modified += 1
        return modified


class InMemoryUserDirectory(UserDirectory):
    def __init__(self, store: InMemoryStore):
        self._store = store

    async def get_by_id(self, user_id: UserId) -> Optional[User]:
        user = self._store.users.get(user_id.value)
        return self._store.copy(user) if user else None

    async def get_many(self, user_ids: list[UserId]) -> dict[UserId, User]:
        found = {}
        for user_id in user_ids:
            user = self._store.users.get(user_id.value)
            if user:
                found[user_id] = self._store.copy(user)
        return found
