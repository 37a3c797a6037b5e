"""
Notification read-state commands for a single notification.

Both refresh the user's unread badge after the write.
"""

from dataclasses import dataclass
from typing import Optional

from src.application.common.interfaces import Command, CommandHandler
from src.application.services.unread_count import UnreadCountSynchronizer
from src.domain.entities.notification import Notification
from src.domain.exceptions import EntityNotFoundError
from src.domain.ports.repositories import NotificationRepository
from src.domain.value_objects.notification_id import NotificationId
from src.domain.value_objects.user_id import UserId


@dataclass
class NotificationReadResult:
    notification: Notification
    unread_count: Optional[int]


async def _load_owned(
    repository: NotificationRepository, notification_id: NotificationId, user_id: UserId
) -> Notification:
    notification = await repository.get_by_id(notification_id)
    # Someone else's notification is reported exactly like a missing one.
    if notification is None or notification.user_id != user_id:
        raise EntityNotFoundError("Notification", notification_id.value)
    return notification


@dataclass(frozen=True)
class ToggleNotificationCommand(Command[NotificationReadResult]):
    notification_id: NotificationId
    user_id: UserId


class ToggleNotificationHandler(CommandHandler[NotificationReadResult]):
    def __init__(
        self,
        notification_repository: NotificationRepository,
        unread_count: UnreadCountSynchronizer,
    ):
        self._notification_repository = notification_repository
        self._unread_count = unread_count

    async def execute(self, command: ToggleNotificationCommand) -> NotificationReadResult:
        notification = await _load_owned(
            self._notification_repository, command.notification_id, command.user_id
        )
        notification.toggle_read()
        await self._notification_repository.save(notification)
        count = await self._unread_count.refresh(command.user_id)
        return NotificationReadResult(notification=notification, unread_count=count)


@dataclass(frozen=True)
class MarkNotificationReadCommand(Command[NotificationReadResult]):
    notification_id: NotificationId
    user_id: UserId


class MarkNotificationReadHandler(CommandHandler[NotificationReadResult]):
    def __init__(
        self,
        notification_repository: NotificationRepository,
        unread_count: UnreadCountSynchronizer,
    ):
        self._notification_repository = notification_repository
        self._unread_count = unread_count

    async def execute(self, command: MarkNotificationReadCommand) -> NotificationReadResult:
        notification = await _load_owned(
            self._notification_repository, command.notification_id, command.user_id
        )
        if not notification.is_read:
            notification.mark_read()
            await self._notification_repository.save(notification)
        count = await self._unread_count.refresh(command.user_id)
        return NotificationReadResult(notification=notification, unread_count=count)
