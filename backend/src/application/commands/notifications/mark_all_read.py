"""Bulk notification read-state commands: everything, or everything for one order."""

import logging
from dataclasses import dataclass

from src.application.common.interfaces import Command, CommandHandler
from src.application.services.unread_count import UnreadCountSynchronizer
from src.domain.ports.repositories import NotificationRepository
from src.domain.value_objects.order_id import OrderId
from src.domain.value_objects.user_id import UserId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MarkAllNotificationsReadCommand(Command[int]):
    user_id: UserId


class MarkAllNotificationsReadHandler(CommandHandler[int]):
    def __init__(
        self,
        notification_repository: NotificationRepository,
        unread_count: UnreadCountSynchronizer,
    ):
        self._notification_repository = notification_repository
        self._unread_count = unread_count

    async def execute(self, command: MarkAllNotificationsReadCommand) -> int:
        modified = await self._notification_repository.mark_all_read(command.user_id)
        logger.debug(f"[notifications] {modified} marked read for {command.user_id}")
        await self._unread_count.refresh(command.user_id)
        return modified


@dataclass(frozen=True)
class MarkOrderNotificationsReadCommand(Command[int]):
    user_id: UserId
    order_id: OrderId


class MarkOrderNotificationsReadHandler(CommandHandler[int]):
    def __init__(
        self,
        notification_repository: NotificationRepository,
        unread_count: UnreadCountSynchronizer,
    ):
        self._notification_repository = notification_repository
        self._unread_count = unread_count

    async def execute(self, command: MarkOrderNotificationsReadCommand) -> int:
        modified = await self._notification_repository.mark_all_read(
            command.user_id, order_id=command.order_id
        )
        logger.debug(
            f"[notifications] {modified} marked read for {command.user_id} "
            f"on order {command.order_id}"
        )
        await self._unread_count.refresh(command.user_id)
        return modified
