"""Notification read-state commands."""

from .toggle_notification import (
    NotificationReadResult,
    ToggleNotificationCommand,
    ToggleNotificationHandler,
    MarkNotificationReadCommand,
    MarkNotificationReadHandler,
)
from .mark_all_read import (
    MarkAllNotificationsReadCommand,
    MarkAllNotificationsReadHandler,
    MarkOrderNotificationsReadCommand,
    MarkOrderNotificationsReadHandler,
)

__all__ = [
    "NotificationReadResult",
    "ToggleNotificationCommand",
    "ToggleNotificationHandler",
    "MarkNotificationReadCommand",
    "MarkNotificationReadHandler",
    "MarkAllNotificationsReadCommand",
    "MarkAllNotificationsReadHandler",
    "MarkOrderNotificationsReadCommand",
    "MarkOrderNotificationsReadHandler",
]
