"""Notification queries."""

from .list_notifications import (
    ListNotificationsQuery,
    ListNotificationsHandler,
    NotificationPage,
)
from .get_unread_count import GetUnreadCountQuery, GetUnreadCountHandler

__all__ = [
    "ListNotificationsQuery",
    "ListNotificationsHandler",
    "NotificationPage",
    "GetUnreadCountQuery",
    "GetUnreadCountHandler",
]
