"""
Notification routing - which live event and payload a notification becomes.

Every notification type maps to an event name and a payload builder. Two types
have two payload shapes seen by clients; the shape is picked once, from config:

    NEW_ADMIN_COMMENT_SHAPE: "spread" | "compact"
    FILE_ADDED_SHAPE:        "dispatch" | "direct"
"""

import dataclasses
from datetime import datetime
from typing import Any, Callable, Optional

from src.config.settings import Config
from src.domain.entities.notification import Notification, NotificationType
from src.domain.value_objects.attachment import Attachment
from src.domain.value_objects.order_id import OrderId
from src.domain.value_objects.thread_id import ThreadId

EVENT_NOTIFICATION = "notification"
EVENT_THREAD_STATUS_CHANGE = "thread_status_change"
EVENT_UNREAD_COUNT = "unreadCount"

PayloadBuilder = Callable[[Notification], dict[str, Any]]


def _camel(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.title() for part in rest)


def _plain(value: Any) -> Any:
    if isinstance(value, (OrderId, ThreadId)):
        return value.value
    if isinstance(value, Attachment):
        return value.to_dict()
    if isinstance(value, datetime):
        return value.isoformat()
    return value


def notification_to_wire(notification: Notification) -> dict[str, Any]:
    """Full client representation: common fields plus the variant's own fields."""
    wire = {
        "id": notification.id.value,
        "userId": notification.user_id.value,
        "type": notification.type.value,
        "message": notification.message,
        "isRead": notification.is_read,
        "createdAt": notification.created_at.isoformat(),
    }
    for field in dataclasses.fields(notification.detail):
        wire[_camel(field.name)] = _plain(getattr(notification.detail, field.name))
    return wire


def replay_payload(notification: Notification) -> dict[str, Any]:
    thread_id = notification.thread_id
    return {
        "id": notification.id.value,
        "type": notification.type.value,
        "message": notification.message,
        "isRead": notification.is_read,
        "createdAt": notification.created_at.isoformat(),
        "thread": thread_id.value if thread_id else None,
        "subject": getattr(notification.detail, "subject", None),
        "isOpen": getattr(notification.detail, "is_open", None),
    }


def _thread_status_payload(n: Notification) -> dict[str, Any]:
    return {
        "threadId": n.detail.thread_id.value,
        "isRead": False,
        "isOpen": n.detail.is_open,
        "subject": n.detail.subject,
        "message": n.message,
        "threadUrl": n.detail.thread_url,
    }


def _admin_comment_spread(n: Notification) -> dict[str, Any]:
    return {
        **notification_to_wire(n),
        "isRead": False,
        "orderId": n.detail.order_id.value,
        "orderNumber": n.detail.order_number,
    }


def _admin_comment_compact(n: Notification) -> dict[str, Any]:
    return {
        "type": n.type.value,
        "orderId": n.detail.order_id.value,
        "isRead": False,
        "orderNumber": n.detail.order_number,
        "message": n.message,
        "createdAt": n.created_at.isoformat(),
    }


def _file_added_dispatch(n: Notification) -> dict[str, Any]:
    return {
        "type": n.type.value,
        "orderId": n.detail.order_id.value,
        "file": _plain(n.detail.file),
        "isRead": False,
        "message": n.message,
    }


def _file_added_direct(n: Notification) -> dict[str, Any]:
    return {
        "type": n.type.value,
        "orderId": n.detail.order_id.value,
        "orderNumber": n.detail.order_number,
        "file": _plain(n.detail.file),
        "message": n.message,
        "createdAt": n.created_at.isoformat(),
    }


def _order_status_payload(n: Notification) -> dict[str, Any]:
    return {
        "type": n.type.value,
        "orderId": n.detail.order_id.value,
        "isRead": False,
        "newStatus": n.detail.new_status,
    }


ADMIN_COMMENT_SHAPES: dict[str, PayloadBuilder] = {
    "spread": _admin_comment_spread,
    "compact": _admin_comment_compact,
}

FILE_ADDED_SHAPES: dict[str, PayloadBuilder] = {
    "dispatch": _file_added_dispatch,
    "direct": _file_added_direct,
}


class NotificationRouter:
    def __init__(
        self,
        admin_comment_shape: Optional[str] = None,
        file_added_shape: Optional[str] = None,
    ):
        admin_comment_shape = admin_comment_shape or Config.NEW_ADMIN_COMMENT_SHAPE
        file_added_shape = file_added_shape or Config.FILE_ADDED_SHAPE
        if admin_comment_shape not in ADMIN_COMMENT_SHAPES:
            raise ValueError(
                f"Unknown new_admin_comment shape: {admin_comment_shape}. "
                f"Must be one of {list(ADMIN_COMMENT_SHAPES)}"
            )
        if file_added_shape not in FILE_ADDED_SHAPES:
            raise ValueError(
                f"Unknown file_added shape: {file_added_shape}. "
                f"Must be one of {list(FILE_ADDED_SHAPES)}"
            )

        self._table: dict[NotificationType, tuple[str, PayloadBuilder]] = {
            NotificationType.THREAD_STATUS_CHANGE: (
                EVENT_THREAD_STATUS_CHANGE,
                _thread_status_payload,
            ),
            NotificationType.NEW_ADMIN_COMMENT: (
                EVENT_NOTIFICATION,
                ADMIN_COMMENT_SHAPES[admin_comment_shape],
            ),
            NotificationType.FILE_ADDED: (
                EVENT_NOTIFICATION,
                FILE_ADDED_SHAPES[file_added_shape],
            ),
            NotificationType.ORDER_STATUS_CHANGE: (
                EVENT_NOTIFICATION,
                _order_status_payload,
            ),
        }

    def route(self, notification: Notification) -> tuple[str, dict[str, Any]]:
        event, build = self._table.get(
            notification.type, (EVENT_NOTIFICATION, notification_to_wire)
        )
        return event, build(notification)
