"""
Flatten/rebuild the notification variants for column storage.

The notifications table keeps every variant field as a nullable column;
`type` decides which columns are read back into the variant.
"""

from typing import Any, Optional

from src.domain.entities.notification import (
    FileAdded,
    NewAdminComment,
    NewMessage,
    Notification,
    NotificationDetail,
    NotificationType,
    OrderStatusChange,
    StatusChange,
    ThreadStatusChange,
)
from src.domain.value_objects.attachment import Attachment
from src.domain.value_objects.notification_id import NotificationId
from src.domain.value_objects.order_id import OrderId
from src.domain.value_objects.thread_id import ThreadId
from src.domain.value_objects.user_id import UserId

DETAIL_COLUMNS = (
    "order_id",
    "order_number",
    "order_url",
    "new_status",
    "thread_id",
    "subject",
    "thread_url",
    "is_open",
    "file",
)


def detail_to_columns(detail: NotificationDetail) -> dict[str, Any]:
    columns: dict[str, Any] = {name: None for name in DETAIL_COLUMNS}
    for name in DETAIL_COLUMNS:
        if not hasattr(detail, name):
            continue
        value = getattr(detail, name)
        if isinstance(value, (OrderId, ThreadId)):
            value = value.value
        elif isinstance(value, Attachment):
            value = value.to_dict()
        columns[name] = value
    return columns


def _get(record: Any, name: str) -> Any:
    if isinstance(record, dict):
        return record.get(name)
    return getattr(record, name, None)


def _order(record: Any) -> OrderId:
    return OrderId(_get(record, "order_id"))


def _file(record: Any) -> Optional[Attachment]:
    raw = _get(record, "file")
    if not raw or not raw.get("filename") or not raw.get("url"):
        return None
    return Attachment(filename=raw["filename"], url=raw["url"])


def columns_to_detail(record: Any) -> NotificationDetail:
    kind = NotificationType(_get(record, "type"))
    if kind == NotificationType.STATUS_CHANGE:
        return StatusChange(order_id=_order(record), order_number=_get(record, "order_number"))
    if kind == NotificationType.FILE_ADDED:
        return FileAdded(
            order_id=_order(record),
            file=_file(record),
            order_number=_get(record, "order_number"),
        )
    if kind == NotificationType.THREAD_STATUS_CHANGE:
        return ThreadStatusChange(
            thread_id=ThreadId(_get(record, "thread_id")),
            is_open=bool(_get(record, "is_open")),
            subject=_get(record, "subject"),
            thread_url=_get(record, "thread_url"),
        )
    if kind == NotificationType.NEW_MESSAGE:
        return NewMessage(
            thread_id=ThreadId(_get(record, "thread_id")),
            subject=_get(record, "subject"),
            thread_url=_get(record, "thread_url"),
        )
    if kind == NotificationType.ORDER_STATUS_CHANGE:
        return OrderStatusChange(
            order_id=_order(record),
            new_status=_get(record, "new_status"),
            order_number=_get(record, "order_number"),
            order_url=_get(record, "order_url"),
        )
    return NewAdminComment(order_id=_order(record), order_number=_get(record, "order_number"))


def record_to_notification(record: Any) -> Notification:
    return Notification(
        id=NotificationId(_get(record, "id")),
        user_id=UserId(_get(record, "user_id")),
        detail=columns_to_detail(record),
        message=_get(record, "message") or "",
        created_at=_get(record, "created_at"),
        is_read=bool(_get(record, "is_read")),
    )
