"""Flattening notification variants into nullable columns and back."""

from datetime import datetime, timezone

from src.domain.entities.notification import (
    FileAdded,
    NewMessage,
    Notification,
    OrderStatusChange,
    ThreadStatusChange,
)
from src.domain.value_objects import Attachment, OrderId, ThreadId, UserId
from src.infrastructure.persistence.notification_mapping import (
    DETAIL_COLUMNS,
    detail_to_columns,
    record_to_notification,
)


def as_record(notification):
    return {
        "id": notification.id.value,
        "user_id": notification.user_id.value,
        "type": notification.type.value,
        "message": notification.message,
        "is_read": notification.is_read,
        "created_at": notification.created_at,
        **detail_to_columns(notification.detail),
    }


def test_thread_variant_never_writes_order_columns():
    columns = detail_to_columns(
        ThreadStatusChange(thread_id=ThreadId.new(), is_open=False, subject="Refund")
    )

    assert set(columns) == set(DETAIL_COLUMNS)
    assert columns["order_id"] is None
    assert columns["is_open"] is False


def test_rebuilds_the_stored_variant():
    thread_id = ThreadId.new()
    details = [
        NewMessage(thread_id=thread_id, subject="Invoice", thread_url="http://x/t"),
        OrderStatusChange(order_id=OrderId("o-1"), new_status="shipped", order_number="1001"),
        FileAdded(order_id=OrderId("o-2"), file=Attachment("a.pdf", "http://files/a.pdf")),
    ]
    for detail in details:
        notification = Notification.create(UserId("alice"), detail, "message")

        rebuilt = record_to_notification(as_record(notification))

        assert rebuilt == notification


def test_file_added_without_file():
    record = {
        "id": "0b0ec5b8-4d0e-4a57-9a5b-5b8f6f6f7a10",
        "user_id": "alice",
        "type": "file_added",
        "message": "File added",
        "is_read": True,
        "created_at": datetime.now(timezone.utc),
        "order_id": "o-9",
        "file": None,
    }

    notification = record_to_notification(record)

    assert notification.detail == FileAdded(order_id=OrderId("o-9"))
    assert notification.is_read is True
