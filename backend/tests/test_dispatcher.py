"""NotificationDispatcher: persist, route by type, push, unread sync."""

import pytest

from conftest import BrokenChannel, RecordingChannel, build_engine
from src.application.services import NotificationRouter
from src.domain.entities.notification import (
    FileAdded,
    NewAdminComment,
    NewMessage,
    OrderStatusChange,
    StatusChange,
    ThreadStatusChange,
)
from src.domain.value_objects import Attachment, OrderId, ThreadId, UserId

ALICE = UserId("alice")


@pytest.fixture()
def channel(registry):
    channel = RecordingChannel()
    registry.register("alice", channel)
    return channel


@pytest.mark.asyncio
async def test_new_message_pushes_full_notification_then_unread_count(engine, channel):
    thread_id = ThreadId.new()
    notification = await engine.dispatcher.dispatch(
        ALICE, "New message", NewMessage(thread_id=thread_id, subject="Invoice")
    )

    assert [event for event, _ in channel.sent] == ["notification", "unreadCount"]
    payload = channel.sent[0][1]
    assert payload["id"] == notification.id.value
    assert payload["type"] == "new_message"
    assert payload["threadId"] == thread_id.value
    assert payload["subject"] == "Invoice"
    assert payload["isRead"] is False
    assert channel.sent[1][1] == {"count": 1}


@pytest.mark.asyncio
async def test_thread_status_change_uses_its_own_event(engine, channel):
    thread_id = ThreadId.new()
    await engine.dispatcher.dispatch(
        ALICE,
        "Thread closed",
        ThreadStatusChange(
            thread_id=thread_id, is_open=False, subject="Refund", thread_url="http://x/t"
        ),
    )

    event, payload = channel.sent[0]
    assert event == "thread_status_change"
    assert payload == {
        "threadId": thread_id.value,
        "isRead": False,
        "isOpen": False,
        "subject": "Refund",
        "message": "Thread closed",
        "threadUrl": "http://x/t",
    }


@pytest.mark.asyncio
async def test_order_status_change_payload(engine, channel):
    await engine.dispatcher.dispatch(
        ALICE,
        "Order shipped",
        OrderStatusChange(order_id=OrderId("o-1"), new_status="shipped"),
    )

    assert channel.sent[0] == (
        "notification",
        {"type": "order_status_change", "orderId": "o-1", "isRead": False, "newStatus": "shipped"},
    )


@pytest.mark.asyncio
async def test_status_change_uses_default_route(engine, channel):
    await engine.dispatcher.dispatch(
        ALICE, "Status", StatusChange(order_id=OrderId("o-2"), order_number="1002")
    )

    event, payload = channel.sent[0]
    assert event == "notification"
    assert payload["type"] == "status_change"
    assert payload["orderNumber"] == "1002"
    assert "threadId" not in payload


@pytest.mark.asyncio
async def test_admin_comment_spread_shape(engine, channel):
    notification = await engine.dispatcher.dispatch(
        ALICE, "New comment", NewAdminComment(order_id=OrderId("o-3"), order_number="1003")
    )

    payload = channel.sent[0][1]
    assert payload["id"] == notification.id.value
    assert payload["orderId"] == "o-3"
    assert payload["orderNumber"] == "1003"
    assert payload["isRead"] is False


@pytest.mark.asyncio
async def test_admin_comment_compact_shape(store, mailer, storage, registry):
    engine = build_engine(
        store, mailer, storage, registry, router=NotificationRouter("compact", "dispatch")
    )
    channel = RecordingChannel()
    registry.register("alice", channel)

    notification = await engine.dispatcher.dispatch(
        ALICE, "New comment", NewAdminComment(order_id=OrderId("o-3"), order_number="1003")
    )

    assert channel.sent[0][1] == {
        "type": "new_admin_comment",
        "orderId": "o-3",
        "isRead": False,
        "orderNumber": "1003",
        "message": "New comment",
        "createdAt": notification.created_at.isoformat(),
    }


@pytest.mark.asyncio
async def test_file_added_shapes(store, mailer, storage, registry):
    file = Attachment(filename="brief.pdf", url="https://files.test/brief.pdf")
    detail = FileAdded(order_id=OrderId("o-4"), file=file, order_number="1004")

    dispatch_engine = build_engine(store, mailer, storage, registry)
    first = RecordingChannel()
    registry.register("alice", first)
    await dispatch_engine.dispatcher.dispatch(ALICE, "File added", detail)
    assert first.sent[0][1] == {
        "type": "file_added",
        "orderId": "o-4",
        "file": {"filename": "brief.pdf", "url": "https://files.test/brief.pdf"},
        "isRead": False,
        "message": "File added",
    }

    direct_engine = build_engine(
        store, mailer, storage, registry, router=NotificationRouter("spread", "direct")
    )
    registry.unregister("alice", first)
    second = RecordingChannel()
    registry.register("alice", second)
    notification = await direct_engine.dispatcher.dispatch(ALICE, "File added", detail)
    assert second.sent[0][1] == {
        "type": "file_added",
        "orderId": "o-4",
        "orderNumber": "1004",
        "file": {"filename": "brief.pdf", "url": "https://files.test/brief.pdf"},
        "message": "File added",
        "createdAt": notification.created_at.isoformat(),
    }


def test_unknown_shape_is_rejected():
    with pytest.raises(ValueError):
        NotificationRouter("bogus", "dispatch")
    with pytest.raises(ValueError):
        NotificationRouter("spread", "bogus")


@pytest.mark.asyncio
async def test_offline_user_still_gets_persisted_notification(engine):
    await engine.dispatcher.dispatch(
        ALICE, "Order shipped", OrderStatusChange(order_id=OrderId("o-1"), new_status="shipped")
    )

    assert await engine.notifications.count_unread(ALICE) == 1


@pytest.mark.asyncio
async def test_broken_channel_does_not_fail_dispatch(engine, registry):
    registry.register("alice", BrokenChannel())

    notification = await engine.dispatcher.dispatch(
        ALICE, "New message", NewMessage(thread_id=ThreadId.new())
    )

    assert await engine.notifications.get_by_id(notification.id) is not None
    assert registry.channels("alice") == []


@pytest.mark.asyncio
async def test_persistence_failure_propagates_and_pushes_nothing(engine, store, channel):
    store.fail_writes.add("notifications")

    with pytest.raises(RuntimeError):
        await engine.dispatcher.dispatch(
            ALICE, "New message", NewMessage(thread_id=ThreadId.new())
        )

    assert channel.sent == []


@pytest.mark.asyncio
async def test_unread_sync_failure_is_swallowed(engine, channel, monkeypatch):
    async def broken_count(user_id):
        raise RuntimeError("count failed")

    monkeypatch.setattr(engine.notifications, "count_unread", broken_count)

    notification = await engine.dispatcher.dispatch(
        ALICE, "New message", NewMessage(thread_id=ThreadId.new())
    )

    assert notification.is_read is False
    assert [event for event, _ in channel.sent] == ["notification"]


@pytest.mark.asyncio
async def test_unread_count_matches_store_after_each_dispatch(engine, channel):
    for expected in (1, 2, 3):
        await engine.dispatcher.dispatch(
            ALICE, "New message", NewMessage(thread_id=ThreadId.new())
        )
        assert channel.events("unreadCount")[-1] == {"count": expected}
