"""Unread backlog replay on channel registration."""

import pytest

from conftest import BrokenChannel, RecordingChannel
from src.domain.entities.notification import NewMessage, ThreadStatusChange
from src.domain.value_objects import ThreadId, UserId

ALICE = UserId("alice")


@pytest.mark.asyncio
async def test_replay_sends_unread_newest_first_then_count(engine):
    thread_id = ThreadId.new()
    older = await engine.dispatcher.dispatch(
        ALICE, "older", NewMessage(thread_id=thread_id, subject="Invoice")
    )
    newer = await engine.dispatcher.dispatch(
        ALICE,
        "newer",
        ThreadStatusChange(thread_id=thread_id, is_open=False, subject="Invoice"),
    )
    channel = RecordingChannel()

    sent = await engine.replayer.replay(ALICE, channel)

    assert sent == 2
    events = [event for event, _ in channel.sent]
    assert events == ["notification", "notification", "unreadCount"]
    assert [p["id"] for p in channel.events("notification")] == [newer.id.value, older.id.value]
    assert channel.events("notification")[0] == {
        "id": newer.id.value,
        "type": "thread_status_change",
        "message": "newer",
        "isRead": False,
        "createdAt": newer.created_at.isoformat(),
        "thread": thread_id.value,
        "subject": "Invoice",
        "isOpen": False,
    }
    assert channel.events("unreadCount") == [{"count": 2}]


@pytest.mark.asyncio
async def test_replay_is_capped_but_count_is_exact(engine):
    for i in range(25):
        await engine.dispatcher.dispatch(ALICE, f"n{i}", NewMessage(thread_id=ThreadId.new()))
    channel = RecordingChannel()

    sent = await engine.replayer.replay(ALICE, channel)

    assert sent == 20
    assert channel.events("unreadCount") == [{"count": 25}]


@pytest.mark.asyncio
async def test_replay_skips_read_notifications(engine):
    notification = await engine.dispatcher.dispatch(
        ALICE, "seen", NewMessage(thread_id=ThreadId.new())
    )
    notification.mark_read()
    await engine.notifications.save(notification)
    channel = RecordingChannel()

    assert await engine.replayer.replay(ALICE, channel) == 0
    assert channel.sent == [("unreadCount", {"count": 0})]


@pytest.mark.asyncio
async def test_replay_to_broken_channel_does_not_raise(engine):
    await engine.dispatcher.dispatch(ALICE, "n", NewMessage(thread_id=ThreadId.new()))

    assert await engine.replayer.replay(ALICE, BrokenChannel()) == 0
