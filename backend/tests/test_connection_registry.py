"""ConnectionRegistry: multi-channel fan-out, identity removal, broken channels."""

import pytest

from conftest import BrokenChannel, RecordingChannel
from src.infrastructure.realtime import ConnectionRegistry, deliver_if_available


def test_register_keeps_every_channel_once():
    registry = ConnectionRegistry()
    first, second = RecordingChannel(), RecordingChannel()

    registry.register("alice", first)
    registry.register("alice", second)
    registry.register("alice", first)

    assert registry.channels("alice") == [first, second]


def test_unregister_removes_only_that_channel():
    registry = ConnectionRegistry()
    first, second = RecordingChannel(), RecordingChannel()
    registry.register("alice", first)
    registry.register("alice", second)

    registry.unregister("alice", first)

    assert registry.channels("alice") == [second]
    assert registry.connected_users() == ["alice"]


def test_unregister_unknown_channel_is_noop():
    registry = ConnectionRegistry()
    registered = RecordingChannel()
    registry.register("alice", registered)

    registry.unregister("alice", RecordingChannel())
    registry.unregister("nobody", registered)

    assert registry.channels("alice") == [registered]


def test_last_channel_removed_forgets_user():
    registry = ConnectionRegistry()
    channel = RecordingChannel()
    registry.register("alice", channel)

    registry.unregister("alice", channel)

    assert registry.connected_users() == []
    assert registry.channels("alice") == []


@pytest.mark.asyncio
async def test_deliver_fans_out_to_every_channel():
    registry = ConnectionRegistry()
    tabs = [RecordingChannel(), RecordingChannel()]
    for tab in tabs:
        registry.register("alice", tab)

    delivered = await registry.deliver("alice", "notification", {"id": "n1"})

    assert delivered == 2
    for tab in tabs:
        assert tab.sent == [("notification", {"id": "n1"})]


@pytest.mark.asyncio
async def test_deliver_to_unknown_user_is_silent():
    registry = ConnectionRegistry()

    assert await registry.deliver("nobody", "notification", {}) == 0


@pytest.mark.asyncio
async def test_broken_channel_is_dropped_and_others_still_receive():
    registry = ConnectionRegistry()
    broken, healthy = BrokenChannel(), RecordingChannel()
    registry.register("alice", broken)
    registry.register("alice", healthy)

    delivered = await registry.deliver("alice", "unreadCount", {"count": 3})

    assert delivered == 1
    assert healthy.sent == [("unreadCount", {"count": 3})]
    assert registry.channels("alice") == [healthy]
    assert broken.closed
    assert not healthy.closed


@pytest.mark.asyncio
async def test_missing_registry_behaves_as_empty():
    assert await deliver_if_available(None, "alice", "notification", {}) == 0


@pytest.mark.asyncio
async def test_close_all_closes_and_forgets_everything():
    registry = ConnectionRegistry()
    channels = [RecordingChannel(), RecordingChannel()]
    registry.register("alice", channels[0])
    registry.register("bob", channels[1])

    await registry.close_all()

    assert all(channel.closed for channel in channels)
    assert registry.connected_users() == []


class UnclosableChannel(BrokenChannel):
    async def close(self):
        raise ConnectionError("already gone")


@pytest.mark.asyncio
async def test_channel_failing_to_close_is_still_dropped():
    registry = ConnectionRegistry()
    registry.register("alice", UnclosableChannel())

    assert await registry.deliver("alice", "notification", {"id": "n1"}) == 0
    assert registry.connected_users() == []
