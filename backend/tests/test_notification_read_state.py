"""Notification read-state commands and the unread badge they refresh."""

import pytest

from conftest import RecordingChannel
from src.application.commands.notifications import (
    MarkAllNotificationsReadCommand,
    MarkNotificationReadCommand,
    MarkOrderNotificationsReadCommand,
    ToggleNotificationCommand,
)
from src.application.queries.notifications import (
    ListNotificationsHandler,
    ListNotificationsQuery,
)
from src.domain.entities.notification import NewAdminComment, NewMessage, StatusChange
from src.domain.exceptions import EntityNotFoundError
from src.domain.value_objects import NotificationId, OrderId, ThreadId, UserId

ALICE = UserId("alice")
BOB = UserId("bob")


@pytest.fixture()
def alice_tab(registry):
    tab = RecordingChannel()
    registry.register("alice", tab)
    return tab


async def dispatch_many(engine, count, user=ALICE):
    return [
        await engine.dispatcher.dispatch(user, f"n{i}", NewMessage(thread_id=ThreadId.new()))
        for i in range(count)
    ]


@pytest.mark.asyncio
async def test_toggle_twice_restores_state_and_count(engine, alice_tab):
    [notification] = await dispatch_many(engine, 1)
    command = ToggleNotificationCommand(notification_id=notification.id, user_id=ALICE)

    first = await engine.toggle_notification.execute(command)
    second = await engine.toggle_notification.execute(command)

    assert first.notification.is_read is True
    assert first.unread_count == 0
    assert second.notification.is_read is False
    assert second.unread_count == 1
    assert alice_tab.events("unreadCount")[-2:] == [{"count": 0}, {"count": 1}]


@pytest.mark.asyncio
async def test_toggle_someone_elses_notification_is_not_found(engine):
    [notification] = await dispatch_many(engine, 1, user=BOB)

    with pytest.raises(EntityNotFoundError):
        await engine.toggle_notification.execute(
            ToggleNotificationCommand(notification_id=notification.id, user_id=ALICE)
        )
    assert (await engine.notifications.get_by_id(notification.id)).is_read is False


@pytest.mark.asyncio
async def test_toggle_missing_notification(engine):
    with pytest.raises(EntityNotFoundError):
        await engine.toggle_notification.execute(
            ToggleNotificationCommand(notification_id=NotificationId.new(), user_id=ALICE)
        )


@pytest.mark.asyncio
async def test_mark_read_is_idempotent(engine):
    [notification] = await dispatch_many(engine, 1)
    command = MarkNotificationReadCommand(notification_id=notification.id, user_id=ALICE)

    await engine.mark_read.execute(command)
    result = await engine.mark_read.execute(command)

    assert result.notification.is_read is True
    assert result.unread_count == 0


@pytest.mark.asyncio
async def test_mark_all_read_reports_modified_and_pushes_zero(engine, alice_tab):
    await dispatch_many(engine, 3)
    await dispatch_many(engine, 2, user=BOB)

    modified = await engine.mark_all_read.execute(MarkAllNotificationsReadCommand(user_id=ALICE))

    assert modified == 3
    assert alice_tab.events("unreadCount")[-1] == {"count": 0}
    assert await engine.notifications.count_unread(BOB) == 2


@pytest.mark.asyncio
async def test_mark_all_read_for_order_leaves_other_orders(engine, alice_tab):
    await engine.dispatcher.dispatch(ALICE, "a", StatusChange(order_id=OrderId("o-1")))
    await engine.dispatcher.dispatch(ALICE, "b", NewAdminComment(order_id=OrderId("o-1")))
    await engine.dispatcher.dispatch(ALICE, "c", StatusChange(order_id=OrderId("o-2")))

    modified = await engine.mark_order_read.execute(
        MarkOrderNotificationsReadCommand(user_id=ALICE, order_id=OrderId("o-1"))
    )

    assert modified == 2
    assert alice_tab.events("unreadCount")[-1] == {"count": 1}


@pytest.mark.asyncio
async def test_list_notifications_pages_newest_first(engine):
    created = await dispatch_many(engine, 12)
    handler = ListNotificationsHandler(engine.notifications)

    first = await handler.execute(ListNotificationsQuery(user_id=ALICE, page=1, limit=10))
    second = await handler.execute(ListNotificationsQuery(user_id=ALICE, page=2, limit=10))

    assert first.total_count == 12
    assert first.total_pages == 2
    assert len(first.notifications) == 10
    assert [n.id for n in second.notifications] == [created[1].id, created[0].id]


@pytest.mark.asyncio
async def test_list_notifications_empty(engine):
    page = await ListNotificationsHandler(engine.notifications).execute(
        ListNotificationsQuery(user_id=ALICE)
    )

    assert page.notifications == []
    assert page.total_pages == 0
