"""
Notifications API Router - listing and read-state.

Every read-state change pushes a fresh `unreadCount` to the caller's open
live channels.

Routes with fixed segments (read-all, unread-count, orders/...) are declared
before the /{notification_id} routes.
"""

from logging import getLogger
from fastapi import APIRouter, Depends, HTTPException, Query, status
from dishka.integrations.fastapi import FromDishka, inject
from src.application.commands.notifications import (
    MarkAllNotificationsReadCommand,
    MarkAllNotificationsReadHandler,
    MarkNotificationReadCommand,
    MarkNotificationReadHandler,
    MarkOrderNotificationsReadCommand,
    MarkOrderNotificationsReadHandler,
    ToggleNotificationCommand,
    ToggleNotificationHandler,
)
from src.application.queries.notifications import (
    GetUnreadCountHandler,
    GetUnreadCountQuery,
    ListNotificationsHandler,
    ListNotificationsQuery,
)
from src.application.dto import (
    ModifiedCountDTO,
    NotificationDTO,
    NotificationPageDTO,
    NotificationReadDTO,
    UnreadCountDTO,
)
from src.config.settings import Config
from src.domain.exceptions import EntityNotFoundError
from src.domain.value_objects.notification_id import NotificationId
from src.domain.value_objects.order_id import OrderId
from src.presentation.dependencies.auth import AuthUser, get_current_user

logger = getLogger(__name__)

router = APIRouter(prefix="/notifications", tags=["notifications"])


def parse_notification_id(notification_id: str) -> NotificationId:
    try:
        return NotificationId(notification_id)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Notification {notification_id} not found",
        )


@router.get(
    "",
    response_model=NotificationPageDTO,
    status_code=status.HTTP_200_OK,
)
@inject
async def list_notifications(
    handler: FromDishka[ListNotificationsHandler],
    current_user: AuthUser = Depends(get_current_user),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=Config.NOTIFICATIONS_PAGE_SIZE, ge=1, le=100),
):
    result = await handler.execute(
        ListNotificationsQuery(user_id=current_user.id, page=page, limit=limit)
    )
    return NotificationPageDTO(
        notifications=[NotificationDTO.from_entity(n) for n in result.notifications],
        current_page=result.current_page,
        total_pages=result.total_pages,
        total_count=result.total_count,
    )


@router.get(
    "/unread-count",
    response_model=UnreadCountDTO,
    status_code=status.HTTP_200_OK,
)
@inject
async def unread_count(
    handler: FromDishka[GetUnreadCountHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    count = await handler.execute(GetUnreadCountQuery(user_id=current_user.id))
    return UnreadCountDTO(count=count)


@router.patch(
    "/read-all",
    response_model=ModifiedCountDTO,
    status_code=status.HTTP_200_OK,
)
@inject
async def mark_all_read(
    handler: FromDishka[MarkAllNotificationsReadHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    modified = await handler.execute(MarkAllNotificationsReadCommand(user_id=current_user.id))
    return ModifiedCountDTO(modified=modified)


@router.patch(
    "/orders/{order_id}/read",
    response_model=ModifiedCountDTO,
    status_code=status.HTTP_200_OK,
)
@inject
async def mark_order_read(
    order_id: str,
    handler: FromDishka[MarkOrderNotificationsReadHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    modified = await handler.execute(
        MarkOrderNotificationsReadCommand(user_id=current_user.id, order_id=OrderId(order_id))
    )
    return ModifiedCountDTO(modified=modified)


@router.patch(
    "/{notification_id}/toggle",
    response_model=NotificationReadDTO,
    status_code=status.HTTP_200_OK,
)
@inject
async def toggle_notification(
    notification_id: str,
    handler: FromDishka[ToggleNotificationHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    try:
        result = await handler.execute(
            ToggleNotificationCommand(
                notification_id=parse_notification_id(notification_id),
                user_id=current_user.id,
            )
        )
        return NotificationReadDTO(
            notification=NotificationDTO.from_entity(result.notification),
            unread_count=result.unread_count,
        )
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.patch(
    "/{notification_id}/read",
    response_model=NotificationReadDTO,
    status_code=status.HTTP_200_OK,
)
@inject
async def mark_notification_read(
    notification_id: str,
    handler: FromDishka[MarkNotificationReadHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    try:
        result = await handler.execute(
            MarkNotificationReadCommand(
                notification_id=parse_notification_id(notification_id),
                user_id=current_user.id,
            )
        )
        return NotificationReadDTO(
            notification=NotificationDTO.from_entity(result.notification),
            unread_count=result.unread_count,
        )
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
