"""
Admin API Routers - the admin panel's view of every thread and message.

- /admin/threads: list, open, reply, toggle status
- /admin/messages: list (newest first), open, delete

All routes require the admin role (require_admin). Replies go through the
same AddMessageHandler as participants, so the admin must be in the thread.
"""

from logging import getLogger
from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, UploadFile, status
from dishka.integrations.fastapi import FromDishka, inject
from src.application.commands.messages import DeleteMessageCommand, DeleteMessageHandler
from src.application.commands.threads import (
    AddMessageCommand,
    AddMessageHandler,
    AdminToggleThreadStatusHandler,
    ToggleThreadStatusCommand,
)
from src.application.queries.admin import (
    GetAnyMessageHandler,
    GetAnyMessageQuery,
    GetAnyThreadHandler,
    GetAnyThreadQuery,
    ListAllMessagesHandler,
    ListAllMessagesQuery,
    ListAllThreadsHandler,
    ListAllThreadsQuery,
)
from src.application.dto import (
    MessageDTO,
    MessagePageDTO,
    ThreadDTO,
    ThreadDetailDTO,
    ThreadPageDTO,
)
from src.config.settings import Config
from src.domain.exceptions import (
    AccessDeniedError,
    DomainValidationError,
    EntityNotFoundError,
)
from src.presentation.api._uploads import read_uploads
from src.presentation.api.messages import parse_message_id
from src.presentation.api.threads import parse_thread_id
from src.presentation.dependencies.auth import AuthUser, require_admin

logger = getLogger(__name__)

router = APIRouter(prefix="/admin/threads", tags=["admin"])


@router.get(
    "",
    response_model=ThreadPageDTO,
    status_code=status.HTTP_200_OK,
)
@inject
async def list_all_threads(
    handler: FromDishka[ListAllThreadsHandler],
    current_user: AuthUser = Depends(require_admin),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=Config.ADMIN_THREADS_PAGE_SIZE, ge=1, le=100),
):
    result = await handler.execute(ListAllThreadsQuery(page=page, limit=limit))
    return ThreadPageDTO(
        threads=[ThreadDTO.from_entity(t) for t in result.threads],
        current_page=result.current_page,
        total_pages=result.total_pages,
        total_count=result.total_count,
    )


@router.get(
    "/{thread_id}",
    response_model=ThreadDetailDTO,
    status_code=status.HTTP_200_OK,
)
@inject
async def get_any_thread(
    thread_id: str,
    handler: FromDishka[GetAnyThreadHandler],
    current_user: AuthUser = Depends(require_admin),
):
    try:
        result = await handler.execute(GetAnyThreadQuery(thread_id=parse_thread_id(thread_id)))
        return ThreadDetailDTO.from_detail(result.thread, result.messages)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.post(
    "/{thread_id}/messages",
    response_model=MessageDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def admin_add_message(
    thread_id: str,
    handler: FromDishka[AddMessageHandler],
    current_user: AuthUser = Depends(require_admin),
    content: str = Form(default=""),
    attachments: list[UploadFile] = File(default=[]),
):
    try:
        message = await handler.execute(
            AddMessageCommand(
                thread_id=parse_thread_id(thread_id),
                sender_id=current_user.id,
                content=content,
                attachments=await read_uploads(attachments),
            )
        )
        return MessageDTO.from_entity(message)
    except DomainValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except AccessDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e)) from e


@router.patch(
    "/{thread_id}/toggle-status",
    response_model=ThreadDTO,
    status_code=status.HTTP_200_OK,
)
@inject
async def admin_toggle_thread_status(
    thread_id: str,
    handler: FromDishka[AdminToggleThreadStatusHandler],
    current_user: AuthUser = Depends(require_admin),
):
    try:
        thread = await handler.execute(
            ToggleThreadStatusCommand(
                thread_id=parse_thread_id(thread_id),
                actor_id=current_user.id,
                actor_role=current_user.role,
            )
        )
        return ThreadDTO.from_entity(thread)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except AccessDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e)) from e


# ==================== MESSAGES ====================

messages_router = APIRouter(prefix="/admin/messages", tags=["admin"])


@messages_router.get(
    "",
    response_model=MessagePageDTO,
    status_code=status.HTTP_200_OK,
)
@inject
async def list_all_messages(
    handler: FromDishka[ListAllMessagesHandler],
    current_user: AuthUser = Depends(require_admin),
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=Config.ADMIN_MESSAGES_PAGE_SIZE, ge=1, le=200),
):
    result = await handler.execute(ListAllMessagesQuery(page=page, limit=limit))
    return MessagePageDTO(
        messages=[MessageDTO.from_entity(m) for m in result.messages],
        current_page=result.current_page,
        total_pages=result.total_pages,
        total_count=result.total_count,
    )


@messages_router.get(
    "/{message_id}",
    response_model=MessageDTO,
    status_code=status.HTTP_200_OK,
)
@inject
async def get_any_message(
    message_id: str,
    handler: FromDishka[GetAnyMessageHandler],
    current_user: AuthUser = Depends(require_admin),
):
    try:
        message = await handler.execute(GetAnyMessageQuery(message_id=parse_message_id(message_id)))
        return MessageDTO.from_entity(message)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@messages_router.delete(
    "/{message_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
@inject
async def delete_message(
    message_id: str,
    handler: FromDishka[DeleteMessageHandler],
    current_user: AuthUser = Depends(require_admin),
):
    try:
        await handler.execute(
            DeleteMessageCommand(
                message_id=parse_message_id(message_id),
                actor_role=current_user.role,
            )
        )
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except AccessDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e)) from e
