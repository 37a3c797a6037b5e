"""
Threads API Router - participant endpoints for support threads.

Flow:
  HTTP Request → Router → Command/Query → Handler → Repository
                                             ↓
                              NotificationDispatcher → ConnectionRegistry
  HTTP Response ← Router ← Result ←

Thread creation and replies are multipart/form-data so attachments travel
with the text:
- subject, recipientId, department, content: form fields
- attachments: zero or more files
"""

from logging import getLogger
from typing import Optional
from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile, status
from dishka.integrations.fastapi import FromDishka, inject
from src.application.commands.threads import (
    AddMessageCommand,
    AddMessageHandler,
    CreateThreadCommand,
    CreateThreadHandler,
    ToggleThreadStatusCommand,
    ToggleThreadStatusHandler,
)
from src.application.queries.threads import (
    GetThreadHandler,
    GetThreadQuery,
    ListThreadsHandler,
    ListThreadsQuery,
)
from src.application.dto import (
    CreateThreadDTO,
    MessageDTO,
    ThreadDTO,
    ThreadDetailDTO,
    ThreadListDTO,
)
from src.domain.exceptions import (
    AccessDeniedError,
    DomainValidationError,
    EntityNotFoundError,
)
from src.domain.value_objects.thread_id import ThreadId
from src.domain.value_objects.user_id import UserId
from src.presentation.api._uploads import read_uploads
from src.presentation.dependencies.auth import AuthUser, get_current_user

logger = getLogger(__name__)


def parse_thread_id(thread_id: str) -> ThreadId:
    try:
        return ThreadId(thread_id)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Thread {thread_id} not found")


# ==================== ROUTER ====================

router = APIRouter(prefix="/threads", tags=["threads"])


# ==================== ENDPOINTS ====================


@router.post(
    "",
    response_model=CreateThreadDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def create_thread(
    handler: FromDishka[CreateThreadHandler],
    current_user: AuthUser = Depends(get_current_user),
    subject: str = Form(default=""),
    recipient_id: str = Form(default="", alias="recipientId"),
    department: Optional[str] = Form(default=None),
    content: str = Form(default=""),
    attachments: list[UploadFile] = File(default=[]),
):
    """Open a thread with a first message."""
    try:
        command = CreateThreadCommand(
            subject=subject,
            initiator_id=current_user.id,
            recipient_id=UserId(recipient_id),
            department=department,
            content=content,
            attachments=await read_uploads(attachments),
        )
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=f"recipientId: {e}") from e

    try:
        result = await handler.execute(command)
        return CreateThreadDTO(
            thread=ThreadDTO.from_entity(result.thread),
            message=MessageDTO.from_entity(result.message),
        )
    except DomainValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.get(
    "",
    response_model=ThreadListDTO,
    status_code=status.HTTP_200_OK,
)
@inject
async def list_threads(
    handler: FromDishka[ListThreadsHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """List the caller's threads, newest activity first."""
    threads = await handler.execute(ListThreadsQuery(user_id=current_user.id))
    return ThreadListDTO(threads=[ThreadDTO.from_entity(t) for t in threads])


@router.get(
    "/{thread_id}",
    response_model=ThreadDetailDTO,
    status_code=status.HTTP_200_OK,
)
@inject
async def get_thread(
    thread_id: str,
    handler: FromDishka[GetThreadHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Get a thread with its messages (oldest first)."""
    try:
        result = await handler.execute(
            GetThreadQuery(thread_id=parse_thread_id(thread_id), user_id=current_user.id)
        )
        return ThreadDetailDTO.from_detail(result.thread, result.messages)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except AccessDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e)) from e


@router.post(
    "/{thread_id}/messages",
    response_model=MessageDTO,
    status_code=status.HTTP_201_CREATED,
)
@inject
async def add_message(
    thread_id: str,
    handler: FromDishka[AddMessageHandler],
    current_user: AuthUser = Depends(get_current_user),
    content: str = Form(default=""),
    attachments: list[UploadFile] = File(default=[]),
):
    """Reply in a thread. Closed threads still accept messages."""
    try:
        command = AddMessageCommand(
            thread_id=parse_thread_id(thread_id),
            sender_id=current_user.id,
            content=content,
            attachments=await read_uploads(attachments),
        )
        message = await handler.execute(command)
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
async def toggle_thread_status(
    thread_id: str,
    handler: FromDishka[ToggleThreadStatusHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Flip Open/Closed. The caller must take part in the thread."""
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
