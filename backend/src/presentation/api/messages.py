"""
Messages API Router - the caller's messages across threads.

GET /messages/{id} is read-on-open: the recipient's first open marks the
message read. POST /messages/{id}/attachments lets the sender add a file
(multipart field `file`) to a message already sent.
"""

from logging import getLogger
from typing import Optional
from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from dishka.integrations.fastapi import FromDishka, inject
from src.application.commands.messages import (
    AddAttachmentCommand,
    AddAttachmentHandler,
    ReadMessageCommand,
    ReadMessageHandler,
)
from src.application.queries.messages import ListMessagesHandler, ListMessagesQuery
from src.application.dto import MessageDTO
from src.domain.exceptions import (
    AccessDeniedError,
    DomainValidationError,
    EntityNotFoundError,
)
from src.domain.value_objects.message_id import MessageId
from src.presentation.api._uploads import read_uploads
from src.presentation.dependencies.auth import AuthUser, get_current_user

logger = getLogger(__name__)


def parse_message_id(message_id: str) -> MessageId:
    try:
        return MessageId(message_id)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Message {message_id} not found")


router = APIRouter(prefix="/messages", tags=["messages"])


@router.get(
    "",
    response_model=list[MessageDTO],
    status_code=status.HTTP_200_OK,
)
@inject
async def list_messages(
    handler: FromDishka[ListMessagesHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Messages the caller sent or received, newest first."""
    messages = await handler.execute(ListMessagesQuery(user_id=current_user.id))
    return [MessageDTO.from_entity(m) for m in messages]


@router.get(
    "/{message_id}",
    response_model=MessageDTO,
    status_code=status.HTTP_200_OK,
)
@inject
async def read_message(
    message_id: str,
    handler: FromDishka[ReadMessageHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    command = ReadMessageCommand(
        message_id=parse_message_id(message_id),
        reader_id=current_user.id,
        reader_role=current_user.role,
    )
    try:
        message = await handler.execute(command)
        return MessageDTO.from_entity(message)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except AccessDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e)) from e


@router.post(
    "/{message_id}/attachments",
    response_model=MessageDTO,
    status_code=status.HTTP_200_OK,
)
@inject
async def add_attachment(
    message_id: str,
    handler: FromDishka[AddAttachmentHandler],
    current_user: AuthUser = Depends(get_current_user),
    file: Optional[UploadFile] = File(default=None),
):
    """Attach a file to one of the caller's own messages."""
    command = AddAttachmentCommand(
        message_id=parse_message_id(message_id),
        sender_id=current_user.id,
        attachments=await read_uploads([file] if file else []),
    )
    try:
        message = await handler.execute(command)
        return MessageDTO.from_entity(message)
    except DomainValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except AccessDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e)) from e
