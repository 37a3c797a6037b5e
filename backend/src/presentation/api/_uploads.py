"""Multipart attachment reading shared by the thread routers."""

from fastapi import UploadFile

from src.application.services.attachments import AttachmentUpload


async def read_uploads(files: list[UploadFile]) -> tuple[AttachmentUpload, ...]:
    uploads = []
    for file in files:
        content = await file.read()
        uploads.append(
            AttachmentUpload(
                filename=file.filename or "unnamed_file",
                content=content,
                content_type=file.content_type or "",
            )
        )
    return tuple(uploads)
