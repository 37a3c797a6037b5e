"""Upload of message attachments through the FileStorage port."""

import logging
from dataclasses import dataclass
from typing import Iterable

from src.domain.ports.file_storage import FileStorage
from src.domain.value_objects.attachment import Attachment
from src.observability.metrics import MetricsErrorType, increment_error

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttachmentUpload:
    filename: str
    content: bytes
    content_type: str = ""


class AttachmentUploader:
    def __init__(self, file_storage: FileStorage):
        self._file_storage = file_storage

    async def upload_all(self, uploads: Iterable[AttachmentUpload]) -> list[Attachment]:
        """Upload one by one, in order. A failed upload is logged and left out."""
        attachments: list[Attachment] = []
        for upload in uploads:
            try:
                url = await self._file_storage.upload(
                    upload.filename, upload.content, upload.content_type
                )
                attachments.append(Attachment(filename=upload.filename, url=url))
            except Exception as e:
                logger.warning(f"[attachments] upload of {upload.filename} failed: {e}")
                increment_error(MetricsErrorType.ATTACHMENT_UPLOAD_FAILED)
        return attachments
