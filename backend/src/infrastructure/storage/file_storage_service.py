"""
FileStorageService - local-disk implementation of the FileStorage port.

Attachments are written under {upload_base}/attachments/ with a timestamp
prefix and served from {public_base_url}/attachments/<name>. Disk writes are
synchronous, so upload() runs them off the event loop.
"""

import asyncio
import os
import re
import logging
from datetime import datetime
from typing import Optional
from urllib.parse import quote

from src.config.settings import Config
from src.domain.ports.file_storage import FileStorage

logger = logging.getLogger(__name__)


class FileStorageService(FileStorage):
    CATEGORY_ATTACHMENTS = "attachments"

    def __init__(
        self,
        upload_base: Optional[str] = None,
        public_base_url: Optional[str] = None,
        max_upload_mb: Optional[float] = None,
    ):
        """
        Args:
            upload_base: Base directory for uploads (default: Config.UPLOAD_BASE)
            public_base_url: URL prefix the upload directory is served from
            max_upload_mb: Size limit per file (default: Config.MAX_UPLOAD_MB)
        """
        self.upload_base = upload_base or Config.UPLOAD_BASE
        self.public_base_url = (public_base_url or Config.PUBLIC_FILES_URL).rstrip("/")
        self.max_bytes = int((max_upload_mb or Config.MAX_UPLOAD_MB) * 1024 * 1024)

    async def upload(self, filename: str, content: bytes, content_type: str = "") -> str:
        if len(content) > self.max_bytes:
            raise ValueError(
                f"Attachment {filename} exceeds {self.max_bytes // (1024 * 1024)} MB"
            )
        directory = os.path.join(self.upload_base, self.CATEGORY_ATTACHMENTS)
        stored_name = await asyncio.to_thread(self.save_file, content, directory, filename)
        return f"{self.public_base_url}/{self.CATEGORY_ATTACHMENTS}/{quote(stored_name)}"

    def save_file(self, content: bytes, directory: str, filename: str) -> str:
        """
        Save file content to disk.

        Returns:
            Stored file name (sanitized, timestamp-prefixed)
        """
        os.makedirs(directory, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S%f")
        safe_filename = f"{timestamp}_{self._sanitize_filename(filename)}"
        file_path = os.path.join(directory, safe_filename)

        with open(file_path, "wb") as f:
            f.write(content)

        logger.debug(f"[FileStorage] Saved file: {file_path} ({len(content)} bytes)")
        return safe_filename

    def _sanitize_filename(self, filename: str) -> str:
        # Replace unsafe characters with underscore
        safe = re.sub(r"[^\w\-_\. ]", "_", os.path.basename(filename or ""))
        safe = safe.strip()
        if not safe:
            safe = "unnamed_file"
        return safe
