"""
File Storage Port - external storage for message attachments.
"""

from abc import ABC, abstractmethod


class FileStorage(ABC):
    @abstractmethod
    async def upload(self, filename: str, content: bytes, content_type: str = "") -> str:
        """Store one file and return its public URL."""
        ...
