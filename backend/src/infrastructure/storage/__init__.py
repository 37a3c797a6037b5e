"""Attachment storage implementations."""

from src.infrastructure.storage.file_storage_service import FileStorageService

__all__ = ["FileStorageService"]
