"""
Infrastructure Layer - Technical implementations of domain ports.

This layer contains:
- persistence/: PostgreSQL implementations (Prisma repositories)
- memory/: Process-local store and repositories (dev/tests)
- realtime/: Connection registry and live channel kinds
- mail/: SMTP and in-memory mailers, e-mail templates
- storage/: Attachment file storage (FileStorageService)
"""

from src.infrastructure.storage import FileStorageService

__all__ = [
    "FileStorageService",
]
