"""
PORTS - Interfaces that infrastructure implements

A "port" is an abstract interface that defines WHAT the domain needs,
without specifying HOW it's done.

Subfolders:
- repositories/  -> Data persistence interfaces (threads, messages, notifications, users)
- (root files)   -> Other external service interfaces

Root ports:
- live_channel.py -> one open push connection (WebSocket, event stream)
- mailer.py       -> outbound e-mail
- file_storage.py -> attachment storage
"""

from src.domain.ports.live_channel import LiveChannel
from src.domain.ports.mailer import Mailer
from src.domain.ports.file_storage import FileStorage

__all__ = [
    "LiveChannel",
    "Mailer",
    "FileStorage",
]
