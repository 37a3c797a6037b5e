"""Message commands."""

from .read_message import ReadMessageCommand, ReadMessageHandler
from .add_attachment import AddAttachmentCommand, AddAttachmentHandler
from .delete_message import DeleteMessageCommand, DeleteMessageHandler

__all__ = [
    "ReadMessageCommand",
    "ReadMessageHandler",
    "AddAttachmentCommand",
    "AddAttachmentHandler",
    "DeleteMessageCommand",
    "DeleteMessageHandler",
]
