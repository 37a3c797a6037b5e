"""Thread commands."""

from .create_thread import CreateThreadCommand, CreateThreadHandler, CreateThreadResult
from .add_message import AddMessageCommand, AddMessageHandler
from .toggle_thread_status import (
    ToggleThreadStatusCommand,
    ToggleThreadStatusHandler,
    AdminToggleThreadStatusHandler,
)

__all__ = [
    "CreateThreadCommand",
    "CreateThreadHandler",
    "CreateThreadResult",
    "AddMessageCommand",
    "AddMessageHandler",
    "ToggleThreadStatusCommand",
    "ToggleThreadStatusHandler",
    "AdminToggleThreadStatusHandler",
]
