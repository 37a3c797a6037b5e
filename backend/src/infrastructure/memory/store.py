"""
InMemoryStore - process-local tables for STORAGE_BACKEND=memory.

Holds threads, messages, notifications and the user directory as plain dicts.
Entities are copied on the way in and out, so callers never share mutable
state with the store (the same contract a database gives).
"""

import copy
from typing import Optional

from src.domain.entities.message import Message
from src.domain.entities.notification import Notification
from src.domain.entities.thread import Thread
from src.domain.entities.user import User, ROLE_USER
from src.domain.value_objects.user_id import UserId


class InMemoryStore:
    def __init__(self):
        self.threads: dict[str, Thread] = {}
        self.messages: dict[str, Message] = {}
        self.notifications: dict[str, Notification] = {}
        self.users: dict[str, User] = {}
        # Persistence failures can be simulated per table (tests).
        self.fail_writes: set[str] = set()

    def add_user(
        self,
        user_id: str,
        email: str,
        role: str = ROLE_USER,
        name: Optional[str] = None,
    ) -> User:
        user = User(id=UserId(user_id), email=email, role=role, name=name)
        self.users[user_id] = user
        return user

    def check_writable(self, table: str) -> None:
        if table in self.fail_writes:
            raise RuntimeError(f"write to {table} failed")

    @staticmethod
    def copy(entity):
        return copy.deepcopy(entity)
