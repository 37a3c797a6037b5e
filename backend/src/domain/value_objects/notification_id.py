"""
NotificationId Value Object - UUID wrapper for notification identity.
"""

from __future__ import annotations
from dataclasses import dataclass
from uuid import UUID, uuid4


@dataclass(frozen=True)
class NotificationId:
    value: str

    def __post_init__(self):
        if not self.value:
            raise ValueError("Notification ID cannot be empty")
        UUID(self.value)

    @classmethod
    def new(cls) -> NotificationId:
        return cls(str(uuid4()))

    def __str__(self) -> str:
        return self.value
