"""
ThreadId Value Object - UUID wrapper for thread identity.
"""

from __future__ import annotations
from dataclasses import dataclass
from uuid import UUID, uuid4


@dataclass(frozen=True)
class ThreadId:
    value: str  # thread_id, presented as UUID string

    def __post_init__(self):
        if not self.value or not self._is_valid_uuid(self.value):
            raise ValueError(f"Invalid thread ID (UUID): {self.value}")

    def _is_valid_uuid(self, value: str) -> bool:
        """Check if string is a valid UUID."""
        try:
            UUID(value)
            return True
        except ValueError:
            return False

    @classmethod
    def new(cls) -> ThreadId:
        return cls(str(uuid4()))

    def __str__(self) -> str:
        return self.value
