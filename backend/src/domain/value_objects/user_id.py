"""
UserId Value Object

User ids are issued by the external account store, so only emptiness is
checked here (no UUID format is imposed).
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserId:
    value: str  # user_id

    def __post_init__(self):
        if not self.value or not str(self.value).strip():
            raise ValueError("UserId cannot be empty")

    def __str__(self) -> str:
        return self.value
