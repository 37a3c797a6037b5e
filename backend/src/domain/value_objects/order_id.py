"""
OrderId Value Object - reference into the external order subsystem.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class OrderId:
    value: str

    def __post_init__(self):
        if not self.value or not str(self.value).strip():
            raise ValueError("OrderId cannot be empty")

    def __str__(self) -> str:
        return self.value
