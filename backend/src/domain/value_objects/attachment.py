"""
Attachment Value Object - a stored file referenced by a message or notification.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Attachment:
    filename: str
    url: str

    def __post_init__(self):
        if not self.filename:
            raise ValueError("Attachment filename cannot be empty")
        if not self.url:
            raise ValueError("Attachment url cannot be empty")

    def to_dict(self) -> dict[str, str]:
        return {"filename": self.filename, "url": self.url}
