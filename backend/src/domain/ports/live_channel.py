"""
Live Channel Port - one open push connection held by a user (socket tab, event stream).
"""

from abc import ABC, abstractmethod
from typing import Any


class LiveChannel(ABC):
    kind: str = "channel"

    @abstractmethod
    async def send(self, event: str, payload: dict[str, Any]) -> None:
        """Push one named event. Raises if the underlying connection is broken."""
        ...

    @abstractmethod
    async def close(self) -> None: ...
