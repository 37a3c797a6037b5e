"""
Mailer Port - outbound e-mail transport used by the escalation channel.
"""

from abc import ABC, abstractmethod


class Mailer(ABC):
    @abstractmethod
    async def send(self, to: str, subject: str, html: str) -> None:
        """Send one HTML e-mail. Raises on any transport failure."""
        ...
