"""
User Directory Port - read access to the external account store.
"""

from abc import ABC, abstractmethod
from typing import Optional
from src.domain.entities.user import User
from src.domain.value_objects.user_id import UserId


class UserDirectory(ABC):
    @abstractmethod
    async def get_by_id(self, user_id: UserId) -> Optional[User]: ...

    @abstractmethod
    async def get_many(self, user_ids: list[UserId]) -> dict[UserId, User]: ...
