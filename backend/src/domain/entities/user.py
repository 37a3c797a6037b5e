"""
User Entity - An account known to the external account store.

Read-only here: used to pick thread links and e-mail recipients.
"""

from dataclasses import dataclass
from typing import Optional
from src.domain.value_objects.user_id import UserId

ROLE_USER = "user"
ROLE_ADMIN = "admin"


@dataclass
class User:
    id: UserId
    email: str
    role: str = ROLE_USER
    name: Optional[str] = None

    def __post_init__(self):
        valid_roles = [ROLE_USER, ROLE_ADMIN]
        if self.role not in valid_roles:
            raise ValueError(
                f"Invalid role: {self.role}. Must be one of {valid_roles}."
            )

    @property
    def is_admin(self) -> bool:
        return self.role == ROLE_ADMIN
