"""
Thread Entity - A support conversation between participants, scoped to a department.

State machine: Open <-> Closed through toggle_status(). Messages are accepted
in both states.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from src.domain.exceptions.validation_error import DomainValidationError
from src.domain.value_objects.department import Department
from src.domain.value_objects.message_id import MessageId
from src.domain.value_objects.thread_id import ThreadId
from src.domain.value_objects.user_id import UserId


def parse_department(value: Optional[str]) -> Department:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise DomainValidationError("Department is required", field="department")
    try:
        return Department(value)
    except ValueError:
        raise DomainValidationError(
            f"Invalid department: {value}. Must be one of {Department.values()}",
            field="department",
        )


@dataclass
class Thread:
    id: ThreadId
    subject: str
    participants: list[UserId]
    department: Department
    created_at: datetime
    last_message_date: datetime
    is_open: bool = True
    last_message_id: Optional[MessageId] = None

    @classmethod
    def create(
        cls,
        subject: str,
        initiator_id: UserId,
        recipient_id: UserId,
        department: Department,
    ) -> Thread:
        """Factory method to open a new thread between two distinct users."""
        if not subject or not subject.strip():
            raise DomainValidationError("Subject is required", field="subject")
        if initiator_id == recipient_id:
            raise DomainValidationError(
                "Thread recipient must differ from the initiator", field="recipient_id"
            )
        now = datetime.now(timezone.utc)
        return cls(
            id=ThreadId.new(),
            subject=subject.strip(),
            participants=[initiator_id, recipient_id],
            department=department,
            created_at=now,
            last_message_date=now,
        )

    def has_participant(self, user_id: UserId) -> bool:
        return user_id in self.participants

    def other_participants(self, user_id: UserId) -> list[UserId]:
        """Distinct participants other than user_id, in participant order."""
        others: list[UserId] = []
        for participant in self.participants:
            if participant != user_id and participant not in others:
                others.append(participant)
        return others

    def toggle_status(self) -> bool:
        self.is_open = not self.is_open
        return self.is_open

    def record_message(self, message_id: MessageId, created_at: datetime) -> None:
        """Point the thread at its newest message. last_message_date never moves back."""
        self.last_message_id = message_id
        if created_at > self.last_message_date:
            self.last_message_date = created_at
