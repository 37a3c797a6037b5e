"""List Messages Query - messages the user sent or received, newest first."""

from dataclasses import dataclass

from src.application.common.interfaces import Query, QueryHandler
from src.domain.entities.message import Message
from src.domain.ports.repositories import MessageRepository
from src.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class ListMessagesQuery(Query[list[Message]]):
    user_id: UserId
    limit: int = 100


class ListMessagesHandler(QueryHandler[list[Message]]):
    def __init__(self, message_repository: MessageRepository):
        self._message_repository = message_repository

    async def execute(self, query: ListMessagesQuery) -> list[Message]:
        return await self._message_repository.get_by_user(query.user_id, query.limit)
