"""Admin: one message by id. Viewing does not change its read state."""

from dataclasses import dataclass

from src.application.common.interfaces import Query, QueryHandler
from src.domain.entities.message import Message
from src.domain.exceptions import EntityNotFoundError
from src.domain.ports.repositories import MessageRepository
from src.domain.value_objects.message_id import MessageId


@dataclass(frozen=True)
class GetAnyMessageQuery(Query[Message]):
    message_id: MessageId


class GetAnyMessageHandler(QueryHandler[Message]):
    def __init__(self, message_repository: MessageRepository):
        self._message_repository = message_repository

    async def execute(self, query: GetAnyMessageQuery) -> Message:
        message = await self._message_repository.get_by_id(query.message_id)
        if message is None:
            raise EntityNotFoundError("Message", query.message_id.value)
        return message
