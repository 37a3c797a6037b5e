"""Admin: every message across threads, newest first."""

import math
from dataclasses import dataclass

from src.application.common.interfaces import Query, QueryHandler
from src.config.settings import Config
from src.domain.entities.message import Message
from src.domain.ports.repositories import MessageRepository


@dataclass
class MessagePage:
    messages: list[Message]
    current_page: int
    total_pages: int
    total_count: int


@dataclass(frozen=True)
class ListAllMessagesQuery(Query[MessagePage]):
    page: int = 1
    limit: int = Config.ADMIN_MESSAGES_PAGE_SIZE


class ListAllMessagesHandler(QueryHandler[MessagePage]):
    def __init__(self, message_repository: MessageRepository):
        self._message_repository = message_repository

    async def execute(self, query: ListAllMessagesQuery) -> MessagePage:
        page = max(query.page, 1)
        limit = max(query.limit, 1)
        total = await self._message_repository.count_all()
        messages = await self._message_repository.get_all(skip=(page - 1) * limit, limit=limit)
        return MessagePage(
            messages=messages,
            current_page=page,
            total_pages=math.ceil(total / limit),
            total_count=total,
        )
