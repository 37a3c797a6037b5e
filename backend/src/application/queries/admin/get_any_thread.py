"""Admin: one thread with its messages, regardless of participation."""

from dataclasses import dataclass

from src.application.common.interfaces import Query, QueryHandler
from src.application.queries.threads.get_thread import ThreadDetail
from src.config.settings import Config
from src.domain.exceptions import EntityNotFoundError
from src.domain.ports.repositories import MessageRepository, ThreadRepository
from src.domain.value_objects.thread_id import ThreadId


@dataclass(frozen=True)
class GetAnyThreadQuery(Query[ThreadDetail]):
    thread_id: ThreadId
    limit: int = Config.THREAD_MESSAGE_LIMIT


class GetAnyThreadHandler(QueryHandler[ThreadDetail]):
    def __init__(
        self,
        thread_repository: ThreadRepository,
        message_repository: MessageRepository,
    ):
        self._thread_repository = thread_repository
        self._message_repository = message_repository

    async def execute(self, query: GetAnyThreadQuery) -> ThreadDetail:
        thread = await self._thread_repository.get_by_id(query.thread_id)
        if thread is None:
            raise EntityNotFoundError("Thread", query.thread_id.value)
        messages = await self._message_repository.get_by_thread(thread.id, query.limit)
        return ThreadDetail(thread=thread, messages=messages)
