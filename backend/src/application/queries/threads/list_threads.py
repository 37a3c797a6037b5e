"""List Threads Query - the caller's threads, newest activity first."""

from dataclasses import dataclass

from src.application.common.interfaces import Query, QueryHandler
from src.domain.entities.thread import Thread
from src.domain.ports.repositories import ThreadRepository
from src.domain.value_objects.user_id import UserId


@dataclass(frozen=True)
class ListThreadsQuery(Query[list[Thread]]):
    user_id: UserId


class ListThreadsHandler(QueryHandler[list[Thread]]):
    def __init__(self, thread_repository: ThreadRepository):
        self._thread_repository = thread_repository

    async def execute(self, query: ListThreadsQuery) -> list[Thread]:
        return await self._thread_repository.get_by_participant(query.user_id)
