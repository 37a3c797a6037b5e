"""Admin: every thread, paginated by newest activity."""

import math
from dataclasses import dataclass

from src.application.common.interfaces import Query, QueryHandler
from src.config.settings import Config
from src.domain.entities.thread import Thread
from src.domain.ports.repositories import ThreadRepository


@dataclass
class ThreadPage:
    threads: list[Thread]
    current_page: int
    total_pages: int
    total_count: int


@dataclass(frozen=True)
class ListAllThreadsQuery(Query[ThreadPage]):
    page: int = 1
    limit: int = Config.ADMIN_THREADS_PAGE_SIZE


class ListAllThreadsHandler(QueryHandler[ThreadPage]):
    def __init__(self, thread_repository: ThreadRepository):
        self._thread_repository = thread_repository

    async def execute(self, query: ListAllThreadsQuery) -> ThreadPage:
        page = max(query.page, 1)
        limit = max(query.limit, 1)
        total = await self._thread_repository.count_all()
        threads = await self._thread_repository.get_all(skip=(page - 1) * limit, limit=limit)
        return ThreadPage(
            threads=threads,
            current_page=page,
            total_pages=math.ceil(total / limit),
            total_count=total,
        )
