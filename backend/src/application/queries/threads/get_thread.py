"""
GetThread Query - one thread with its messages (oldest first).

Participants only. The admin panel reads any thread through
queries/admin/get_any_thread.py.
"""

from dataclasses import dataclass

from src.application.common.interfaces import Query, QueryHandler
from src.config.settings import Config
from src.domain.entities.message import Message
from src.domain.entities.thread import Thread
from src.domain.exceptions import AccessDeniedError, EntityNotFoundError
from src.domain.ports.repositories import MessageRepository, ThreadRepository
from src.domain.value_objects.thread_id import ThreadId
from src.domain.value_objects.user_id import UserId


@dataclass
class ThreadDetail:
    thread: Thread
    messages: list[Message]


@dataclass(frozen=True)
class GetThreadQuery(Query[ThreadDetail]):
    thread_id: ThreadId
    user_id: UserId
    limit: int = Config.THREAD_MESSAGE_LIMIT


class GetThreadHandler(QueryHandler[ThreadDetail]):
    def __init__(
        self,
        thread_repository: ThreadRepository,
        message_repository: MessageRepository,
    ):
        self._thread_repository = thread_repository
        self._message_repository = message_repository

    async def execute(self, query: GetThreadQuery) -> ThreadDetail:
        thread = await self._thread_repository.get_by_id(query.thread_id)
        if thread is None:
            raise EntityNotFoundError("Thread", query.thread_id.value)
        if not thread.has_participant(query.user_id):
            raise AccessDeniedError("You are not a participant of this thread")

        messages = await self._message_repository.get_by_thread(thread.id, query.limit)
        return ThreadDetail(thread=thread, messages=messages)
