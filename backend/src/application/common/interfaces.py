"""
Base interfaces for the command/query split.

Usage:
    @dataclass(frozen=True)
    class ToggleThreadStatusCommand(Command[Thread]):
        thread_id: ThreadId
        actor_id: UserId
        actor_role: str

    class ToggleThreadStatusHandler(CommandHandler[Thread]):
        def __init__(self, thread_repository: ThreadRepository, notifier: ThreadNotifier):
            self.thread_repository = thread_repository
            self.notifier = notifier

        async def execute(self, command: ToggleThreadStatusCommand) -> Thread:
            thread = await self.thread_repository.get_by_id(command.thread_id)
            thread.toggle_status()
            await self.thread_repository.save(thread)
            return thread

Handlers are request-scoped in the DI container; they hold their
collaborators and expose a single `execute`.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class Command(ABC, Generic[T]):
    """Base class for operations that change state"""

    pass


class CommandHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, command: Command[T]) -> T:
        """Apply the command and return its result"""
        ...


class Query(ABC, Generic[T]):
    """Base class for read-only operations"""

    pass


class QueryHandler(ABC, Generic[T]):
    @abstractmethod
    async def execute(self, query: Query[T]) -> T:
        """Run the query and return its result"""
        ...
