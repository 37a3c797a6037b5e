"""Thread queries."""

from .list_threads import ListThreadsQuery, ListThreadsHandler
from .get_thread import GetThreadQuery, GetThreadHandler, ThreadDetail

__all__ = [
    "ListThreadsQuery",
    "ListThreadsHandler",
    "GetThreadQuery",
    "GetThreadHandler",
    "ThreadDetail",
]
