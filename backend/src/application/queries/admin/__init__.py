"""Admin panel queries. Callers are checked for the admin role at the router."""

from .list_all_threads import ListAllThreadsQuery, ListAllThreadsHandler, ThreadPage
from .get_any_thread import GetAnyThreadQuery, GetAnyThreadHandler
from .list_all_messages import ListAllMessagesQuery, ListAllMessagesHandler, MessagePage
from .get_any_message import GetAnyMessageQuery, GetAnyMessageHandler

__all__ = [
    "ListAllThreadsQuery",
    "ListAllThreadsHandler",
    "ThreadPage",
    "GetAnyThreadQuery",
    "GetAnyThreadHandler",
    "ListAllMessagesQuery",
    "ListAllMessagesHandler",
    "MessagePage",
    "GetAnyMessageQuery",
    "GetAnyMessageHandler",
]
