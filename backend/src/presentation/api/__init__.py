"""
API Routers - FastAPI endpoint definitions.
"""

from src.presentation.api.threads import router as threads_router
from src.presentation.api.messages import router as messages_router
from src.presentation.api.notifications import router as notifications_router
from src.presentation.api.admin import router as admin_router
from src.presentation.api.admin import messages_router as admin_messages_router
from src.presentation.api.realtime import router as realtime_router
from src.presentation.api.metrics import router as metrics_router

__all__ = [
    "threads_router",
    "messages_router",
    "notifications_router",
    "admin_router",
    "admin_messages_router",
    "realtime_router",
    "metrics_router",
]
