"""
Realtime delivery - the process-local connection registry and its channel kinds.
"""

from src.infrastructure.realtime.connection_registry import (
    ConnectionRegistry,
    deliver_if_available,
)
from src.infrastructure.realtime.channels import (
    WebSocketChannel,
    EventStreamChannel,
    sse_frame,
    SSE_KEEPALIVE_FRAME,
)

__all__ = [
    "ConnectionRegistry",
    "deliver_if_available",
    "WebSocketChannel",
    "EventStreamChannel",
    "sse_frame",
    "SSE_KEEPALIVE_FRAME",
]
