"""
Live channel implementations.

Both channel kinds carry the same envelope: {"event": <name>, "data": <payload>}.
- WebSocketChannel: one JSON text frame per event
- EventStreamChannel: queued, rendered by the SSE endpoint as `data: <json>\\n\\n`
"""

import asyncio
import json
import logging
from typing import Any, AsyncIterator, Optional

from fastapi import WebSocket

from src.domain.ports.live_channel import LiveChannel

logger = logging.getLogger(__name__)


def envelope(event: str, payload: dict[str, Any]) -> dict[str, Any]:
    return {"event": event, "data": payload}


def sse_frame(event: str, payload: dict[str, Any]) -> str:
    return f"data: {json.dumps(envelope(event, payload), default=str)}\n\n"


SSE_KEEPALIVE_FRAME = ": keepalive\n\n"


class WebSocketChannel(LiveChannel):
    kind = "websocket"

    def __init__(self, websocket: WebSocket):
        self._websocket = websocket

    async def send(self, event: str, payload: dict[str, Any]) -> None:
        await self._websocket.send_text(json.dumps(envelope(event, payload), default=str))

    async def close(self) -> None:
        await self._websocket.close()


class EventStreamChannel(LiveChannel):
    """Buffers events for one server-sent-events response."""

    kind = "event_stream"

    def __init__(self, max_queue: int = 256):
        self._queue: asyncio.Queue[Optional[str]] = asyncio.Queue(maxsize=max_queue)
        self._closed = False

    async def send(self, event: str, payload: dict[str, Any]) -> None:
        if self._closed:
            raise ConnectionError("event stream closed")
        # A full queue means the client stopped reading.
        self._queue.put_nowait(sse_frame(event, payload))

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        try:
            self._queue.put_nowait(None)
        except asyncio.QueueFull:
            pass

    @property
    def closed(self) -> bool:
        return self._closed

    async def frames(self, keepalive_seconds: float) -> AsyncIterator[str]:
        """Yield SSE frames until close(); keepalive comments fill idle gaps."""
        while True:
            try:
                frame = await asyncio.wait_for(self._queue.get(), timeout=keepalive_seconds)
            except asyncio.TimeoutError:
                # close() on a full queue cannot enqueue its end marker.
                if self._closed:
                    return
                yield SSE_KEEPALIVE_FRAME
                continue
            if frame is None:
                return
            yield frame
