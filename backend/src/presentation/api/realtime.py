"""
Live delivery endpoints.

- GET /ws?token=...                   WebSocket; JSON frames {"event", "data"}
- GET /notifications/stream?token=... Server-sent events fallback, same envelope

The token may also come as `Authorization: Bearer`. It is verified before
anything is accepted or registered: a bad socket handshake is closed with
1008, a bad stream request gets 401 and no stream.

On registration the unread backlog is replayed to the new channel only.
"""

from logging import getLogger
from typing import Optional
from fastapi import APIRouter, HTTPException, Request, WebSocket, status
from fastapi.responses import StreamingResponse
from dishka.integrations.fastapi import FromDishka, inject
from src.application.services.replay import NotificationReplayer
from src.config.settings import Config
from src.domain.exceptions import AuthenticationError
from src.infrastructure.realtime import (
    ConnectionRegistry,
    EventStreamChannel,
    WebSocketChannel,
)
from src.presentation.dependencies.auth import verify_access_token

logger = getLogger(__name__)

router = APIRouter(tags=["realtime"])


def _bearer(headers) -> Optional[str]:
    auth_header = headers.get("authorization", "")
    if auth_header.lower().startswith("bearer "):
        return auth_header.split(" ", 1)[1].strip()
    return None


@router.websocket("/ws")
async def live_socket(websocket: WebSocket, token: Optional[str] = None):
    try:
        user = verify_access_token(token or _bearer(websocket.headers))
    except AuthenticationError as e:
        logger.info(f"[ws] handshake rejected: {e}")
        await websocket.close(code=status.WS_1008_POLICY_VIOLATION)
        return

    await websocket.accept()
    container = websocket.app.state.dishka_container
    registry = await container.get(ConnectionRegistry)
    channel = WebSocketChannel(websocket)
    registry.register(user.id.value, channel)
    try:
        async with container() as request_container:
            replayer = await request_container.get(NotificationReplayer)
            await replayer.replay(user.id, channel)

        # Clients only listen; incoming frames are read to notice the disconnect.
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                break
    finally:
        registry.unregister(user.id.value, channel)


@router.get("/notifications/stream")
@inject
async def notification_stream(
    request: Request,
    registry: FromDishka[ConnectionRegistry],
    replayer: FromDishka[NotificationReplayer],
    token: Optional[str] = None,
):
    try:
        user = verify_access_token(token or _bearer(request.headers))
    except AuthenticationError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e)) from e

    channel = EventStreamChannel()
    registry.register(user.id.value, channel)
    await replayer.replay(user.id, channel)

    async def frames():
        try:
            async for frame in channel.frames(Config.SSE_KEEPALIVE_SECONDS):
                if await request.is_disconnected():
                    break
                yield frame
        finally:
            registry.unregister(user.id.value, channel)
            await channel.close()

    return StreamingResponse(
        frames(),
        media_type="text/event-stream",
        headers={"Cache-Control": "no-cache", "X-Accel-Buffering": "no"},
    )
