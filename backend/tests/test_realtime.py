"""WebSocket and server-sent-events delivery."""

import asyncio

import pytest
from starlette.websockets import WebSocketDisconnect

from jwt_generation import generate_jwt_token
from src.config.settings import Config
from src.domain.entities.notification import NewMessage
from src.domain.value_objects import ThreadId, UserId
from src.infrastructure.realtime import (
    SSE_KEEPALIVE_FRAME,
    ConnectionRegistry,
    EventStreamChannel,
)


def registry_of(client, app):
    return client.portal.call(app.state.dishka_container.get, ConnectionRegistry)


def test_socket_without_token_is_closed(client, app):
    with pytest.raises(WebSocketDisconnect) as exc_info:
        with client.websocket_connect("/ws"):
            pass

    assert exc_info.value.code == 1008
    assert registry_of(client, app).connected_users() == []


def test_socket_with_bad_token_is_closed(client, app):
    with pytest.raises(WebSocketDisconnect) as exc_info:
        with client.websocket_connect("/ws?token=not-a-jwt"):
            pass

    assert exc_info.value.code == 1008
    assert registry_of(client, app).connected_users() == []


def test_socket_replays_backlog_then_receives_live_events(client, app, bob_headers):
    client.post(
        "/threads",
        data={"subject": "Earlier", "recipientId": "alice", "department": "tech", "content": "Hi"},
        headers=bob_headers,
    )
    token = generate_jwt_token(user_id="alice")

    with client.websocket_connect(f"/ws?token={token}") as ws:
        replayed = ws.receive_json()
        assert replayed["event"] == "notification"
        assert replayed["data"]["subject"] == "Earlier"
        assert replayed["data"]["isRead"] is False
        assert ws.receive_json() == {"event": "unreadCount", "data": {"count": 1}}
        assert registry_of(client, app).connected_users() == ["alice"]

        client.post(
            "/threads",
            data={"subject": "Later", "recipientId": "alice", "department": "tech", "content": "Hi"},
            headers=bob_headers,
        )

        live = ws.receive_json()
        assert live["event"] == "notification"
        assert live["data"]["type"] == "new_message"
        assert live["data"]["subject"] == "Later"
        assert ws.receive_json() == {"event": "unreadCount", "data": {"count": 2}}

    assert registry_of(client, app).channels("alice") == []


def test_socket_accepts_bearer_header(client):
    headers = {"Authorization": f"Bearer {generate_jwt_token(user_id='bob')}"}

    with client.websocket_connect("/ws", headers=headers) as ws:
        assert ws.receive_json() == {"event": "unreadCount", "data": {"count": 0}}


def test_stream_without_token_is_unauthorized(client):
    response = client.get("/notifications/stream")

    assert response.status_code == 401
    assert "error" in response.json()


@pytest.mark.asyncio
async def test_event_stream_frames():
    channel = EventStreamChannel()
    await channel.send("unreadCount", {"count": 3})

    frames = channel.frames(keepalive_seconds=0.01)
    assert await frames.__anext__() == 'data: {"event": "unreadCount", "data": {"count": 3}}\n\n'
    assert await frames.__anext__() == SSE_KEEPALIVE_FRAME

    await channel.close()
    with pytest.raises(StopAsyncIteration):
        await frames.__anext__()


@pytest.mark.asyncio
async def test_closed_event_stream_rejects_sends():
    channel = EventStreamChannel()
    await channel.close()

    with pytest.raises(ConnectionError):
        await channel.send("notification", {"id": "n-1"})
    assert channel.closed


@pytest.mark.asyncio
async def test_full_event_stream_is_dropped_by_registry():
    registry = ConnectionRegistry()
    channel = EventStreamChannel(max_queue=1)
    registry.register("alice", channel)

    assert await registry.deliver("alice", "unreadCount", {"count": 1}) == 1
    assert await registry.deliver("alice", "unreadCount", {"count": 2}) == 0
    assert registry.connected_users() == []
    assert channel.closed

    frames = [frame async for frame in channel.frames(keepalive_seconds=0.01)]
    assert frames == ['data: {"event": "unreadCount", "data": {"count": 1}}\n\n']


class StreamClient:
    """
    Drives one GET /notifications/stream straight through the ASGI app.

    TestClient waits for the whole body, which an event stream never finishes,
    so the test keeps the receive side itself and can hang up at any time.
    """

    def __init__(self, app, token):
        self.app = app
        self.scope = {
            "type": "http",
            "asgi": {"version": "3.0"},
            "http_version": "1.1",
            "method": "GET",
            "scheme": "http",
            "path": "/notifications/stream",
            "raw_path": b"/notifications/stream",
            "root_path": "",
            "query_string": f"token={token}".encode(),
            "headers": [(b"host", b"testserver")],
            "client": ("testclient", 50000),
            "server": ("testserver", 80),
        }
        self.messages = []
        self._request_sent = False
        self._hung_up = asyncio.Event()

    async def receive(self):
        if self._hung_up.is_set():
            return {"type": "http.disconnect"}
        if not self._request_sent:
            self._request_sent = True
            return {"type": "http.request", "body": b"", "more_body": False}
        await self._hung_up.wait()
        return {"type": "http.disconnect"}

    async def send(self, message):
        self.messages.append(message)

    def start(self):
        return asyncio.create_task(self.app(self.scope, self.receive, self.send))

    def hang_up(self):
        self._hung_up.set()

    @property
    def status(self):
        starts = [m for m in self.messages if m["type"] == "http.response.start"]
        return starts[0]["status"] if starts else None

    @property
    def body(self):
        return b"".join(
            m.get("body", b"") for m in self.messages if m["type"] == "http.response.body"
        ).decode()

    async def wait_for(self, text, timeout=2.0):
        deadline = asyncio.get_running_loop().time() + timeout
        while text not in self.body:
            assert asyncio.get_running_loop().time() < deadline, f"no {text!r} in {self.body!r}"
            await asyncio.sleep(0.01)


@pytest.mark.asyncio
async def test_event_stream_replays_then_unregisters_on_hang_up(app, engine, monkeypatch):
    monkeypatch.setattr(Config, "SSE_KEEPALIVE_SECONDS", 0.05)
    await engine.dispatcher.dispatch(
        UserId("alice"),
        'New thread "Refund"',
        NewMessage(thread_id=ThreadId.new(), subject="Refund"),
    )
    registry = await app.state.dishka_container.get(ConnectionRegistry)
    stream = StreamClient(app, generate_jwt_token(user_id="alice"))

    task = stream.start()
    await stream.wait_for('"unreadCount", "data": {"count": 1}')

    assert stream.status == 200
    first, second = stream.body.split("\n\n")[:2]
    assert first.startswith('data: {"event": "notification"')
    assert '"subject": "Refund"' in first
    assert second == 'data: {"event": "unreadCount", "data": {"count": 1}}'
    assert registry.connected_users() == ["alice"]

    await registry.deliver("alice", "unreadCount", {"count": 7})
    await stream.wait_for('{"count": 7}')

    stream.hang_up()
    await asyncio.wait_for(task, timeout=2.0)

    assert registry.connected_users() == []
