import os
import sys
from types import SimpleNamespace

# Test settings must be in place before src.config.settings is imported.
os.environ["APP_ENV"] = "testing"
os.environ["STORAGE_BACKEND"] = "memory"
os.environ["MAIL_BACKEND"] = "memory"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["JWT_ISSUER"] = ""
os.environ["JWT_AUDIENCE"] = ""
os.environ["FRONTEND_URL"] = "http://frontend.test"

# Add backend directory to path
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__) + "/.."))

import pytest
from fastapi.testclient import TestClient

from jwt_generation import generate_jwt_token
from src.application.commands.messages import (
    AddAttachmentHandler,
    DeleteMessageHandler,
    ReadMessageHandler,
)
from src.application.commands.notifications import (
    MarkAllNotificationsReadHandler,
    MarkNotificationReadHandler,
    MarkOrderNotificationsReadHandler,
    ToggleNotificationHandler,
)
from src.application.commands.threads import (
    AddMessageHandler,
    AdminToggleThreadStatusHandler,
    CreateThreadHandler,
    ToggleThreadStatusHandler,
)
from src.application.services import (
    AttachmentUploader,
    EscalationChannel,
    NotificationDispatcher,
    NotificationReplayer,
    NotificationRouter,
    ThreadNotifier,
    UnreadCountSynchronizer,
)
from src.domain.entities.user import ROLE_ADMIN
from src.domain.ports import FileStorage, LiveChannel
from src.fastapi_app import create_fastapi_app
from src.infrastructure.mail import InMemoryMailer
from src.infrastructure.memory import (
    InMemoryMessageRepository,
    InMemoryNotificationRepository,
    InMemoryStore,
    InMemoryThreadRepository,
    InMemoryUserDirectory,
)
from src.infrastructure.realtime import ConnectionRegistry
from src.setup.ioc.container import build_container


# ==================== TEST DOUBLES ====================


class RecordingChannel(LiveChannel):
    """Live channel that keeps every (event, payload) it is sent."""

    kind = "recording"

    def __init__(self):
        self.sent = []
        self.closed = False

    async def send(self, event, payload):
        self.sent.append((event, payload))

    async def close(self):
        self.closed = True

    def events(self, name):
        return [payload for event, payload in self.sent if event == name]


class BrokenChannel(RecordingChannel):
    """Live channel whose connection is gone."""

    async def send(self, event, payload):
        raise ConnectionError("socket closed")


class FailingMailer(InMemoryMailer):
    async def send(self, to, subject, html):
        raise RuntimeError("SMTP server unreachable")


class RecordingStorage(FileStorage):
    """Attachment storage that fails for file names listed in `fail`."""

    def __init__(self, fail=()):
        self.fail = set(fail)
        self.uploaded = []

    async def upload(self, filename, content, content_type=""):
        if filename in self.fail:
            raise IOError(f"upload of {filename} failed")
        self.uploaded.append(filename)
        return f"https://files.test/attachments/{filename}"


# ==================== FIXTURES ====================


@pytest.fixture()
def store():
    store = InMemoryStore()
    store.add_user("alice", "alice@example.com", name="Alice")
    store.add_user("bob", "bob@example.com", name="Bob")
    store.add_user("admin-1", "admin@example.com", role=ROLE_ADMIN, name="Support")
    return store


@pytest.fixture()
def mailer():
    return InMemoryMailer()


@pytest.fixture()
def storage():
    return RecordingStorage()


@pytest.fixture()
def registry():
    return ConnectionRegistry()


def build_engine(store, mailer, storage, registry, router=None):
    """Wire the services by hand, the way the DI container does."""
    threads = InMemoryThreadRepository(store)
    messages = InMemoryMessageRepository(store)
    notifications = InMemoryNotificationRepository(store)
    users = InMemoryUserDirectory(store)
    unread = UnreadCountSynchronizer(notifications, registry)
    dispatcher = NotificationDispatcher(
        notification_repository=notifications,
        unread_count=unread,
        router=router or NotificationRouter("spread", "dispatch"),
        registry=registry,
    )
    escalation = EscalationChannel(mailer)
    notifier = ThreadNotifier(dispatcher, escalation, users)
    uploader = AttachmentUploader(storage)
    return SimpleNamespace(
        store=store,
        registry=registry,
        mailer=mailer,
        threads=threads,
        messages=messages,
        notifications=notifications,
        unread=unread,
        dispatcher=dispatcher,
        escalation=escalation,
        replayer=NotificationReplayer(notifications, limit=20),
        create_thread=CreateThreadHandler(threads, messages, users, uploader, notifier),
        add_message=AddMessageHandler(threads, messages, uploader, notifier),
        toggle_status=ToggleThreadStatusHandler(threads, notifier),
        admin_toggle_status=AdminToggleThreadStatusHandler(threads, notifier),
        read_message=ReadMessageHandler(messages),
        add_attachment=AddAttachmentHandler(messages, uploader),
        delete_message=DeleteMessageHandler(messages, threads),
        toggle_notification=ToggleNotificationHandler(notifications, unread),
        mark_read=MarkNotificationReadHandler(notifications, unread),
        mark_all_read=MarkAllNotificationsReadHandler(notifications, unread),
        mark_order_read=MarkOrderNotificationsReadHandler(notifications, unread),
    )


@pytest.fixture()
def engine(store, mailer, storage, registry):
    return build_engine(store, mailer, storage, registry)


@pytest.fixture()
def app(store, mailer, storage):
    """Create and configure a new FastAPI app instance for each test."""
    container = build_container(mailer=mailer, file_storage=storage, store=store)
    return create_fastapi_app(container)


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app, with lifespan (one event loop per test)."""
    with TestClient(app) as client:
        yield client


def _auth(user_id, role="user"):
    return {"Authorization": f"Bearer {generate_jwt_token(user_id=user_id, role=role)}"}


@pytest.fixture()
def alice_headers():
    return _auth("alice")


@pytest.fixture()
def bob_headers():
    return _auth("bob")


@pytest.fixture()
def admin_headers():
    return _auth("admin-1", role=ROLE_ADMIN)
