"""
Application services - delivery orchestration shared by the command handlers.

- notification_dispatcher.py -> persist, route, push, refresh unread count
- unread_count.py            -> recompute and push the unread badge
- routing.py                 -> notification type -> (event, payload)
- replay.py                  -> unread backlog for a freshly registered channel
- escalation.py              -> fire-and-forget e-mail
- attachments.py             -> upload message attachments
- links.py                   -> deep links into the frontend
- notices.py, thread_notifier.py -> thread activity to notifications and e-mail
"""

from src.application.services.routing import NotificationRouter, notification_to_wire
from src.application.services.unread_count import UnreadCountSynchronizer
from src.application.services.notification_dispatcher import NotificationDispatcher
from src.application.services.replay import NotificationReplayer
from src.application.services.escalation import EmailNotice, EscalationChannel
from src.application.services.attachments import AttachmentUpload, AttachmentUploader
from src.application.services.thread_notifier import ThreadNotifier

__all__ = [
    "NotificationRouter",
    "notification_to_wire",
    "UnreadCountSynchronizer",
    "NotificationDispatcher",
    "NotificationReplayer",
    "EmailNotice",
    "EscalationChannel",
    "AttachmentUpload",
    "AttachmentUploader",
    "ThreadNotifier",
]
