"""Deep links into the frontend placed in notifications and e-mails."""

from typing import Optional

from src.config.settings import Config
from src.domain.entities.user import User
from src.domain.value_objects.thread_id import ThreadId


def thread_url(thread_id: ThreadId, recipient: Optional[User], base_url: Optional[str] = None) -> str:
    """Admins open threads in the admin panel, everyone else in their dashboard."""
    base = (base_url or Config.FRONTEND_URL).rstrip("/")
    if recipient is not None and recipient.is_admin:
        return f"{base}/admin/threads/{thread_id.value}"
    return f"{base}/dashboard/messages/{thread_id.value}"
