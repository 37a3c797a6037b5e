"""
Connection Registry - which user currently holds which live push channels.

Lifecycle:
- One registry per server process, created by the DI container (Scope.APP)
- close_all() runs when the container closes (process shutdown)
- Never persisted: a restart starts from an empty registry and clients reconnect

A user may hold several channels at once (two browser tabs, a socket plus an
event stream). Channels are appended and removed by identity, so closing one
tab never affects delivery to the others.

All mutation happens on the event loop thread. deliver() iterates over a
snapshot of the user's list, so a register/unregister that interleaves with
an in-flight send does not disturb it.
"""

import logging
from typing import Any, Optional

from src.domain.ports.live_channel import LiveChannel
from src.observability.metrics import (
    MetricsErrorType,
    PushOutcome,
    channel_closed,
    channel_opened,
    increment_error,
    record_live_push,
)

logger = logging.getLogger(__name__)


class ConnectionRegistry:
    def __init__(self):
        self._channels: dict[str, list[LiveChannel]] = {}

    def register(self, user_id: str, channel: LiveChannel) -> None:
        """Add a channel for the user. Registering the same channel twice is a no-op."""
        user_channels = self._channels.setdefault(user_id, [])
        if any(existing is channel for existing in user_channels):
            return
        user_channels.append(channel)
        channel_opened(channel.kind)
        logger.info(
            f"[registry] {channel.kind} registered for user {user_id} "
            f"({len(user_channels)} open)"
        )

    def unregister(self, user_id: str, channel: LiveChannel) -> None:
        """Remove exactly this channel. Unknown channel or user is a no-op."""
        user_channels = self._channels.get(user_id)
        if not user_channels:
            return
        for index, existing in enumerate(user_channels):
            if existing is channel:
                del user_channels[index]
                channel_closed(channel.kind)
                logger.info(
                    f"[registry] {channel.kind} unregistered for user {user_id} "
                    f"({len(user_channels)} open)"
                )
                break
        if not user_channels:
            self._channels.pop(user_id, None)

    def channels(self, user_id: str) -> list[LiveChannel]:
        return list(self._channels.get(user_id, []))

    def connected_users(self) -> list[str]:
        return list(self._channels)

    async def deliver(self, user_id: str, event: str, payload: dict[str, Any]) -> int:
        """
        Push one event to every channel of the user.

        No channel registered is a silent no-op. A channel whose send raises is
        logged and dropped; the remaining channels still get the event.

        Returns:
            Number of channels the event was written to
        """
        delivered = 0
        for channel in self.channels(user_id):
            try:
                await channel.send(event, payload)
                delivered += 1
                record_live_push(event, PushOutcome.DELIVERED)
            except Exception as e:
                logger.warning(
                    f"[registry] push '{event}' to user {user_id} via {channel.kind} "
                    f"failed: {type(e).__name__}: {e}"
                )
                record_live_push(event, PushOutcome.FAILED)
                increment_error(MetricsErrorType.LIVE_PUSH_FAILED)
                await self._discard(user_id, channel)
        return delivered

    async def _discard(self, user_id: str, channel: LiveChannel) -> None:
        """Close the channel (its client then reconnects) and forget it."""
        try:
            await channel.close()
        except Exception as e:
            logger.debug(f"[registry] closing {channel.kind} for {user_id}: {e}")
        self.unregister(user_id, channel)

    async def close_all(self) -> None:
        for user_id in list(self._channels):
            for channel in self.channels(user_id):
                await self._discard(user_id, channel)
        logger.info("[registry] all live channels closed")


async def deliver_if_available(
    registry: Optional[ConnectionRegistry], user_id: str, event: str, payload: dict[str, Any]
) -> int:
    """Deliver through the registry; a missing registry behaves as an empty one."""
    if registry is None:
        logger.debug(f"[registry] no registry yet, '{event}' for {user_id} not pushed")
        return 0
    return await registry.deliver(user_id, event, payload)
