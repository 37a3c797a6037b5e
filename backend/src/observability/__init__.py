"""Observability package for the Threadline messaging backend."""

from src.observability.metrics import (
    channel_opened,
    channel_closed,
    observe_request_latency,
    record_live_push,
    record_email,
    record_notification_dispatched,
    increment_error,
    get_metrics_content,
    MetricsErrorType,
    PushOutcome,
)

__all__ = [
    "channel_opened",
    "channel_closed",
    "observe_request_latency",
    "record_live_push",
    "record_email",
    "record_notification_dispatched",
    "increment_error",
    "get_metrics_content",
    "MetricsErrorType",
    "PushOutcome",
]
