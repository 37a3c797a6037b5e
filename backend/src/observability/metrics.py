"""
Prometheus Metrics for the Threadline messaging backend.

DATA FLOW:
    This file                  presentation/api/metrics.py         Observability Stack
    ─────────                  ────────────────────────────         ───────────────────
    Define metrics ──────────► /metrics endpoint ──────────────►   Prometheus ──► Grafana

METRIC TYPES:
    - Gauge: Value goes up/down (open live channels)
    - Counter: Value only goes up (pushes, e-mails, notifications)
    - Histogram: Distribution (request latency)
"""

from prometheus_client import (
    Gauge,
    Histogram,
    Counter,
    generate_latest,
    CONTENT_TYPE_LATEST,
)


# =============================================================================
# METRICS DEFINITIONS
# =============================================================================
LIVE_CHANNELS_OPEN = Gauge(
    "threadline_live_channels_open",
    "Number of live push channels currently registered",
    ["kind"],
)

REQUEST_LATENCY = Histogram(
    "http_server_request_duration_seconds",
    "Http request latency in seconds",
    ["method", "route", "http_status_code"],
    buckets=[0.05, 0.1, 0.25, 0.5, 1, 2, 5, 10],
)

LIVE_PUSHES_TOTAL = Counter(
    "threadline_live_pushes_total",
    "Live channel pushes by event name and outcome",
    ["event", "outcome"],
)

EMAILS_TOTAL = Counter(
    "threadline_emails_total",
    "Escalation e-mails by outcome",
    ["outcome"],
)

NOTIFICATIONS_DISPATCHED_TOTAL = Counter(
    "threadline_notifications_dispatched_total",
    "Notifications persisted and routed, by type",
    ["type"],
)

ERRORS_TOTAL = Counter(
    "threadline_errors_total",
    "Total number of swallowed delivery errors by type",
    ["error_type"],
)


# =============================================================================
# LABEL CONSTANTS (avoid hardcoding strings throughout codebase)
# =============================================================================
class MetricsErrorType:
    """Error type labels for threadline_errors_total metric."""

    LIVE_PUSH_FAILED = "live_push_failed"
    UNREAD_SYNC_FAILED = "unread_sync_failed"
    REPLAY_FAILED = "replay_failed"
    EMAIL_FAILED = "email_failed"
    ATTACHMENT_UPLOAD_FAILED = "attachment_upload_failed"


class PushOutcome:
    DELIVERED = "delivered"
    FAILED = "failed"


# =============================================================================
# RECORDING FUNCTIONS
# =============================================================================
def channel_opened(kind: str):
    """Integration point: infrastructure/realtime/connection_registry.py register()"""
    LIVE_CHANNELS_OPEN.labels(kind=kind).inc()


def channel_closed(kind: str):
    """Integration point: infrastructure/realtime/connection_registry.py unregister()"""
    LIVE_CHANNELS_OPEN.labels(kind=kind).dec()


def observe_request_latency(method: str, route: str, status_code: int, duration: float):
    REQUEST_LATENCY.labels(
        method=method, route=route, http_status_code=str(status_code)
    ).observe(duration)


def record_live_push(event: str, outcome: str):
    LIVE_PUSHES_TOTAL.labels(event=event, outcome=outcome).inc()


def record_email(outcome: str):
    EMAILS_TOTAL.labels(outcome=outcome).inc()


def record_notification_dispatched(type: str):
    NOTIFICATIONS_DISPATCHED_TOTAL.labels(type=type).inc()


def increment_error(error_type: str):
    """
    Call to record a swallowed error.

    Integration points:
        - infrastructure/realtime/connection_registry.py: live_push_failed
        - application/services/notification_dispatcher.py: unread_sync_failed
        - application/services/escalation.py: email_failed
        - application/services/attachments.py: attachment_upload_failed
    """
    ERRORS_TOTAL.labels(error_type=error_type).inc()


# =============================================================================
# HELPER FOR /metrics ENDPOINT
# =============================================================================
def get_metrics_content():
    """
    Generate Prometheus metrics output.

    Called by: presentation/api/metrics.py

    Returns:
        Tuple of (content_bytes, content_type_string)
    """
    return generate_latest(), CONTENT_TYPE_LATEST


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
