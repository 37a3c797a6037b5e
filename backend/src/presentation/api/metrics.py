"""
Prometheus Metrics Endpoint for the Threadline backend.

PURPOSE:
    Expose /metrics for the Prometheus scraper: live channels, pushes, e-mails,
    dispatched notifications and swallowed delivery errors.

DATA FLOW:
    observability/metrics.py         This file                    Observability Stack
    ────────────────────────         ─────────                    ───────────────────
    Define & record metrics ──────►  /metrics endpoint ──────────► Prometheus ──► Grafana

Test with: curl http://localhost:5001/metrics
"""

from fastapi import APIRouter, Response
from src.observability.metrics import get_metrics_content


router = APIRouter(prefix="/metrics", tags=["observability"])


@router.get("")
async def metrics():
    """
    Prometheus metrics endpoint.

    Returns metrics in Prometheus text format.
    """
    content, content_type = get_metrics_content()
    return Response(content=content, media_type=content_type)
