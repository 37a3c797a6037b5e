"""
Presentation Layer - HTTP and live-delivery endpoints.

This layer contains:
- api/: FastAPI routers (threads, messages, notifications, admin, realtime, metrics)
- dependencies/: bearer-token authentication for routes and sockets
"""
