"""
Entry point for the Threadline server.

Usage:
    python run_fastapi.py

Or with uvicorn directly:
    uvicorn src.fastapi_app:app --host 0.0.0.0 --port 5001

Live delivery is process-local: run a single worker.
"""

import os

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

import uvicorn

from src.config.settings import get_config

if __name__ == "__main__":
    env = os.getenv("APP_ENV", "development")
    settings = get_config(env)
    port = int(os.getenv("PORT", 5001))
    host = os.getenv("HOST", "0.0.0.0")

    print(f"Starting Threadline in {env} mode (storage: {settings.STORAGE_BACKEND})...")
    print(f"REST on http://{host}:{port}, docs at /docs")
    print(f"Live push on ws://{host}:{port}/ws and http://{host}:{port}/notifications/stream")

    uvicorn.run(
        "src.fastapi_app:app",
        host=host,
        port=port,
        reload=settings.DEBUG,
        workers=1,
        ws_ping_interval=settings.SSE_KEEPALIVE_SECONDS,
        log_level="info" if settings.DEBUG else "warning",
    )
