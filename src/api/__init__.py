"""FastAPI reference backend for the streaming chat client.

Speaks the same frame protocol the client decodes, so the whole path can run
locally and in tests.

Endpoints:
    - GET /health: Service health status
    - POST /chat: Streamed reply as data frames followed by an end frame
"""

from src.api.app import app, create_app

__all__ = ["app", "create_app"]
