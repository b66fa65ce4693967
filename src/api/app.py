"""FastAPI application factory and configuration.

Reference backend with lifespan management, middleware, and router
registration.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.chat import router as chat_router
from src.api.responders import EchoResponder, Responder

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Log application startup and shutdown.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application while it runs.
    """
    logger.info(f"Starting chat backend with {type(app.state.responder).__name__}...")
    yield
    logger.info("Shutting down chat backend...")


def create_app(responder: Responder | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        responder: Reply generator for the chat endpoint.
                   Defaults to an EchoResponder configured from environment.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="Stream Chat API",
        description=(
            "Reference backend for the streaming chat client. Replies are sent "
            "as blank-line separated frames: data frames carrying JSON text "
            "pieces, then an end frame."
        ),
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    application.state.responder = responder or EchoResponder()

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["*"],
    )

    application.include_router(chat_router)

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "stream-chat"}

    return application


app = create_app()
