"""Pytest fixtures and shared test configuration.

Fixtures:
    - accumulator: Fresh StreamAccumulator with a user turn already begun
    - backend: Reference FastAPI app with an instant echo responder
    - async_client: HTTPX client bound to the backend through ASGITransport
    - client_config: ClientConfig pointing at the ASGI test host
"""

from collections.abc import AsyncGenerator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from src.api.app import create_app
from src.api.config import ServerConfig
from src.api.responders import EchoResponder
from src.client.config import ClientConfig
from src.stream.accumulator import StreamAccumulator


@pytest.fixture
def accumulator() -> StreamAccumulator:
    """Return an accumulator waiting for the reply to "hi"."""
    acc = StreamAccumulator()
    acc.begin_turn("hi")
    return acc


@pytest.fixture
def backend() -> FastAPI:
    """Return the reference backend echoing without delay."""
    return create_app(responder=EchoResponder(ServerConfig(echo_delay=0.0)))


@pytest.fixture
def client_config() -> ClientConfig:
    return ClientConfig(api_base_url="http://test", chat_path="/chat", timeout=5.0)


@pytest.fixture
async def async_client(backend: FastAPI) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=backend)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
