"""HTTP chunk supplier for the streaming chat endpoint."""

import logging
from collections.abc import AsyncGenerator
from contextlib import aclosing

import httpx

from src.client.config import ClientConfig, get_client_config
from src.stream.errors import TransportError

logger = logging.getLogger(__name__)


class ChatTransport:
    """Sends a user message and yields the response body as decoded text.

    Text is decoded incrementally, so a multi-byte character split across two
    network reads is delivered intact. Failures surface as ``TransportError``
    and are never retried.
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the transport.

        Args:
            config: Optional client configuration.
                    Loads from environment if not provided.
            client: Optional shared HTTP client. It is not closed by the
                    transport; without one a client is opened per stream.
        """
        self._config = config or get_client_config()
        self._client = client

    async def stream(self, message: str) -> AsyncGenerator[str]:
        """Stream the response to a message.

        Args:
            message: The user's message.

        Yields:
            Non-empty text chunks in arrival order.

        Raises:
            TransportError: On connection failure or non-success status.
        """
        if self._client is not None:
            async with aclosing(self._stream(self._client, message)) as chunks:
                async for chunk in chunks:
                    yield chunk
            return

        async with (
            httpx.AsyncClient(timeout=self._config.timeout) as client,
            aclosing(self._stream(client, message)) as chunks,
        ):
            async for chunk in chunks:
                yield chunk

    async def _stream(self, client: httpx.AsyncClient, message: str) -> AsyncGenerator[str]:
        logger.debug(f"POST {self._config.chat_url}")
        try:
            async with client.stream(
                "POST",
                self._config.chat_url,
                json={"message": message},
                headers={"Accept": "text/event-stream"},
            ) as response:
                response.raise_for_status()
                async for text in response.aiter_text():
                    if text:
                        yield text
        except httpx.HTTPStatusError as e:
            raise TransportError(
                f"HTTP {e.response.status_code}", status_code=e.response.status_code
            ) from e
        except httpx.RequestError as e:
            raise TransportError(f"Connection failed: {e}") from e
