"""Reply generators for the reference backend.

A responder turns one user message into an async stream of text pieces. The
chat endpoint wraps each piece in a data frame.
"""

import asyncio
import re
from collections.abc import AsyncGenerator
from typing import Protocol

from src.api.config import ServerConfig, get_server_config


class Responder(Protocol):
    """Produces the bot's reply to a message, piece by piece."""

    def respond(self, message: str) -> AsyncGenerator[str]: ...


class EchoResponder:
    """Streams the user's message back one word at a time.

    Stands in for a language model so the client can be exercised end to end
    without external services.
    """

    def __init__(self, config: ServerConfig | None = None) -> None:
        self._config = config or get_server_config()

    async def respond(self, message: str) -> AsyncGenerator[str]:
        """Yield the optional prefix, then each word with its trailing space."""
        if self._config.echo_prefix:
            yield self._config.echo_prefix

        for piece in re.findall(r"\S+\s*", message):
            if self._config.echo_delay:
                await asyncio.sleep(self._config.echo_delay)
            yield piece
