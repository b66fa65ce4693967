"""Shared fakes for streaming tests.

Kept outside conftest so test modules can import them directly.
"""

import asyncio
import json
from collections.abc import AsyncGenerator, AsyncIterator

import httpx


def data(text: str) -> str:
    """Encode a data frame body by hand, delimiter included."""
    return f"data: {json.dumps({'message': text})}\n\n"


END = "event: end\n\n"


async def iter_chunks(
    *chunks: str,
    error: BaseException | None = None,
) -> AsyncGenerator[str]:
    """Yield chunks in order, then optionally raise."""
    for chunk in chunks:
        await asyncio.sleep(0)
        yield chunk
    if error is not None:
        raise error


class FakeTransport:
    """Chunk source replaying scripted chunks for every message.

    Attributes:
        sent: Messages passed to ``stream``, in order.
    """

    def __init__(
        self,
        *chunks: str,
        error: BaseException | None = None,
        gate: asyncio.Event | None = None,
    ) -> None:
        self._chunks = chunks
        self._error = error
        self._gate = gate
        self.sent: list[str] = []

    async def stream(self, message: str) -> AsyncGenerator[str]:
        self.sent.append(message)
        for i, chunk in enumerate(self._chunks):
            if i > 0 and self._gate is not None:
                await self._gate.wait()
            await asyncio.sleep(0)
            yield chunk
        if self._error is not None:
            raise self._error


class ScriptedResponder:
    """Backend responder replying with fixed pieces."""

    def __init__(self, *pieces: str, error: Exception | None = None) -> None:
        self._pieces = pieces
        self._error = error

    async def respond(self, message: str) -> AsyncGenerator[str]:
        for piece in self._pieces:
            yield piece
        if self._error is not None:
            raise self._error


class ChunkedByteStream(httpx.AsyncByteStream):
    """Response body delivered in exactly the given byte chunks."""

    def __init__(self, chunks: list[bytes], error: Exception | None = None) -> None:
        self._chunks = chunks
        self._error = error

    async def __aiter__(self) -> AsyncIterator[bytes]:
        for chunk in self._chunks:
            yield chunk
        if self._error is not None:
            raise self._error
