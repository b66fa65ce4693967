"""Cooperative cancellation for stream consumption.

The read loop polls the token at every frame boundary, so a frame is never
half applied. While the loop is suspended waiting for the next chunk it also
waits on the token, so a cancel request ends a stalled read immediately.
"""

import asyncio


class CancelledError(RuntimeError):
    """Raised by ``CancellationToken.raise_if_cancelled``."""


class CancellationToken:
    """A cancel request shared between the caller and a read loop."""

    def __init__(self) -> None:
        self._event = asyncio.Event()
        self._reason: str | None = None

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()

    @property
    def reason(self) -> str | None:
        return self._reason

    def cancel(self, reason: str | None = None) -> None:
        """Request cancellation. Only the first reason is kept."""
        if self._event.is_set():
            return
        self._reason = reason
        self._event.set()

    async def wait(self) -> None:
        """Block until cancellation is requested."""
        await self._event.wait()

    def raise_if_cancelled(self) -> None:
        if self._event.is_set():
            raise CancelledError(self._reason or "operation cancelled")

    def __repr__(self) -> str:
        return f"CancellationToken(cancelled={self.cancelled}, reason={self._reason!r})"
