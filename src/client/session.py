"""Conversation session driving one turn at a time.

The session is the only writer of its accumulator. A user submission and the
consumption of the previous response are never allowed to overlap: submitting
while a turn is still streaming raises ``TurnInProgressError``.
"""

import asyncio
import logging
import uuid
from collections.abc import AsyncGenerator, Callable
from typing import Protocol

from src.client.transport import ChatTransport
from src.models.schemas import Message, TurnResult, TurnStatus
from src.stream.accumulator import StreamAccumulator
from src.stream.cancellation import CancellationToken
from src.stream.consumer import consume_stream
from src.stream.errors import TurnInProgressError

logger = logging.getLogger(__name__)


class ChunkSource(Protocol):
    """Anything that can stream the response to a user message."""

    def stream(self, message: str) -> AsyncGenerator[str]: ...


class ChatSession:
    """Manages chat state for a user session.

    Attributes:
        session_id: Identifier of the current conversation.
        last_result: Outcome of the most recently finished turn.
    """

    def __init__(
        self,
        transport: ChunkSource | None = None,
        on_update: Callable[[], None] | None = None,
    ) -> None:
        self.session_id: str = str(uuid.uuid4())
        self.last_result: TurnResult | None = None
        self._transport = transport or ChatTransport()
        self._on_update = on_update
        self._accumulator = StreamAccumulator()
        self._task: asyncio.Task[TurnResult] | None = None
        self._token: CancellationToken | None = None

    @property
    def messages(self) -> tuple[Message, ...]:
        return self._accumulator.messages

    @property
    def composing(self) -> bool:
        return self._accumulator.composing

    @property
    def is_streaming(self) -> bool:
        return self._task is not None and not self._task.done()

    def submit_user_message(self, text: str) -> asyncio.Task[TurnResult] | None:
        """Record a user message and start streaming the bot's answer.

        Must be called from a running event loop.

        Args:
            text: The user's message. Blank input is ignored.

        Returns:
            The task consuming the response, or None for blank input.

        Raises:
            TurnInProgressError: If the previous response is still streaming.
        """
        if not text.strip():
            return None
        if self.is_streaming:
            raise TurnInProgressError("A response is still streaming")

        self._accumulator.begin_turn(text)
        self._token = CancellationToken()
        self._task = asyncio.create_task(
            self._run_turn(text, self._accumulator, self._token)
        )
        self._task.add_done_callback(self._turn_done)
        self._notify()
        return self._task

    async def send(self, text: str) -> TurnResult | None:
        """Submit a message and wait for its turn to finish."""
        task = self.submit_user_message(text)
        if task is None:
            return None
        return await task

    def cancel(self, reason: str = "cancelled by user") -> None:
        """Abandon the in-flight turn, if any.

        Text received so far is kept. The turn ends with status ``cancelled``
        without waiting for the next chunk, so a stalled backend cannot hold
        the session.
        """
        if self.is_streaming and self._token is not None:
            self._token.cancel(reason)

    def new_conversation(self) -> None:
        """Drop the current conversation and start an empty one."""
        self.cancel("conversation reset")
        self._accumulator = StreamAccumulator()
        self._task = None
        self._token = None
        self.last_result = None
        self.session_id = str(uuid.uuid4())
        self._notify()

    async def _run_turn(
        self,
        text: str,
        accumulator: StreamAccumulator,
        token: CancellationToken,
    ) -> TurnResult:
        logger.info(f"Session {self.session_id[:8]}: streaming response")

        def on_update() -> None:
            if accumulator is self._accumulator:
                self._notify()

        result = await consume_stream(
            self._transport.stream(text), accumulator, token, on_update
        )

        if result.status is TurnStatus.FAILED:
            logger.error(f"Session {self.session_id[:8]}: turn failed: {result.error}")
        else:
            logger.info(
                f"Session {self.session_id[:8]}: turn {result.status.value} "
                f"({result.data_frames} frames, {result.parse_errors} malformed)"
            )

        if accumulator is self._accumulator:
            self.last_result = result
        return result

    def _turn_done(self, task: asyncio.Task[TurnResult]) -> None:
        # Observers see is_streaming False only once the task is done
        if task is self._task:
            self._notify()

    def _notify(self) -> None:
        if self._on_update is not None:
            self._on_update()
