"""Cooperative read loop that turns a chunk stream into accumulated messages.

The loop suspends only while waiting for the next chunk. Frames are applied
strictly in the order the splitter emits them, which is the order the text
arrived on the wire. A turn ends in exactly one of four ways:

1. **completed** - the end frame was processed. Reading stops there and the
   chunk stream is closed, releasing the underlying HTTP response.
2. **closed** - the stream ran out without an end frame. Any partial frame
   left in the splitter is discarded.
3. **cancelled** - the caller cancelled the token. A pending read is
   abandoned as soon as the token fires, and frames left in the current chunk
   are not applied.
4. **failed** - the supplier raised ``TransportError``.

In every case the accumulator is left consistent: the bot text received so far
stays as a sealed message and ``composing`` is cleared.
"""

import asyncio
import logging
from collections.abc import AsyncGenerator, Callable
from contextlib import aclosing

from src.models.schemas import TurnResult, TurnStatus
from src.stream.accumulator import StreamAccumulator
from src.stream.cancellation import CancellationToken, CancelledError
from src.stream.errors import FrameParseError, TransportError
from src.stream.protocol import EndFrame, FrameSplitter, parse_frame

logger = logging.getLogger(__name__)


async def consume_stream(
    chunks: AsyncGenerator[str, None],
    accumulator: StreamAccumulator,
    token: CancellationToken | None = None,
    on_update: Callable[[], None] | None = None,
) -> TurnResult:
    """Consume one response stream into the accumulator.

    Args:
        chunks: Decoded text chunks in arrival order.
        accumulator: Conversation state to update. The turn must already have
            been started with ``begin_turn``.
        token: Optional cancellation token for abandoning the turn.
        on_update: Called after every change the UI should render.

    Returns:
        TurnResult describing how the turn ended.
    """
    token = token or CancellationToken()
    splitter = FrameSplitter()
    data_frames = 0
    parse_errors = 0
    ignored_frames = 0

    def notify() -> None:
        if on_update is not None:
            on_update()

    def finish(status: TurnStatus, error: str | None = None) -> TurnResult:
        return TurnResult(
            status=status,
            data_frames=data_frames,
            parse_errors=parse_errors,
            ignored_frames=ignored_frames,
            error=error,
        )

    try:
        async with aclosing(chunks) as stream:
            while (chunk := await _next_chunk(stream, token)) is not None:
                token.raise_if_cancelled()
                for body in splitter.feed(chunk):
                    token.raise_if_cancelled()
                    try:
                        frame = parse_frame(body)
                    except FrameParseError as e:
                        parse_errors += 1
                        logger.warning(f"Dropping frame: {e}")
                        continue

                    if frame is None:
                        if body:
                            ignored_frames += 1
                        continue

                    accumulator.apply(frame)
                    notify()
                    if isinstance(frame, EndFrame):
                        return finish(TurnStatus.COMPLETED)
                    data_frames += 1
    except CancelledError as e:
        logger.info(f"Turn cancelled: {e}")
        accumulator.abort()
        notify()
        return finish(TurnStatus.CANCELLED, str(e))
    except TransportError as e:
        accumulator.abort()
        notify()
        return finish(TurnStatus.FAILED, str(e))
    except BaseException:
        accumulator.abort()
        raise

    leftover = splitter.close()
    if leftover:
        logger.debug(f"Discarding partial frame at end of stream: {leftover[:80]!r}")
    logger.info("Stream closed without an end frame")
    accumulator.abort()
    notify()
    return finish(TurnStatus.CLOSED)


async def _next_chunk(
    stream: AsyncGenerator[str, None], token: CancellationToken
) -> str | None:
    """Wait for the next chunk or a cancel request, whichever comes first.

    Returns None once the stream is exhausted.
    """
    token.raise_if_cancelled()
    read = asyncio.ensure_future(anext(stream, None))
    cancelled = asyncio.ensure_future(token.wait())
    try:
        await asyncio.wait({read, cancelled}, return_when=asyncio.FIRST_COMPLETED)
    finally:
        cancelled.cancel()
        if not read.done():
            read.cancel()
            # The source must unwind before aclosing() closes it
            await asyncio.wait({read})
    if read.cancelled():
        token.raise_if_cancelled()
    return read.result()
