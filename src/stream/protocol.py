"""Wire protocol for streamed chat responses.

A response is a sequence of frames separated by a blank line::

    data: {"message": "Hel"}

    data: {"message": "lo"}

    event: end

Frames may arrive split across any number of network chunks, so decoding is
done in two steps: ``FrameSplitter`` rebuilds frame boundaries and
``parse_frame`` classifies each complete frame body.
"""

import logging
from dataclasses import dataclass

from pydantic import ValidationError

from src.models.schemas import DataPayload
from src.stream.errors import FrameParseError

logger = logging.getLogger(__name__)

FRAME_DELIMITER = "\n\n"
DATA_PREFIX = "data: "
END_MARKER = "event: end"


@dataclass(frozen=True)
class DataFrame:
    """Frame carrying the next piece of bot text."""

    text: str


@dataclass(frozen=True)
class EndFrame:
    """Frame marking the end of the current bot turn."""


Frame = DataFrame | EndFrame


class FrameSplitter:
    """Incremental frame splitter.

    Feed decoded text chunks in arrival order and collect complete frame
    bodies. An incomplete trailing fragment is held back and prefixed onto the
    next chunk, so no frame is ever emitted partially and no text is dropped
    or duplicated across chunk boundaries.
    """

    def __init__(self, delimiter: str = FRAME_DELIMITER) -> None:
        self._delimiter = delimiter
        self._buffer = ""

    @property
    def pending(self) -> str:
        """Carry-over text that does not form a complete frame yet."""
        return self._buffer

    def feed(self, chunk: str) -> list[str]:
        """Feed one chunk and return the frames it completes, in order."""
        pieces = (self._buffer + chunk).split(self._delimiter)
        self._buffer = pieces.pop()
        return pieces

    def close(self) -> str:
        """Return and clear the leftover partial frame."""
        leftover, self._buffer = self._buffer, ""
        return leftover


def parse_frame(body: str) -> Frame | None:
    """Classify a frame body.

    Args:
        body: One complete frame, without its delimiter.

    Returns:
        A DataFrame or EndFrame, or None for bodies with no known meaning.

    Raises:
        FrameParseError: If a data frame's payload is not a valid record.
    """
    if body.startswith(DATA_PREFIX):
        try:
            payload = DataPayload.model_validate_json(body[len(DATA_PREFIX):])
        except ValidationError as e:
            raise FrameParseError(body, str(e)) from e
        return DataFrame(text=payload.message)

    if body == END_MARKER:
        return EndFrame()

    if body:
        logger.debug(f"Ignoring unrecognized frame: {body[:80]!r}")
    return None


def encode_data_frame(text: str) -> str:
    """Encode a piece of bot text as a data frame, delimiter included."""
    return f"{DATA_PREFIX}{DataPayload(message=text).model_dump_json()}{FRAME_DELIMITER}"


def encode_end_frame() -> str:
    """Encode the end-of-turn frame, delimiter included."""
    return f"{END_MARKER}{FRAME_DELIMITER}"
