"""Response stream decoding and message accumulation.

Responsibilities:
    - Rebuilding frame boundaries from arbitrarily fragmented text chunks
    - Classifying frames as data, end-of-turn or unknown
    - Growing a single active bot message per turn
    - Cooperative, cancellable consumption of a chunk stream

Has no knowledge of HTTP or of the UI; both sit on top of this package.
"""

from src.stream.accumulator import StreamAccumulator
from src.stream.cancellation import CancellationToken, CancelledError
from src.stream.consumer import consume_stream
from src.stream.errors import (
    ChatStreamError,
    FrameParseError,
    TransportError,
    TurnInProgressError,
)
from src.stream.protocol import (
    DataFrame,
    EndFrame,
    Frame,
    FrameSplitter,
    encode_data_frame,
    encode_end_frame,
    parse_frame,
)

__all__ = [
    "CancellationToken",
    "CancelledError",
    "ChatStreamError",
    "DataFrame",
    "EndFrame",
    "Frame",
    "FrameParseError",
    "FrameSplitter",
    "StreamAccumulator",
    "TransportError",
    "TurnInProgressError",
    "consume_stream",
    "encode_data_frame",
    "encode_end_frame",
    "parse_frame",
]
