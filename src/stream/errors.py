"""Error types raised while decoding and consuming a response stream."""


class ChatStreamError(Exception):
    """Base class for chat streaming errors."""

    pass


class TransportError(ChatStreamError):
    """Raised when the chunk supplier fails or the connection drops.

    Attributes:
        status_code: HTTP status of a non-success response, if there was one.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class FrameParseError(ChatStreamError):
    """Raised when a data frame carries a malformed payload."""

    def __init__(self, body: str, reason: str) -> None:
        super().__init__(f"Malformed data frame {body[:80]!r}: {reason}")
        self.body = body
        self.reason = reason


class TurnInProgressError(ChatStreamError):
    """Raised when a message is submitted while a response is still streaming."""

    pass
