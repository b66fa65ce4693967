from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Sender(str, Enum):
    """Author of a chat message."""

    USER = "user"
    BOT = "bot"


class TurnStatus(str, Enum):
    """Terminal states of a conversation turn."""

    COMPLETED = "completed"
    CLOSED = "closed"
    CANCELLED = "cancelled"
    FAILED = "failed"


class Message(BaseModel):
    """A single display message.

    Messages are immutable values. The bot message that is still streaming is
    replaced at its index with an updated copy rather than mutated.

    Attributes:
        sender: Who wrote the message.
        text: The message text accumulated so far.
        created_at: When the message was first added.
    """

    model_config = ConfigDict(frozen=True)

    sender: Sender
    text: str
    created_at: datetime = Field(default_factory=datetime.now)


class ChatRequest(BaseModel):
    """Request payload for the streaming chat endpoint.

    Attributes:
        message: User's question or prompt.
    """

    message: str = Field(..., min_length=1)

    @field_validator("message", mode="before")
    @classmethod
    def strip_message(cls, v: str) -> str:
        """Strip whitespace from message before validation."""
        if isinstance(v, str):
            return v.strip()
        return v


class DataPayload(BaseModel):
    """Structured record carried by a data frame.

    Only ``message`` is read; any other keys the backend sends are ignored.
    """

    model_config = ConfigDict(extra="ignore")

    message: str


class TurnResult(BaseModel):
    """Outcome of consuming one response stream.

    Attributes:
        status: How the turn ended.
        data_frames: Number of data frames applied.
        parse_errors: Number of data frames dropped as malformed.
        ignored_frames: Number of unrecognized frames skipped.
        error: Transport error or cancellation reason, if any.
    """

    status: TurnStatus
    data_frames: int = Field(default=0, ge=0)
    parse_errors: int = Field(default=0, ge=0)
    ignored_frames: int = Field(default=0, ge=0)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is TurnStatus.COMPLETED
