"""Pydantic models shared by the client, the backend and the UI.

Provides type safety and validation for everything crossing a boundary.

Models:
    - Message: A user or bot message in the conversation
    - ChatRequest: Incoming chat request payload
    - DataPayload: Structured record inside a data frame
    - TurnResult: Outcome of consuming one response stream
"""

from src.models.schemas import (
    ChatRequest,
    DataPayload,
    Message,
    Sender,
    TurnResult,
    TurnStatus,
)

__all__ = [
    "ChatRequest",
    "DataPayload",
    "Message",
    "Sender",
    "TurnResult",
    "TurnStatus",
]
