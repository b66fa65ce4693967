"""Chat client: HTTP transport and conversation session.

Responsibilities:
    - Posting user messages to the streaming chat endpoint
    - Incremental decoding of the response body into text chunks
    - Running one cancellable turn at a time over a shared accumulator
    - Exposing messages and the composing flag to the UI

Maintains clean separation from the UI layer.
"""

from src.client.config import ClientConfig, get_client_config
from src.client.session import ChatSession, ChunkSource
from src.client.transport import ChatTransport

__all__ = [
    "ChatSession",
    "ChatTransport",
    "ChunkSource",
    "ClientConfig",
    "get_client_config",
]
