"""Stream Chat - incremental decoding of streamed chatbot replies.

Combines httpx for streaming requests, FastAPI for a reference backend,
NiceGUI for visualization, and Pydantic for data validation.

Components:
    - stream: Frame splitting, frame parsing and message accumulation
    - client: HTTP transport and conversation session
    - api: Reference backend speaking the frame protocol
    - ui: Web interface for chat interactions
    - models: Shared message and request schemas
"""

__version__ = "0.1.0"
