"""Streaming chat endpoint.

Emits the frame protocol the client decodes: one data frame per reply piece,
then an end frame.
"""

import logging
from collections.abc import AsyncGenerator

from fastapi import APIRouter, Depends, Request
from fastapi.responses import StreamingResponse

from src.api.responders import Responder
from src.models.schemas import ChatRequest
from src.stream.protocol import encode_data_frame, encode_end_frame

logger = logging.getLogger(__name__)

router = APIRouter(tags=["chat"])


def get_responder(request: Request) -> Responder:
    """Return the responder configured on the application."""
    return request.app.state.responder


async def _event_stream(responder: Responder, message: str) -> AsyncGenerator[str]:
    """Frame the responder's reply.

    A failing responder still ends the turn: its error is sent as the last
    piece of text, followed by the end frame.
    """
    try:
        async for piece in responder.respond(message):
            yield encode_data_frame(piece)
    except Exception as e:
        logger.error(f"Responder failed: {e}")
        yield encode_data_frame(f"\n\n[Error: {e}]")
    yield encode_end_frame()


@router.post("/chat")
async def chat(
    payload: ChatRequest,
    responder: Responder = Depends(get_responder),
) -> StreamingResponse:
    """Stream the reply to a chat message.

    Args:
        payload: The user's message.
        responder: Reply generator configured on the application.

    Returns:
        A text/event-stream response of data frames ending with an end frame.

    Raises:
        422: Empty or missing message.
    """
    logger.info(f"Streaming reply to message of {len(payload.message)} characters")
    return StreamingResponse(
        _event_stream(responder, payload.message),
        media_type="text/event-stream",
        headers={"Cache-Control": "no-cache"},
    )
