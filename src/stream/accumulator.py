"""Message accumulation for streamed bot turns.

The accumulator owns the ordered message list of a conversation. At most one
message is active (still growing) at a time; it is always the last element,
always sent by the bot, and is tracked by index. Every other message is
sealed.
"""

import logging

from src.models.schemas import Message, Sender
from src.stream.protocol import DataFrame, EndFrame, Frame

logger = logging.getLogger(__name__)


class StreamAccumulator:
    """Applies decoded frames and user submissions to the message sequence."""

    def __init__(self) -> None:
        self._messages: list[Message] = []
        self._active_index: int | None = None
        self._pending_text = ""
        self._composing = False

    @property
    def messages(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    @property
    def composing(self) -> bool:
        """True while the bot has not produced any text for the current turn."""
        return self._composing

    @property
    def pending_text(self) -> str:
        return self._pending_text

    @property
    def active_message(self) -> Message | None:
        if self._active_index is None:
            return None
        return self._messages[self._active_index]

    def begin_turn(self, text: str) -> Message:
        """Record a user submission and start waiting for the bot.

        Args:
            text: The user's message.

        Returns:
            The sealed user message that was appended.
        """
        self._seal()
        message = Message(sender=Sender.USER, text=text)
        self._messages.append(message)
        self._pending_text = ""
        self._composing = True
        return message

    def apply(self, frame: Frame) -> None:
        """Apply one decoded frame."""
        if isinstance(frame, DataFrame):
            self._append_text(frame.text)
        elif isinstance(frame, EndFrame):
            self.end_turn()
        else:
            raise TypeError(f"Unsupported frame: {frame!r}")

    def end_turn(self) -> None:
        """Seal the active bot message and leave the waiting state."""
        self._seal()
        self._pending_text = ""
        self._composing = False

    def abort(self) -> None:
        """End the turn early, keeping whatever text already arrived."""
        if self._active_index is not None:
            logger.debug(
                f"Turn aborted with {len(self._pending_text)} characters accumulated"
            )
        self.end_turn()

    def _append_text(self, text: str) -> None:
        self._pending_text += text
        if self._active_index is None:
            self._messages.append(Message(sender=Sender.BOT, text=self._pending_text))
            self._active_index = len(self._messages) - 1
        else:
            active = self._messages[self._active_index]
            self._messages[self._active_index] = active.model_copy(
                update={"text": self._pending_text}
            )
        self._composing = False

    def _seal(self) -> None:
        self._active_index = None
