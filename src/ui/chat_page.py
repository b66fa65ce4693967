"""NiceGUI chat interface observing a streaming ChatSession."""

from nicegui import ui

from src.client.session import ChatSession
from src.models.schemas import Message, Sender, TurnStatus
from src.stream.errors import TurnInProgressError

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { background: #f5f5f5; min-height: 100vh; }

    .app-container {
        background: white;
        border-radius: 12px;
        box-shadow: 0 2px 8px rgba(0, 0, 0, 0.1);
        overflow: hidden;
    }

    .header { background: #1f2937; }

    .message-user {
        background: #2563eb;
        color: white;
        border-radius: 18px 18px 4px 18px;
    }

    .message-bot {
        background: #f3f4f6;
        color: #1f2937;
        border-radius: 18px 18px 18px 4px;
    }

    .typing-dot {
        width: 8px; height: 8px;
        background: #2563eb;
        border-radius: 50%;
        animation: bounce 1.4s infinite ease-in-out;
    }
    .typing-dot:nth-child(2) { animation-delay: 0.2s; }
    .typing-dot:nth-child(3) { animation-delay: 0.4s; }

    @keyframes bounce {
        0%, 60%, 100% { transform: translateY(0); }
        30% { transform: translateY(-6px); }
    }

    .message-bot pre { margin: 0.5rem 0; }
    .message-bot code { font-family: 'Menlo', 'Monaco', monospace; }
</style>
"""


def render_message(msg: Message) -> None:
    is_user = msg.sender is Sender.USER
    align = "justify-end" if is_user else "justify-start"
    bubble = "message-user" if is_user else "message-bot"

    with ui.row().classes(f"w-full {align}"):
        with ui.column().classes("max-w-[70%] gap-1"):
            with ui.element("div").classes(f"px-4 py-3 {bubble}"):
                # User text is shown verbatim, bot text as markdown
                if is_user:
                    ui.label(msg.text).classes("text-sm whitespace-pre-wrap")
                else:
                    ui.markdown(msg.text).classes("text-sm leading-relaxed")
            ui.label(msg.created_at.strftime("%I:%M %p")).classes(
                f"text-[10px] text-gray-400 {'self-end' if is_user else 'self-start'}"
            )


def render_typing_indicator() -> None:
    with ui.row().classes("w-full justify-start"):
        with ui.element("div").classes("message-bot px-4 py-3"):
            with ui.row().classes("gap-1"):
                for _ in range(3):
                    ui.element("div").classes("typing-dot")


@ui.page("/")
def chat_page() -> None:
    """Main chat page."""
    ui.add_head_html(CUSTOM_CSS)

    @ui.refreshable
    def message_list() -> None:
        if not session.messages:
            with ui.column().classes("w-full h-64 items-center justify-center gap-3"):
                ui.icon("forum").classes("text-5xl text-gray-300")
                ui.label("Start a conversation").classes("text-lg text-gray-400")
            return
        for msg in session.messages:
            render_message(msg)
        if session.composing:
            render_typing_indicator()

    session = ChatSession(on_update=message_list.refresh)

    input_field: ui.textarea

    async def send_message() -> None:
        text = input_field.value
        try:
            task = session.submit_user_message(text)
        except TurnInProgressError:
            ui.notify("Wait for the current reply to finish", type="warning")
            return
        if task is None:
            return

        input_field.value = ""
        result = await task
        if result.status is TurnStatus.FAILED:
            ui.notify(result.error or "Request failed", type="negative")

    def new_chat() -> None:
        session.new_conversation()

    # === UI Layout ===
    with (
        ui.element("div").classes("w-full min-h-screen p-4 md:p-8"),
        ui.column().classes("w-full max-w-3xl mx-auto app-container").style(
            "height: calc(100vh - 4rem)"
        ),
    ):
        # Header
        with ui.row().classes("w-full header px-5 py-4 items-center justify-between"):
            with ui.row().classes("items-center gap-3"):
                ui.icon("chat").classes("text-white text-3xl")
                ui.label("Stream Chat").classes("text-lg font-semibold text-white")
            with ui.row().classes("items-center gap-3"):
                ui.label().bind_text_from(
                    session, "session_id", lambda s: s[:8].upper()
                ).classes("text-xs text-white/80 font-mono")
                ui.button(icon="stop", on_click=lambda: session.cancel()).props(
                    "flat round color=white"
                )
                ui.button(icon="add", on_click=new_chat).props("flat round color=white")

        # Messages
        with (
            ui.scroll_area().classes("flex-grow w-full bg-gray-50"),
            ui.column().classes("w-full p-5 gap-4"),
        ):
            message_list()

        # Input
        with ui.row().classes("w-full p-4 gap-3 items-end bg-white border-t"):
            input_field = (
                ui.textarea(placeholder="Type a message...")
                .props("autogrow borderless dense rows=1")
                .classes("flex-grow")
                .on("keydown.enter.prevent", send_message)
            )
            # Disabled while any turn streams, including one started after a reset
            ui.button(icon="send", on_click=send_message).props(
                "round unelevated"
            ).bind_enabled_from(session, "is_streaming", backward=lambda s: not s)


def main() -> None:
    ui.run(title="Stream Chat", port=8080, reload=False)


if __name__ == "__main__":
    main()
