"""NiceGUI interface - thin visualization layer for the chat session.

Responsibilities:
    - Message display that grows while a reply streams in
    - Typing indicator while the bot has not produced any text
    - Cancel and new-conversation controls

Contains no decoding logic. Observes a ChatSession and re-renders on change.
"""
