"""Test package for Stream Chat.

Structure:
    - unit/: Splitter, parser, accumulator, consumer, session and config
    - integration/: Backend and client exercised over real HTTP plumbing
    - helpers.py: Fake chunk sources, responders and byte streams

Leverages pytest with pytest-asyncio and pytest-check for soft assertions.
"""
