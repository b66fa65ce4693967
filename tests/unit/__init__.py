"""Unit tests for individual components in isolation.

Coverage:
    - stream/: Frame splitting, frame parsing, accumulation, read loop
    - client/: Session turn management and configuration

Uses in-memory chunk sources instead of HTTP.
"""
