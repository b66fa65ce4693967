"""Integration tests for components working together as a system.

Coverage:
    - Reference backend over httpx ASGITransport
    - Client transport over httpx MockTransport with fragmented bodies
    - Full chat turn from session through transport to backend and back

No external services required.
"""
