"""Integration tests for components working together as a system.

Coverage:
    - FastAPI host app over ASGITransport
    - Session controller talking to a real FastAPI webhook app

No network access required.
"""
