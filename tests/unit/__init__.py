"""Unit tests for individual components in isolation.

Coverage:
    - chat/: Extraction chain, webhook client, session controller
    - ui/: Transcript projection
    - config: Environment-driven configuration

The webhook is replaced with httpx.MockTransport handlers.
"""
