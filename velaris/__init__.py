"""Velaris - single-conversation chat client for a remote assistant webhook.

Combines NiceGUI for the chat view, httpx for the outbound webhook call,
FastAPI as the host application, and Pydantic for data validation.

Components:
    - chat: session controller, webhook client and reply extraction
    - ui: transcript projection and the NiceGUI chat page
    - api: host application and health endpoint
    - models: message and request schemas
"""

__version__ = "0.1.0"
