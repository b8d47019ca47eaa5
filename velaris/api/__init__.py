"""FastAPI host application for the chat client.

Serves the NiceGUI chat page and a health endpoint on one server.

Endpoints:
    - GET /health: Service health status
    - GET /: Chat page (mounted by NiceGUI)
"""

from velaris.api.app import app, create_app

__all__ = ["app", "create_app"]
