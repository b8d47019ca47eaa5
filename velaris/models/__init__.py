"""Pydantic models for transcript messages and webhook payloads.

Models:
    - MessageRole: Speaker of a transcript entry
    - Message: Immutable transcript entry
    - WebhookRequest: Outbound request body
"""

from velaris.models.schemas import Message, MessageRole, WebhookRequest

__all__ = ["Message", "MessageRole", "WebhookRequest"]
