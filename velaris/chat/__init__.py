"""Conversation session logic.

Owns the request lifecycle of a single conversation.

Responsibilities:
    - Transcript and session state ownership
    - One webhook request per user turn
    - Reply extraction from loosely shaped webhook bodies
    - Failure classification and user-initiated retry

Contains no presentation code. The UI observes SessionController.
"""

from velaris.chat.client import WebhookClient
from velaris.chat.controller import SessionController, SessionState
from velaris.chat.errors import (
    EmptyReplyError,
    WebhookError,
    WebhookStatusError,
    WebhookTransportError,
)
from velaris.chat.extraction import extract_reply

__all__ = [
    "EmptyReplyError",
    "SessionController",
    "SessionState",
    "WebhookClient",
    "WebhookError",
    "WebhookStatusError",
    "WebhookTransportError",
    "extract_reply",
]
