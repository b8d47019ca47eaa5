"""Chat client configuration with environment variable loading.

Pydantic-based configuration for the webhook the chat session talks to.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()

DEFAULT_WEBHOOK_URL = "https://api.hostbrev.online/webhook/agent_tiktok"


class ChatConfig(BaseModel):
    """Configuration for the chat session's outbound webhook.

    Attributes:
        webhook_url: Endpoint that receives each user message.
        request_timeout: Transport timeout in seconds for one webhook call.
        title: Application title shown in the page header and browser tab.
    """

    webhook_url: str = Field(
        default_factory=lambda: os.getenv("VELARIS_WEBHOOK_URL", DEFAULT_WEBHOOK_URL),
        description="Message-processing webhook URL",
    )
    request_timeout: float = Field(
        default_factory=lambda: float(os.getenv("VELARIS_REQUEST_TIMEOUT", "120.0")),
        gt=0.0,
        description="Transport timeout for a single webhook request, in seconds",
    )
    title: str = Field(
        default_factory=lambda: os.getenv("VELARIS_TITLE", "Velaris"),
        description="Application title",
    )

    @field_validator("webhook_url")
    @classmethod
    def validate_webhook_url(cls, v: str) -> str:
        """Validate that the webhook URL is an absolute http(s) URL."""
        v = v.strip()
        if not v:
            raise ValueError("Webhook URL required. Set VELARIS_WEBHOOK_URL in .env")
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"Webhook URL must start with http:// or https://, got {v!r}")
        return v


def get_chat_config() -> ChatConfig:
    """Create chat configuration from environment.

    Returns:
        Configured ChatConfig instance.

    Raises:
        ValueError: If the webhook URL is missing or malformed.
    """
    return ChatConfig()
