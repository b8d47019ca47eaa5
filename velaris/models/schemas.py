from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


class MessageRole(str, Enum):
    """Speaker of a transcript entry."""

    USER = "user"
    ASSISTANT = "assistant"
    ERROR = "error"
    SYSTEM = "system"


class Message(BaseModel):
    """A single entry in the conversation transcript.

    Messages are frozen: once appended to a transcript they are never edited.

    Attributes:
        role: The speaker (user, assistant, error, or system).
        content: The message text. Diagnostic text for error entries.
    """

    model_config = ConfigDict(frozen=True)

    role: MessageRole
    content: str

    @field_validator("content")
    @classmethod
    def require_text_for_turns(cls, v: str, info: ValidationInfo) -> str:
        """User and assistant entries must carry text."""
        role = info.data.get("role")
        if role in (MessageRole.USER, MessageRole.ASSISTANT) and not v:
            raise ValueError(f"{role.value} message content must not be empty")
        return v

    @property
    def is_user(self) -> bool:
        return self.role is MessageRole.USER


class WebhookRequest(BaseModel):
    """Request payload sent to the message-processing webhook.

    Attributes:
        message: The raw text the user submitted.
    """

    message: str = Field(..., description="The user's message, unmodified")
