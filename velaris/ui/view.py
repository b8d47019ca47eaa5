"""Pure projection of session state into what the chat page draws.

Nothing here touches NiceGUI, so the view rules can be tested on their own.
"""

from pydantic import BaseModel

from velaris.chat.controller import SessionState
from velaris.models.schemas import Message, MessageRole

EMPTY_STATE_TEXT = "Como posso ajudar você hoje?"
TYPING_TEXT = "Digitando"

_BUBBLE_CLASSES = {
    MessageRole.USER: "message-user",
    MessageRole.ASSISTANT: "message-assistant",
    MessageRole.ERROR: "message-error",
    MessageRole.SYSTEM: "message-system",
}


class Bubble(BaseModel):
    """One rendered transcript entry.

    Attributes:
        role: Speaker of the underlying message.
        html: Escaped message text with line breaks as <br>.
        align: Row alignment class (user on the right, others on the left).
        bubble_class: CSS class that colours the bubble.
        avatar_icon: Material icon name for the avatar.
    """

    role: MessageRole
    html: str
    align: str
    bubble_class: str
    avatar_icon: str

    @property
    def is_user(self) -> bool:
        return self.role is MessageRole.USER


class TranscriptView(BaseModel):
    """Everything the page needs for one render pass."""

    bubbles: list[Bubble]
    show_typing: bool
    error_banner: str | None
    can_send: bool

    @property
    def is_empty(self) -> bool:
        return not self.bubbles


def text_to_html(text: str) -> str:
    """Escape text for display and keep its line breaks."""
    text = text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")
    return text.replace("\n", "<br>")


def project_message(message: Message) -> Bubble:
    is_user = message.is_user
    return Bubble(
        role=message.role,
        html=text_to_html(message.content),
        align="justify-end" if is_user else "justify-start",
        bubble_class=_BUBBLE_CLASSES[message.role],
        avatar_icon="person" if is_user else "chat_bubble",
    )


def project(state: SessionState) -> TranscriptView:
    """Project session state into a TranscriptView."""
    return TranscriptView(
        bubbles=[project_message(m) for m in state.transcript],
        show_typing=state.is_awaiting_reply,
        error_banner=state.last_error,
        can_send=not state.is_awaiting_reply,
    )
