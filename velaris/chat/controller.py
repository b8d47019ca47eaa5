"""Conversation session controller.

Owns the transcript and the request lifecycle of a single conversation.

Each submission moves the session through

    idle -> awaiting reply -> idle

and ends either with an assistant reply (retry counter reset) or with an
error entry plus ``last_error`` (retry counter incremented). There is no
separate failed state: a failed session is idle with ``last_error`` set.

The controller is the only writer of session state. Views read ``state`` and
call ``submit``/``retry``; ``subscribe`` lets them re-render after each change.
"""

import logging
from collections.abc import Callable

from velaris.chat.client import WebhookClient
from velaris.chat.errors import WebhookError
from velaris.models.schemas import Message, MessageRole

logger = logging.getLogger(__name__)

Listener = Callable[[], None]


def attempt_error_text(attempt: int) -> str:
    """Banner text for a failed attempt (1-based)."""
    return f"Ocorreu um erro ao processar sua solicitação. (Tentativa {attempt})"


def error_message_text(detail: str) -> str:
    """Transcript text for a failed turn."""
    return f"Desculpe, houve um erro ao processar sua solicitação. Detalhes do erro: {detail}"


class SessionState:
    """Working set of one conversation.

    Created empty with the chat view and discarded with it.
    """

    def __init__(self) -> None:
        self._transcript: list[Message] = []
        self.pending_input: str = ""
        self.is_awaiting_reply: bool = False
        self.last_error: str | None = None
        self.retry_count: int = 0

    @property
    def transcript(self) -> tuple[Message, ...]:
        return tuple(self._transcript)

    def append(self, role: MessageRole, content: str) -> Message:
        message = Message(role=role, content=content)
        self._transcript.append(message)
        return message


class SessionController:
    """Runs conversation turns against the webhook."""

    def __init__(self, client: WebhookClient | None = None) -> None:
        self._client = client or WebhookClient()
        self._listeners: list[Listener] = []
        self.state = SessionState()

    @property
    def transcript(self) -> tuple[Message, ...]:
        return self.state.transcript

    @property
    def is_awaiting_reply(self) -> bool:
        return self.state.is_awaiting_reply

    @property
    def last_error(self) -> str | None:
        return self.state.last_error

    @property
    def retry_count(self) -> int:
        return self.state.retry_count

    def subscribe(self, listener: Listener) -> None:
        """Register a callback run after every observable state change."""
        self._listeners.append(listener)

    def _notify(self) -> None:
        for listener in self._listeners:
            try:
                listener()
            except Exception:
                logger.exception(f"Session listener {listener!r} failed")

    async def submit(self, text: str) -> bool:
        """Run one turn for ``text``.

        Blank text and submissions made while a reply is pending are ignored.

        Args:
            text: The user's text. Sent and recorded without trimming.

        Returns:
            True if a request was dispatched, False if the call was a no-op.
        """
        if not text.strip():
            return False
        if self.state.is_awaiting_reply:
            logger.debug("Ignoring submission while a reply is pending")
            return False

        state = self.state
        state.append(MessageRole.USER, text)
        state.pending_input = ""
        state.is_awaiting_reply = True
        state.last_error = None

        try:
            self._notify()
            logger.debug(f"Dispatching turn {len(state.transcript)} to {self._client.url}")
            reply = await self._client.send(text)
        except WebhookError as e:
            logger.error(f"Turn failed (attempt {state.retry_count + 1}): {e.detail}")
            self._record_failure(e.detail)
        except Exception as e:
            logger.exception(f"Unexpected failure (attempt {state.retry_count + 1})")
            self._record_failure(str(e) or type(e).__name__)
        else:
            state.append(MessageRole.ASSISTANT, reply)
            state.retry_count = 0
            state.last_error = None
        finally:
            state.is_awaiting_reply = False
            self._notify()

        return True

    def _record_failure(self, detail: str) -> None:
        state = self.state
        state.last_error = attempt_error_text(state.retry_count + 1)
        state.append(MessageRole.ERROR, error_message_text(detail))
        state.retry_count += 1

    async def submit_pending(self) -> bool:
        """Submit whatever is currently in the input buffer."""
        return await self.submit(self.state.pending_input)

    def last_user_message(self) -> Message | None:
        """Most recent user entry in the transcript, if any."""
        for message in reversed(self.state.transcript):
            if message.is_user:
                return message
        return None

    async def retry(self) -> bool:
        """Replay the most recent user message as a new turn.

        The original entry is left untouched; a new user entry is appended.

        Returns:
            True if a request was dispatched, False if there was nothing to replay.
        """
        message = self.last_user_message()
        if message is None:
            return False
        logger.info(f"Retrying last message (attempt {self.state.retry_count + 1})")
        return await self.submit(message.content)
