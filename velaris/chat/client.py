"""HTTP client for the message-processing webhook.

One call per turn: POST the user's text, decode the JSON body, and extract
the reply. Every failure is raised as a WebhookError subclass.
"""

import logging

import httpx

from velaris.chat.errors import EmptyReplyError, WebhookStatusError, WebhookTransportError
from velaris.chat.extraction import extract_reply
from velaris.config import ChatConfig, get_chat_config
from velaris.models.schemas import WebhookRequest

logger = logging.getLogger(__name__)


class WebhookClient:
    """Sends user messages to the webhook and returns reply text."""

    def __init__(
        self,
        config: ChatConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Optional chat configuration.
                    Loads from environment if not provided.
            transport: Optional httpx transport, used to route requests
                       somewhere other than the network.
        """
        self._config = config or get_chat_config()
        self._transport = transport

    @property
    def url(self) -> str:
        return self._config.webhook_url

    async def send(self, message: str) -> str:
        """Send one message and return the extracted reply.

        Args:
            message: The raw user text, sent unmodified.

        Returns:
            Non-empty reply text.

        Raises:
            WebhookTransportError: The request could not complete.
            WebhookStatusError: The webhook answered with a non-2xx status.
            EmptyReplyError: The body was not JSON or held no reply text.
        """
        payload = WebhookRequest(message=message).model_dump()

        async with httpx.AsyncClient(
            timeout=self._config.request_timeout,
            transport=self._transport,
            follow_redirects=True,
        ) as client:
            try:
                response = await client.post(
                    self.url,
                    json=payload,
                    headers={"Content-Type": "application/json"},
                )
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                raise WebhookStatusError(e.response.status_code) from e
            except httpx.RequestError as e:
                raise WebhookTransportError(str(e) or type(e).__name__) from e

        try:
            body = response.json()
            reply = extract_reply(body)
        except (ValueError, RecursionError) as e:
            logger.warning(f"Webhook returned an unusable body: {response.text[:200]!r}")
            raise EmptyReplyError(f"Resposta inválida do servidor: {type(e).__name__}") from e

        if not reply:
            raise EmptyReplyError()
        return reply
