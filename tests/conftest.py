"""Pytest fixtures and shared test configuration.

Fixtures:
    - chat_config: Config pointing at a fake webhook URL
    - make_client: Build a WebhookClient answered by a handler function
    - make_controller: Build a SessionController answered by a handler function
    - async_client: HTTPX client for the host FastAPI app
    - user: simulated NiceGUI user (nicegui.testing.user_plugin)
"""

from collections.abc import AsyncGenerator, Callable

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from velaris.api import app
from velaris.chat.client import WebhookClient
from velaris.chat.controller import SessionController
from velaris.config import ChatConfig

pytest_plugins = ["nicegui.testing.user_plugin"]

WEBHOOK_URL = "http://webhook.test/webhook/agent"


@pytest.fixture
def chat_config() -> ChatConfig:
    """Return config aimed at the fake webhook host.

    Returns:
        ChatConfig with a short timeout.
    """
    return ChatConfig(webhook_url=WEBHOOK_URL, request_timeout=5.0)


@pytest.fixture
def make_client(chat_config: ChatConfig) -> Callable[..., WebhookClient]:
    """Factory for clients whose requests are answered by ``handler``.

    Returns:
        Callable taking an httpx MockTransport handler.
    """

    def factory(handler: Callable) -> WebhookClient:
        return WebhookClient(chat_config, transport=httpx.MockTransport(handler))

    return factory


@pytest.fixture
def make_controller(
    make_client: Callable[..., WebhookClient],
) -> Callable[..., SessionController]:
    """Factory for controllers whose webhook is answered by ``handler``."""

    def factory(handler: Callable) -> SessionController:
        return SessionController(make_client(handler))

    return factory


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for the host app.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
