"""Failure classes for a single webhook turn.

Every way a turn can fail maps to one subclass of WebhookError, so the session
controller can handle them on one path.
"""


class WebhookError(Exception):
    """Raised when a webhook turn yields no usable reply.

    Attributes:
        detail: Human-readable description of the underlying failure.
    """

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class WebhookTransportError(WebhookError):
    """Raised when the request could not complete (connection, timeout)."""

    pass


class WebhookStatusError(WebhookError):
    """Raised when the webhook answers with a non-2xx status."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Erro HTTP! status: {status_code}")
        self.status_code = status_code


class EmptyReplyError(WebhookError):
    """Raised when a response arrives but yields no reply text."""

    def __init__(self, detail: str = "Resposta vazia do servidor") -> None:
        super().__init__(detail)
