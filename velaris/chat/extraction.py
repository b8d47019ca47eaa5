"""Reply extraction from webhook response bodies.

The webhook answers with either a JSON array whose first element carries the
reply, or a bare JSON object. The reply text is looked up through an ordered
chain of extractors, and the first non-empty result wins:

    1. the ``saída`` field
    2. the ``output`` field
    3. the compact JSON serialization of the whole payload

The last step accepts any JSON as displayable text. Upstream responses that
hit it are logged, since they usually mean the webhook's output mapping is
misconfigured.
"""

import json
import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

Extractor = Callable[[Any], str | None]

REPLY_KEYS = ("saída", "output")


def _serialize(value: Any) -> str:
    """Serialize a JSON value the way a browser's JSON.stringify would."""
    return json.dumps(value, ensure_ascii=False, separators=(",", ":"))


def field_extractor(key: str) -> Extractor:
    """Build an extractor that reads ``key`` from an object payload.

    Strings are returned as-is. Other truthy values (numbers, nested objects)
    are serialized. Missing, null, or empty values fall through.
    """

    def extract(payload: Any) -> str | None:
        if not isinstance(payload, dict):
            return None
        value = payload.get(key)
        if not value:
            return None
        if isinstance(value, str):
            return value
        return _serialize(value)

    extract.__name__ = f"extract_{key}"
    return extract


def serialized_extractor(payload: Any) -> str | None:
    """Fall back to the serialized payload.

    Null and empty containers serialize to nothing so they count as empty
    replies rather than a literal ``{}`` bubble.
    """
    if payload is None or (isinstance(payload, dict | list) and not payload):
        return None
    logger.warning("Webhook reply has no saída/output field; displaying raw body")
    return _serialize(payload)


EXTRACTORS: list[Extractor] = [
    *(field_extractor(key) for key in REPLY_KEYS),
    serialized_extractor,
]


def select_payload(body: Any) -> Any:
    """Pick the element the reply is read from.

    A non-empty array contributes its first element, anything else is used
    directly.
    """
    if isinstance(body, list) and body:
        return body[0]
    return body


def extract_reply(body: Any, extractors: list[Extractor] | None = None) -> str:
    """Extract reply text from a decoded webhook response body.

    Args:
        body: Decoded JSON response body.
        extractors: Extractor chain to try in order. Defaults to EXTRACTORS.

    Returns:
        The first non-empty extracted string, or "" if none produced text.
    """
    payload = select_payload(body)
    for extractor in extractors if extractors is not None else EXTRACTORS:
        reply = extractor(payload)
        if reply:
            return reply
    return ""
