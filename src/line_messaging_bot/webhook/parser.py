"""Webhook body parsing: signature check, envelope decoding, typed events."""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError

from ..core.exceptions import InvalidSignatureError, WebhookParseError
from ..core.logger import get_logger
from ..models.events import Event, parse_event
from .signature import SignatureValidator

logger = get_logger("webhook.parser")


def parse_events(body: str | bytes) -> list[Event]:
    """Decode a webhook body into events without checking its signature.

    Raises:
        WebhookParseError: If the body is not a ``{"events": [...]}`` envelope
            or an event lacks required fields.
    """
    text = body if isinstance(body, str) else body.decode("utf-8", errors="replace")
    try:
        raw = body.decode("utf-8") if isinstance(body, bytes) else body
        payload: Any = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise WebhookParseError(f"Invalid JSON body: {exc}", body=text) from exc

    if not isinstance(payload, dict) or not isinstance(payload.get("events"), list):
        raise WebhookParseError("Webhook body must contain an 'events' list", body=text)

    events: list[Event] = []
    for index, item in enumerate(payload["events"]):
        if not isinstance(item, dict):
            raise WebhookParseError(f"Event #{index} is not an object", body=text)
        try:
            events.append(parse_event(item))
        except ValidationError as exc:
            raise WebhookParseError(f"Invalid event #{index}: {exc}", body=text) from exc
    return events


class WebhookParser:
    """Validate and parse webhook requests for one channel.

    Example:
        ```python
        parser = WebhookParser(channel_secret)
        events = parser.parse(body, request.headers["X-Line-Signature"])
        ```
    """

    def __init__(self, channel_secret: str) -> None:
        self.signature_validator = SignatureValidator(channel_secret)

    def parse(self, body: str | bytes, signature: str | None) -> list[Event]:
        """Validate the signature, then decode the body.

        Raises:
            InvalidSignatureError: If the signature is missing or does not match.
            WebhookParseError: If the body cannot be decoded.
        """
        if not self.signature_validator.validate(body, signature):
            logger.warning("Rejected webhook request with invalid signature")
            raise InvalidSignatureError(f"Invalid signature: {signature!r}")

        events = parse_events(body)
        logger.debug("Parsed %d webhook event(s)", len(events))
        return events
