"""Dispatch webhook events to registered callbacks."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any, TypeVar

from ..core.exceptions import InvalidSignatureError, WebhookParseError
from ..core.logger import get_logger
from ..models.events import Event, MessageEvent
from .parser import WebhookParser

if TYPE_CHECKING:
    from ..api.client import LineBotApi

logger = get_logger("webhook.handler")

EventCallback = Callable[[Any], Any]
ErrorCallback = Callable[[Exception], Any]
F = TypeVar("F", bound=Callable[..., Any])


class WebhookHandler:
    """Validate webhook requests and route each event to a callback.

    A callback is looked up by the exact event class and, for message events,
    the exact message class. Lookup order is (event, message), then
    (event, any message), then the default callback. Events with no callback
    are logged and skipped.

    Example:
        ```python
        handler = WebhookHandler(channel_secret, api=LineBotApi(token))

        @handler.add(MessageEvent, message=TextMessage)
        def echo(event):
            handler.api.reply_message(event.reply_token, new_text_message(event.message.text))

        @handler.add(FollowEvent)
        def greet(event):
            ...

        handler.handle(body, signature)
        ```
    """

    def __init__(self, channel_secret: str, api: LineBotApi | None = None) -> None:
        """Initialize the handler.

        Args:
            channel_secret: Channel secret used to validate X-Line-Signature.
            api: Optional client exposed to callbacks as ``handler.api``.
        """
        self.parser = WebhookParser(channel_secret)
        self.api = api
        self._handlers: dict[tuple[type[Event], type | None], EventCallback] = {}
        self._default: EventCallback | None = None
        self._error: ErrorCallback | None = None

    def add(
        self,
        event: type[Event],
        message: type | Sequence[type] | None = None,
    ) -> Callable[[F], F]:
        """Register a callback for an event class, optionally narrowed by message class."""
        if message is not None and not issubclass(event, MessageEvent):
            raise ValueError("The message filter only applies to MessageEvent")

        def decorator(func: F) -> F:
            if message is None:
                self._register(event, None, func)
            elif isinstance(message, Sequence):
                for message_cls in message:
                    self._register(event, message_cls, func)
            else:
                self._register(event, message, func)
            return func

        return decorator

    def default(self) -> Callable[[F], F]:
        """Register the callback used when no specific one matches."""

        def decorator(func: F) -> F:
            self._default = func
            return func

        return decorator

    def error(self) -> Callable[[F], F]:
        """Register a callback for requests that fail validation or parsing.

        The error is re-raised after the callback runs.
        """

        def decorator(func: F) -> F:
            self._error = func
            return func

        return decorator

    def _register(self, event: type[Event], message: type | None, func: EventCallback) -> None:
        key = (event, message)
        if key in self._handlers:
            logger.warning(
                "Replacing callback for %s/%s",
                event.__name__,
                getattr(message, "__name__", "*"),
            )
        self._handlers[key] = func

    def resolve(self, event: Event) -> EventCallback | None:
        """Return the callback an event would be dispatched to."""
        if isinstance(event, MessageEvent):
            func = self._handlers.get((type(event), type(event.message)))
            if func is not None:
                return func
        func = self._handlers.get((type(event), None))
        if func is not None:
            return func
        return self._default

    def handle(self, body: str | bytes, signature: str | None) -> list[Event]:
        """Validate, parse and dispatch one webhook request.

        Returns:
            The parsed events, in delivery order.

        Raises:
            InvalidSignatureError: If the signature does not match.
            WebhookParseError: If the body cannot be decoded.
        """
        try:
            events = self.parser.parse(body, signature)
        except (InvalidSignatureError, WebhookParseError) as exc:
            if self._error is not None:
                self._error(exc)
            raise

        for event in events:
            func = self.resolve(event)
            if func is None:
                logger.info("No callback registered for %s event", event.type)
                continue
            logger.debug("Dispatching %s event to %s", event.type, getattr(func, "__name__", func))
            func(event)
        return events
