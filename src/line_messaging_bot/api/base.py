"""Request building and response decoding shared by the sync and async clients."""

from __future__ import annotations

from collections.abc import Sequence
from importlib.metadata import PackageNotFoundError, version
from typing import Any

import httpx

from ..core.config import DEFAULT_ENDPOINT_BASE, BotConfig
from ..core.exceptions import LineBotApiError
from ..core.logger import get_logger
from ..models.messages import SendingMessage
from ..models.responses import (
    BasicResponse,
    ErrorResponse,
    MessageContentResponse,
    ProfileResponse,
)

logger = get_logger("api")

try:  # pragma: no cover - best-effort during development
    SDK_VERSION = version("line-messaging-bot")
except PackageNotFoundError:  # pragma: no cover
    SDK_VERSION = "0.0.0"

USER_AGENT = f"line-messaging-bot/{SDK_VERSION}"

MAX_MESSAGES_PER_REQUEST = 5
MAX_MULTICAST_RECIPIENTS = 150

Messages = SendingMessage | Sequence[SendingMessage]


class BaseLineBotApi:
    """Endpoint table and wire handling common to both clients.

    Subclasses own the transport and implement the operations on top of
    ``_build_*`` and ``_decode_*``.
    """

    # API endpoints
    REPLY_MESSAGE_URL = "/v2/bot/message/reply"
    PUSH_MESSAGE_URL = "/v2/bot/message/push"
    MULTICAST_URL = "/v2/bot/message/multicast"
    GET_PROFILE_URL = "/v2/bot/profile/{user_id}"
    GET_MESSAGE_CONTENT_URL = "/v2/bot/message/{message_id}/content"
    LEAVE_GROUP_URL = "/v2/bot/group/{group_id}/leave"
    LEAVE_ROOM_URL = "/v2/bot/room/{room_id}/leave"

    def __init__(
        self,
        channel_access_token: str,
        endpoint_base: str = DEFAULT_ENDPOINT_BASE,
        timeout: float = 10.0,
    ) -> None:
        """Initialize client settings.

        Args:
            channel_access_token: Channel access token sent as a Bearer token.
            endpoint_base: Base URL of the Messaging API (override for testing).
            timeout: Default request timeout in seconds.
        """
        if not channel_access_token:
            raise ValueError("Channel access token is required")
        self.channel_access_token = channel_access_token
        self.endpoint_base = endpoint_base.rstrip("/")
        self.timeout = timeout

    @classmethod
    def from_config(cls, config: BotConfig, **kwargs: Any) -> Any:
        """Create a client from a loaded BotConfig."""
        return cls(
            channel_access_token=config.channel.channel_access_token,
            endpoint_base=config.http.endpoint_base,
            timeout=config.http.timeout,
            **kwargs,
        )

    # ------------------------------------------------------------------
    # Request building
    # ------------------------------------------------------------------
    def _url(self, path: str) -> str:
        return f"{self.endpoint_base}{path}"

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.channel_access_token}",
            "User-Agent": USER_AGENT,
        }

    @staticmethod
    def _request_kwargs(timeout: float | None) -> dict[str, Any]:
        if timeout is None:
            return {}
        return {"timeout": timeout}

    @staticmethod
    def _encode_messages(messages: Messages) -> list[dict[str, Any]]:
        if not isinstance(messages, Sequence):
            messages = [messages]
        if not messages:
            raise ValueError("At least one message is required")
        if len(messages) > MAX_MESSAGES_PER_REQUEST:
            raise ValueError(
                f"At most {MAX_MESSAGES_PER_REQUEST} messages can be sent per request, "
                f"got {len(messages)}"
            )
        return [message.to_dict() for message in messages]

    def _build_reply_body(self, reply_token: str, messages: Messages) -> dict[str, Any]:
        if not reply_token:
            raise ValueError("Reply token is required")
        return {"replyToken": reply_token, "messages": self._encode_messages(messages)}

    def _build_push_body(self, to: str, messages: Messages) -> dict[str, Any]:
        if not to:
            raise ValueError("Recipient ID is required")
        return {"to": to, "messages": self._encode_messages(messages)}

    def _build_multicast_body(self, to: Sequence[str], messages: Messages) -> dict[str, Any]:
        if isinstance(to, str):
            to = [to]
        recipients = list(to)
        if not recipients:
            raise ValueError("At least one recipient is required")
        if len(recipients) > MAX_MULTICAST_RECIPIENTS:
            raise ValueError(
                f"At most {MAX_MULTICAST_RECIPIENTS} recipients are allowed, got {len(recipients)}"
            )
        return {"to": recipients, "messages": self._encode_messages(messages)}

    # ------------------------------------------------------------------
    # Response decoding
    # ------------------------------------------------------------------
    @staticmethod
    def _raise_for_error(response: httpx.Response) -> None:
        """Raise LineBotApiError for any non-2xx response."""
        if response.is_success:
            return

        error: ErrorResponse | None
        try:
            error = ErrorResponse.model_validate(response.json())
        except ValueError:
            error = None

        request_id = response.headers.get("X-Line-Request-Id")
        logger.error(
            "LINE API request %s %s failed: status=%d, message=%s, request_id=%s",
            response.request.method,
            response.request.url.path,
            response.status_code,
            error.message if error else response.text[:200],
            request_id,
        )
        raise LineBotApiError(response.status_code, error, request_id=request_id)

    @staticmethod
    def _decode_basic(response: httpx.Response) -> BasicResponse:
        return BasicResponse(request_id=response.headers.get("X-Line-Request-Id"))

    @staticmethod
    def _decode_profile(response: httpx.Response) -> ProfileResponse:
        return ProfileResponse.model_validate(response.json())

    @staticmethod
    def _decode_content(response: httpx.Response) -> MessageContentResponse:
        # Content-Length is the encoded size when the body was compressed
        content = response.content
        return MessageContentResponse(
            content=content,
            content_type=response.headers.get("Content-Type", ""),
            content_length=len(content),
        )
