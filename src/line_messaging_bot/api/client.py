"""Synchronous Messaging API client."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import httpx

from ..core.config import DEFAULT_ENDPOINT_BASE
from ..core.logger import get_logger
from ..models.responses import BasicResponse, MessageContentResponse, ProfileResponse
from .base import BaseLineBotApi, Messages

logger = get_logger("api.client")


class LineBotApi(BaseLineBotApi):
    """Client for the LINE Messaging API.

    Every operation accepts ``timeout=`` to bound that single call; an
    expired timeout raises ``httpx.TimeoutException``. Non-2xx responses
    raise ``LineBotApiError``.

    Example:
        ```python
        from line_messaging_bot.api import LineBotApi
        from line_messaging_bot.models import new_text_message

        with LineBotApi("channel-access-token") as api:
            api.push_message("U4af4980629...", new_text_message("Hello!"))
            profile = api.get_profile("U4af4980629...")
            print(profile.display_name)
        ```
    """

    def __init__(
        self,
        channel_access_token: str,
        endpoint_base: str = DEFAULT_ENDPOINT_BASE,
        timeout: float = 10.0,
        http_client: httpx.Client | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            channel_access_token: Channel access token.
            endpoint_base: Base URL of the Messaging API.
            timeout: Default request timeout in seconds.
            http_client: Optional httpx client to use instead of an owned one.
        """
        super().__init__(channel_access_token, endpoint_base, timeout)
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client(timeout=self.timeout)

    def __enter__(self) -> LineBotApi:
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit."""
        self.close()

    def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client:
            self._client.close()

    def _request(
        self,
        method: str,
        path: str,
        *,
        json: dict[str, Any] | None = None,
        timeout: float | None = None,
    ) -> httpx.Response:
        logger.debug("%s %s", method, path)
        response = self._client.request(
            method,
            self._url(path),
            headers=self._headers(),
            json=json,
            **self._request_kwargs(timeout),
        )
        self._raise_for_error(response)
        return response

    def reply_message(
        self,
        reply_token: str,
        messages: Messages,
        *,
        timeout: float | None = None,
    ) -> BasicResponse:
        """Reply to an event using its reply token.

        Args:
            reply_token: Token from a message, follow, join, postback or beacon event.
            messages: One message or up to five messages.
            timeout: Per-call timeout override in seconds.
        """
        body = self._build_reply_body(reply_token, messages)
        return self._decode_basic(
            self._request("POST", self.REPLY_MESSAGE_URL, json=body, timeout=timeout)
        )

    def push_message(
        self,
        to: str,
        messages: Messages,
        *,
        timeout: float | None = None,
    ) -> BasicResponse:
        """Send messages to a user, group or room at any time.

        Args:
            to: userId, groupId or roomId of the recipient.
            messages: One message or up to five messages.
            timeout: Per-call timeout override in seconds.
        """
        body = self._build_push_body(to, messages)
        return self._decode_basic(
            self._request("POST", self.PUSH_MESSAGE_URL, json=body, timeout=timeout)
        )

    def multicast(
        self,
        to: Sequence[str],
        messages: Messages,
        *,
        timeout: float | None = None,
    ) -> BasicResponse:
        """Send the same messages to up to 150 users."""
        body = self._build_multicast_body(to, messages)
        return self._decode_basic(
            self._request("POST", self.MULTICAST_URL, json=body, timeout=timeout)
        )

    def get_profile(self, user_id: str, *, timeout: float | None = None) -> ProfileResponse:
        """Get the display name, picture and status message of a user."""
        url = self.GET_PROFILE_URL.format(user_id=user_id)
        return self._decode_profile(self._request("GET", url, timeout=timeout))

    def get_message_content(
        self, message_id: str, *, timeout: float | None = None
    ) -> MessageContentResponse:
        """Download the binary content of an image, video or audio message."""
        url = self.GET_MESSAGE_CONTENT_URL.format(message_id=message_id)
        return self._decode_content(self._request("GET", url, timeout=timeout))

    def leave_group(self, group_id: str, *, timeout: float | None = None) -> BasicResponse:
        """Make the bot leave a group."""
        url = self.LEAVE_GROUP_URL.format(group_id=group_id)
        return self._decode_basic(self._request("POST", url, timeout=timeout))

    def leave_room(self, room_id: str, *, timeout: float | None = None) -> BasicResponse:
        """Make the bot leave a room."""
        url = self.LEAVE_ROOM_URL.format(room_id=room_id)
        return self._decode_basic(self._request("POST", url, timeout=timeout))
