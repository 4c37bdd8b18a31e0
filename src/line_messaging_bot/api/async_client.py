"""Asynchronous Messaging API client.

Mirrors ``LineBotApi`` on top of ``httpx.AsyncClient``. Cancelling the task
that awaits an operation cancels the underlying request.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import httpx

from ..core.config import DEFAULT_ENDPOINT_BASE
from ..core.logger import get_logger
from ..models.responses import BasicResponse, MessageContentResponse, ProfileResponse
from .base import BaseLineBotApi, Messages

logger = get_logger("api.async_client")


class AsyncLineBotApi(BaseLineBotApi):
    """Async client for the LINE Messaging API.

    Example:
        ```python
        async with AsyncLineBotApi("channel-access-token") as api:
            await api.reply_message(event.reply_token, new_text_message("Hi"))
        ```
    """

    def __init__(
        self,
        channel_access_token: str,
        endpoint_base: str = DEFAULT_ENDPOINT_BASE,
        timeout: float = 10.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            channel_access_token: Channel access token.
            endpoint_base: Base URL of the Messaging API.
            timeout: Default request timeout in seconds.
            http_client: Optional httpx async client to use instead of an owned one.
        """
        super().__init__(channel_access_token, endpoint_base, timeout)
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(timeout=self.timeout)

    async def __aenter__(self) -> AsyncLineBotApi:
        """Async context manager entry."""
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Async context manager exit."""
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        *,
        json: dict[str, Any] | None = None,
        timeout: float | None = None,
    ) -> httpx.Response:
        logger.debug("%s %s", method, path)
        response = await self._client.request(
            method,
            self._url(path),
            headers=self._headers(),
            json=json,
            **self._request_kwargs(timeout),
        )
        self._raise_for_error(response)
        return response

    async def reply_message(
        self,
        reply_token: str,
        messages: Messages,
        *,
        timeout: float | None = None,
    ) -> BasicResponse:
        body = self._build_reply_body(reply_token, messages)
        response = await self._request("POST", self.REPLY_MESSAGE_URL, json=body, timeout=timeout)
        return self._decode_basic(response)

    async def push_message(
        self,
        to: str,
        messages: Messages,
        *,
        timeout: float | None = None,
    ) -> BasicResponse:
        body = self._build_push_body(to, messages)
        response = await self._request("POST", self.PUSH_MESSAGE_URL, json=body, timeout=timeout)
        return self._decode_basic(response)

    async def multicast(
        self,
        to: Sequence[str],
        messages: Messages,
        *,
        timeout: float | None = None,
    ) -> BasicResponse:
        body = self._build_multicast_body(to, messages)
        response = await self._request("POST", self.MULTICAST_URL, json=body, timeout=timeout)
        return self._decode_basic(response)

    async def get_profile(self, user_id: str, *, timeout: float | None = None) -> ProfileResponse:
        url = self.GET_PROFILE_URL.format(user_id=user_id)
        return self._decode_profile(await self._request("GET", url, timeout=timeout))

    async def get_message_content(
        self, message_id: str, *, timeout: float | None = None
    ) -> MessageContentResponse:
        url = self.GET_MESSAGE_CONTENT_URL.format(message_id=message_id)
        return self._decode_content(await self._request("GET", url, timeout=timeout))

    async def leave_group(self, group_id: str, *, timeout: float | None = None) -> BasicResponse:
        url = self.LEAVE_GROUP_URL.format(group_id=group_id)
        return self._decode_basic(await self._request("POST", url, timeout=timeout))

    async def leave_room(self, room_id: str, *, timeout: float | None = None) -> BasicResponse:
        url = self.LEAVE_ROOM_URL.format(room_id=room_id)
        return self._decode_basic(await self._request("POST", url, timeout=timeout))
