"""Tests for the asynchronous Messaging API client."""

from __future__ import annotations

import asyncio
import json

import httpx
import pytest
from pytest_httpx import HTTPXMock

from line_messaging_bot.api import AsyncLineBotApi
from line_messaging_bot.core import LineBotApiError
from line_messaging_bot.models import new_text_message


class TestAsyncLineBotApi:
    """Tests for AsyncLineBotApi."""

    @pytest.mark.anyio
    async def test_reply_message(self, channel_token, endpoint_base, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            method="POST", url="https://api.line.test/v2/bot/message/reply", json={}
        )

        async with AsyncLineBotApi(channel_token, endpoint_base=endpoint_base) as api:
            await api.reply_message("token", new_text_message("Hello"))

        request = httpx_mock.get_request()
        assert request.headers["Authorization"] == "Bearer testtoken"
        assert json.loads(request.content) == {
            "replyToken": "token",
            "messages": [{"type": "text", "text": "Hello"}],
        }

    @pytest.mark.anyio
    async def test_push_and_multicast(self, channel_token, endpoint_base, httpx_mock: HTTPXMock):
        httpx_mock.add_response(url="https://api.line.test/v2/bot/message/push", json={})
        httpx_mock.add_response(url="https://api.line.test/v2/bot/message/multicast", json={})

        async with AsyncLineBotApi(channel_token, endpoint_base=endpoint_base) as api:
            await api.push_message("U1", new_text_message("a"))
            await api.multicast(["U1", "U2"], new_text_message("b"))

        assert len(httpx_mock.get_requests()) == 2

    @pytest.mark.anyio
    async def test_get_profile(self, channel_token, endpoint_base, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            method="GET",
            url="https://api.line.test/v2/bot/profile/U123",
            json={"displayName": "taro", "userId": "U123"},
        )

        async with AsyncLineBotApi(channel_token, endpoint_base=endpoint_base) as api:
            profile = await api.get_profile("U123")

        assert profile.display_name == "taro"

    @pytest.mark.anyio
    async def test_get_message_content(
        self, channel_token, endpoint_base, httpx_mock: HTTPXMock
    ):
        httpx_mock.add_response(
            url="https://api.line.test/v2/bot/message/1/content",
            content=b"data",
            headers={"Content-Type": "video/mp4"},
        )

        async with AsyncLineBotApi(channel_token, endpoint_base=endpoint_base) as api:
            content = await api.get_message_content("1")

        assert content.content == b"data"
        assert content.content_type == "video/mp4"

    @pytest.mark.anyio
    async def test_leave(self, channel_token, endpoint_base, httpx_mock: HTTPXMock):
        httpx_mock.add_response(url="https://api.line.test/v2/bot/group/C1/leave", json={})
        httpx_mock.add_response(url="https://api.line.test/v2/bot/room/R1/leave", json={})

        async with AsyncLineBotApi(channel_token, endpoint_base=endpoint_base) as api:
            await api.leave_group("C1")
            await api.leave_room("R1")

        assert [r.url.path for r in httpx_mock.get_requests()] == [
            "/v2/bot/group/C1/leave",
            "/v2/bot/room/R1/leave",
        ]

    @pytest.mark.anyio
    async def test_error_response(self, channel_token, endpoint_base, httpx_mock: HTTPXMock):
        httpx_mock.add_response(status_code=400, json={"message": "Invalid reply token"})

        async with AsyncLineBotApi(channel_token, endpoint_base=endpoint_base) as api:
            with pytest.raises(LineBotApiError) as exc_info:
                await api.reply_message("expired", new_text_message("Hello"))

        assert exc_info.value.status_code == 400
        assert exc_info.value.error.message == "Invalid reply token"

    @pytest.mark.anyio
    async def test_timeout(self, channel_token, endpoint_base, httpx_mock: HTTPXMock):
        httpx_mock.add_exception(httpx.ConnectTimeout("Connect timed out"))

        async with AsyncLineBotApi(channel_token, endpoint_base=endpoint_base) as api:
            with pytest.raises(httpx.TimeoutException):
                await api.leave_room("R1", timeout=0.1)

    @pytest.mark.anyio
    async def test_close_owned_client(self, channel_token):
        api = AsyncLineBotApi(channel_token)

        await api.close()

        assert api._client.is_closed

    @pytest.mark.anyio
    async def test_cancel_pending_request(
        self, channel_token, endpoint_base, httpx_mock: HTTPXMock
    ):
        """Test cancelling the awaiting task abandons the in-flight request."""
        entered = asyncio.Event()
        finished = []

        async def slow_profile(request: httpx.Request) -> httpx.Response:
            entered.set()
            await asyncio.sleep(10)
            finished.append(request)
            return httpx.Response(200, json={"displayName": "taro", "userId": "U1"})

        httpx_mock.add_callback(slow_profile)

        async with AsyncLineBotApi(channel_token, endpoint_base=endpoint_base) as api:
            task = asyncio.create_task(api.get_profile("U1"))
            await asyncio.wait_for(entered.wait(), timeout=5)
            task.cancel()

            with pytest.raises(asyncio.CancelledError):
                await task

        assert task.cancelled()
        assert finished == []
