"""Tests for the synchronous Messaging API client."""

from __future__ import annotations

import gzip
import json

import httpx
import pytest
from pytest_httpx import HTTPXMock

from line_messaging_bot.api import USER_AGENT, LineBotApi
from line_messaging_bot.core import BotConfig, LineBotApiError
from line_messaging_bot.models import (
    BasicResponse,
    ErrorResponse,
    new_sticker_message,
    new_text_message,
)


@pytest.fixture
def api(channel_token, endpoint_base):
    """Provides a client pointed at the test endpoint."""
    with LineBotApi(channel_token, endpoint_base=endpoint_base) as client:
        yield client


def _body(request: httpx.Request) -> dict:
    return json.loads(request.content)


# ==============================================================================
# Construction
# ==============================================================================


class TestConstruction:
    """Tests for client construction and lifecycle."""

    def test_requires_token(self):
        with pytest.raises(ValueError, match="Channel access token is required"):
            LineBotApi("")

    def test_from_config(self):
        config = BotConfig(
            channel={"channel_secret": "s", "channel_access_token": "t"},
            http={"endpoint_base": "https://api.line.test/", "timeout": 3},
        )

        with LineBotApi.from_config(config) as client:
            assert client.channel_access_token == "t"
            assert client.endpoint_base == "https://api.line.test"
            assert client.timeout == 3

    def test_context_manager_closes_owned_client(self, channel_token):
        with LineBotApi(channel_token) as client:
            pass

        assert client._client.is_closed

    def test_injected_client_left_open(self, channel_token):
        http_client = httpx.Client()

        with LineBotApi(channel_token, http_client=http_client):
            pass

        assert not http_client.is_closed
        http_client.close()


# ==============================================================================
# Sending messages
# ==============================================================================


class TestSendMessages:
    """Tests for reply, push and multicast."""

    def test_reply_message(self, api, httpx_mock: HTTPXMock):
        """Test reply builds the documented request."""
        httpx_mock.add_response(
            method="POST",
            url="https://api.line.test/v2/bot/message/reply",
            json={},
            headers={"X-Line-Request-Id": "req-1"},
        )

        result = api.reply_message("nHuyWiB7yP5Zw52FIkcQobQuGDXCTA", new_text_message("Hello"))

        request = httpx_mock.get_request()
        assert request.headers["Authorization"] == "Bearer testtoken"
        assert request.headers["User-Agent"] == USER_AGENT
        assert request.headers["Content-Type"] == "application/json"
        assert _body(request) == {
            "replyToken": "nHuyWiB7yP5Zw52FIkcQobQuGDXCTA",
            "messages": [{"type": "text", "text": "Hello"}],
        }
        assert isinstance(result, BasicResponse)
        assert result.request_id == "req-1"

    def test_push_message_multiple(self, api, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            method="POST", url="https://api.line.test/v2/bot/message/push", json={}
        )

        api.push_message("U123", [new_text_message("Hello"), new_sticker_message("1", "1")])

        assert _body(httpx_mock.get_request()) == {
            "to": "U123",
            "messages": [
                {"type": "text", "text": "Hello"},
                {"type": "sticker", "packageId": "1", "stickerId": "1"},
            ],
        }

    def test_multicast(self, api, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            method="POST", url="https://api.line.test/v2/bot/message/multicast", json={}
        )

        api.multicast(["U1", "U2"], new_text_message("Hi all"))

        assert _body(httpx_mock.get_request())["to"] == ["U1", "U2"]

    def test_too_many_messages(self, api):
        messages = [new_text_message(str(i)) for i in range(6)]

        with pytest.raises(ValueError, match="At most 5 messages"):
            api.push_message("U123", messages)

    def test_no_messages(self, api):
        with pytest.raises(ValueError, match="At least one message"):
            api.push_message("U123", [])

    def test_too_many_recipients(self, api):
        with pytest.raises(ValueError, match="At most 150 recipients"):
            api.multicast([f"U{i}" for i in range(151)], new_text_message("Hi"))

    def test_empty_reply_token(self, api):
        with pytest.raises(ValueError, match="Reply token is required"):
            api.reply_message("", new_text_message("Hi"))


# ==============================================================================
# Other operations
# ==============================================================================


class TestOtherOperations:
    """Tests for profile, content and leave operations."""

    def test_get_profile(self, api, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            method="GET",
            url="https://api.line.test/v2/bot/profile/U123",
            json={
                "displayName": "LINE taro",
                "userId": "U123",
                "pictureUrl": "http://obs.line-apps.com/...",
                "statusMessage": "Hello, LINE!",
            },
        )

        profile = api.get_profile("U123")

        assert profile.user_id == "U123"
        assert profile.display_name == "LINE taro"
        assert profile.status_message == "Hello, LINE!"

    def test_get_profile_without_optional_fields(self, api, httpx_mock: HTTPXMock):
        httpx_mock.add_response(json={"displayName": "taro", "userId": "U123"})

        profile = api.get_profile("U123")

        assert profile.picture_url == ""
        assert profile.status_message == ""

    def test_get_message_content(self, api, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            method="GET",
            url="https://api.line.test/v2/bot/message/325708/content",
            content=b"\xff\xd8\xff\xe0",
            headers={"Content-Type": "image/jpeg"},
        )

        content = api.get_message_content("325708")

        assert content.content == b"\xff\xd8\xff\xe0"
        assert content.content_type == "image/jpeg"
        assert content.content_length == 4

    def test_get_message_content_length_after_decompression(self, api, httpx_mock: HTTPXMock):
        """Test content_length is the size of the decoded bytes."""
        payload = b"video-bytes" * 100
        httpx_mock.add_response(
            content=gzip.compress(payload),
            headers={"Content-Type": "video/mp4", "Content-Encoding": "gzip"},
        )

        content = api.get_message_content("325709")

        assert content.content == payload
        assert content.content_length == len(payload)

    def test_leave_group(self, api, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            method="POST", url="https://api.line.test/v2/bot/group/C123/leave", json={}
        )

        assert isinstance(api.leave_group("C123"), BasicResponse)

    def test_leave_room(self, api, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            method="POST", url="https://api.line.test/v2/bot/room/R123/leave", json={}
        )

        assert isinstance(api.leave_room("R123"), BasicResponse)


# ==============================================================================
# Errors and timeouts
# ==============================================================================


class TestErrors:
    """Tests for error responses and per-call timeouts."""

    def test_error_body_decoded(self, api, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            status_code=400,
            json={
                "message": "The request body has 1 error(s)",
                "details": [{"message": "May not be empty", "property": "messages[0].text"}],
            },
            headers={"X-Line-Request-Id": "req-9"},
        )

        with pytest.raises(LineBotApiError) as exc_info:
            api.push_message("U123", new_text_message("Hello"))

        exc = exc_info.value
        assert exc.status_code == 400
        assert exc.request_id == "req-9"
        assert exc.error.message == "The request body has 1 error(s)"
        assert exc.error.details[0].property == "messages[0].text"

    def test_non_json_error_body(self, api, httpx_mock: HTTPXMock):
        """Test a non-JSON error body still raises with the status code."""
        httpx_mock.add_response(status_code=500, text="Internal Server Error")

        with pytest.raises(LineBotApiError) as exc_info:
            api.get_profile("U123")

        assert exc_info.value == LineBotApiError(500)
        assert exc_info.value.error is None

    def test_error_equality(self, api, httpx_mock: HTTPXMock):
        httpx_mock.add_response(status_code=401, json={"message": "Authentication failed"})

        with pytest.raises(LineBotApiError) as exc_info:
            api.leave_room("R1")

        assert exc_info.value == LineBotApiError(
            401, ErrorResponse(message="Authentication failed")
        )

    def test_timeout_raises(self, api, httpx_mock: HTTPXMock):
        httpx_mock.add_exception(httpx.ReadTimeout("Read timed out"))

        with pytest.raises(httpx.TimeoutException):
            api.get_profile("U123", timeout=0.5)

    def test_per_call_timeout_forwarded(self, api, httpx_mock: HTTPXMock):
        httpx_mock.add_response(json={"displayName": "taro", "userId": "U123"})

        api.get_profile("U123", timeout=2.5)

        assert httpx_mock.get_request().extensions["timeout"]["read"] == 2.5
