"""Test configuration hooks and shared fixtures."""

from __future__ import annotations

import json
from typing import Any

import pytest

from line_messaging_bot.webhook.signature import generate_signature

CHANNEL_SECRET = "testsecret"
CHANNEL_TOKEN = "testtoken"
ENDPOINT_BASE = "https://api.line.test"


# Configure anyio to only use asyncio backend (skip trio tests)
@pytest.fixture(scope="session")
def anyio_backend():
    """Configure anyio to use only asyncio backend."""
    return "asyncio"


@pytest.fixture
def channel_secret() -> str:
    return CHANNEL_SECRET


@pytest.fixture
def channel_token() -> str:
    return CHANNEL_TOKEN


@pytest.fixture
def endpoint_base() -> str:
    return ENDPOINT_BASE


@pytest.fixture
def text_event_payload() -> dict[str, Any]:
    """A single text message event as delivered by the platform."""
    return {
        "replyToken": "nHuyWiB7yP5Zw52FIkcQobQuGDXCTA",
        "type": "message",
        "timestamp": 1462629479859,
        "source": {"type": "user", "userId": "U206d25c2ea6bd87c17655609a1c37cb8"},
        "message": {"id": "325708", "type": "text", "text": "Hello, world"},
    }


@pytest.fixture
def make_body():
    """Build a webhook body and its X-Line-Signature from event dicts."""

    def _make(*events: dict[str, Any], secret: str = CHANNEL_SECRET) -> tuple[bytes, str]:
        body = json.dumps({"events": list(events)}).encode("utf-8")
        return body, generate_signature(secret, body)

    return _make
