"""LINE Messaging API clients.

Components:
- base.py: endpoint table, request building and response decoding
- client.py: LineBotApi (synchronous, httpx.Client)
- async_client.py: AsyncLineBotApi (asynchronous, httpx.AsyncClient)
"""

from .async_client import AsyncLineBotApi
from .base import (
    MAX_MESSAGES_PER_REQUEST,
    MAX_MULTICAST_RECIPIENTS,
    USER_AGENT,
    BaseLineBotApi,
)
from .client import LineBotApi

__all__ = [
    "LineBotApi",
    "AsyncLineBotApi",
    "BaseLineBotApi",
    "USER_AGENT",
    "MAX_MESSAGES_PER_REQUEST",
    "MAX_MULTICAST_RECIPIENTS",
]
