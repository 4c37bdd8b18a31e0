"""Core modules for the LINE Messaging Bot SDK.

This package contains the ambient functionality shared by the API client and
the webhook receiver:
- Configuration management
- Logging utilities
- Exception hierarchy
"""

from .config import (
    DEFAULT_ENDPOINT_BASE,
    BotConfig,
    ChannelConfig,
    HTTPClientConfig,
    LoggingConfig,
    WebhookServerConfig,
)
from .exceptions import (
    InvalidSignatureError,
    LineBotApiError,
    LineBotError,
    WebhookParseError,
)
from .logger import get_logger, log_exception, setup_logging

__all__ = [
    # Configuration
    "DEFAULT_ENDPOINT_BASE",
    "BotConfig",
    "ChannelConfig",
    "HTTPClientConfig",
    "LoggingConfig",
    "WebhookServerConfig",
    # Exceptions
    "LineBotError",
    "LineBotApiError",
    "InvalidSignatureError",
    "WebhookParseError",
    # Logging
    "get_logger",
    "log_exception",
    "setup_logging",
]
