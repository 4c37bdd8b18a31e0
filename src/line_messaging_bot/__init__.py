"""LINE Messaging Bot SDK.

A client library and webhook receiver for the LINE Messaging API with:
- Typed message, template and action payloads
- Sync and async HTTP clients for the bot endpoints
- Signed webhook validation, event parsing and callback dispatch

Example:
    ```python
    from line_messaging_bot import LineBotApi, WebhookHandler
    from line_messaging_bot.models import MessageEvent, TextMessage, new_text_message

    api = LineBotApi("channel-access-token")
    handler = WebhookHandler("channel-secret", api=api)

    @handler.add(MessageEvent, message=TextMessage)
    def echo(event):
        api.reply_message(event.reply_token, new_text_message(event.message.text))

    # In a web framework view:
    handler.handle(body, headers["X-Line-Signature"])
    ```
"""

from importlib.metadata import PackageNotFoundError, version

from .api import AsyncLineBotApi, LineBotApi
from .core import (
    BotConfig,
    InvalidSignatureError,
    LineBotApiError,
    LineBotError,
    WebhookParseError,
    get_logger,
    setup_logging,
)
from .webhook import (
    SignatureValidator,
    WebhookHandler,
    WebhookParser,
    WebhookServer,
    create_webhook_app,
)

__all__ = [
    "__version__",
    "LineBotApi",
    "AsyncLineBotApi",
    "BotConfig",
    "LineBotError",
    "LineBotApiError",
    "InvalidSignatureError",
    "WebhookParseError",
    "SignatureValidator",
    "WebhookParser",
    "WebhookHandler",
    "WebhookServer",
    "create_webhook_app",
    "get_logger",
    "setup_logging",
]

try:  # pragma: no cover - best-effort during development
    __version__ = version("line-messaging-bot")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"
