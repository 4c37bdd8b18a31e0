"""Echo bot: reply to every text message with the same text.

Run this example:
    export CHANNEL_SECRET=...
    export CHANNEL_TOKEN=...
    python examples/echo_bot.py

Then register http://<public-host>:8000/callback as the webhook URL of the
channel in the LINE Developers console.
"""

import os

from line_messaging_bot import LineBotApi, WebhookHandler, WebhookServer, setup_logging
from line_messaging_bot.core import LoggingConfig, WebhookServerConfig, get_logger
from line_messaging_bot.models import (
    EventSourceType,
    FollowEvent,
    MessageEvent,
    TextMessage,
    new_text_message,
)

logger = get_logger("echo_bot")


def main() -> None:
    setup_logging(LoggingConfig(level="INFO"))

    api = LineBotApi(os.environ["CHANNEL_TOKEN"])
    handler = WebhookHandler(os.environ["CHANNEL_SECRET"], api=api)

    @handler.add(MessageEvent, message=TextMessage)
    def echo(event: MessageEvent) -> None:
        if event.source is not None and event.source.type == EventSourceType.USER:
            api.push_message(event.source.user_id, new_text_message(event.message.text))
        else:
            api.reply_message(event.reply_token, new_text_message(event.message.text))

    @handler.add(FollowEvent)
    def greet(event: FollowEvent) -> None:
        api.reply_message(event.reply_token, new_text_message("Thanks for adding me!"))

    server = WebhookServer(WebhookServerConfig(host="0.0.0.0", port=8000), handler)
    try:
        server.serve_forever()
    finally:
        api.close()


if __name__ == "__main__":
    main()
