"""Build and push buttons, confirm and carousel template messages.

Run this example:
    export CHANNEL_TOKEN=...
    python examples/template_messages.py U4af4980629...
"""

import os
import sys

from line_messaging_bot import LineBotApi
from line_messaging_bot.models import (
    new_buttons_template,
    new_carousel_column,
    new_carousel_template,
    new_confirm_template,
    new_message_template_action,
    new_postback_template_action,
    new_template_message,
    new_uri_template_action,
)


def main(user_id: str) -> None:
    buttons = new_buttons_template(
        "https://example.com/bot/images/image.jpg",
        "Menu",
        "Please select",
        new_postback_template_action("Buy", "action=buy&itemid=123"),
        new_postback_template_action("Add to cart", "action=add&itemid=123", "Added"),
        new_uri_template_action("View detail", "https://example.com/page/123"),
    )
    confirm = new_confirm_template(
        "Are you sure?",
        new_message_template_action("Yes", "yes"),
        new_message_template_action("No", "no"),
    )
    carousel = new_carousel_template(
        new_carousel_column(
            "https://example.com/bot/images/item1.jpg",
            "this is menu",
            "description",
            new_postback_template_action("Buy", "action=buy&itemid=111"),
        ),
        new_carousel_column(
            "https://example.com/bot/images/item2.jpg",
            "",
            "description",
            new_uri_template_action("View detail", "https://example.com/page/222"),
        ),
    )

    with LineBotApi(os.environ["CHANNEL_TOKEN"]) as api:
        api.push_message(
            user_id,
            [
                new_template_message("Buttons template", buttons),
                new_template_message("Confirm template", confirm),
                new_template_message("Carousel template", carousel),
            ],
        )


if __name__ == "__main__":
    main(sys.argv[1])
