"""CLI argument parser."""

from __future__ import annotations

import argparse

from .. import __version__


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser.

    Returns:
        ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="line-messaging-bot",
        description="LINE Messaging Bot SDK - call the Messaging API and receive webhooks",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Push a text message
  line-messaging-bot push --to U4af4980629... --text "Hello, LINE!"

  # Show a user profile
  line-messaging-bot profile U4af4980629...

  # Download image/video/audio content of a message
  line-messaging-bot content 325708 -o photo.jpg

  # Run the webhook receiver and echo text messages back
  line-messaging-bot serve --echo -c config.yaml

Credentials come from the YAML config (-c) or LINE_BOT_CHANNEL__CHANNEL_SECRET and
LINE_BOT_CHANNEL__CHANNEL_ACCESS_TOKEN environment variables.
        """,
    )

    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s v{__version__}",
        help="Show program's version number and exit",
    )
    parser.add_argument(
        "-c",
        "--config",
        default="config.yaml",
        help="Path to configuration file (default: config.yaml)",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    push_parser = subparsers.add_parser("push", help="Push a text message")
    push_parser.add_argument("--to", required=True, help="userId, groupId or roomId")
    push_parser.add_argument("-t", "--text", required=True, help="Message text")

    profile_parser = subparsers.add_parser("profile", help="Show a user profile")
    profile_parser.add_argument("user_id", help="userId of the user")

    content_parser = subparsers.add_parser("content", help="Download message content")
    content_parser.add_argument("message_id", help="ID of an image, video or audio message")
    content_parser.add_argument("-o", "--output", required=True, help="Output file path")

    serve_parser = subparsers.add_parser("serve", help="Run the webhook receiver")
    serve_parser.add_argument("--host", default=None, help="Bind host (overrides config)")
    serve_parser.add_argument(
        "-p", "--port", type=int, default=None, help="Bind port (overrides config)"
    )
    serve_parser.add_argument(
        "--echo",
        action="store_true",
        help="Reply to every text message with the same text",
    )

    return parser
