"""CLI command handlers."""

from __future__ import annotations

import argparse
from pathlib import Path

import httpx
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from ..api.client import LineBotApi
from ..core import BotConfig, LineBotApiError, get_logger, log_exception, setup_logging
from ..models.events import Event, MessageEvent
from ..models.messages import TextMessage, new_text_message
from ..webhook.handler import WebhookHandler
from ..webhook.server import WebhookServer

logger = get_logger("cli")
console = Console()


def load_config(args: argparse.Namespace) -> BotConfig:
    """Load the YAML config if it exists, otherwise fall back to environment variables."""
    config_path = Path(args.config)
    if config_path.exists():
        config = BotConfig.from_yaml(config_path)
    else:
        logger.debug("Config file %s not found, reading environment", config_path)
        config = BotConfig()  # type: ignore[call-arg]

    if args.debug:
        config.logging.level = "DEBUG"
    setup_logging(config.logging)
    return config


def cmd_push(args: argparse.Namespace, config: BotConfig) -> int:
    with LineBotApi.from_config(config) as api:
        api.push_message(args.to, new_text_message(args.text))
    console.print(f"[green]Message pushed to {args.to}[/]")
    return 0


def cmd_profile(args: argparse.Namespace, config: BotConfig) -> int:
    with LineBotApi.from_config(config) as api:
        profile = api.get_profile(args.user_id)

    table = Table(title="Profile")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")
    table.add_row("User ID", profile.user_id)
    table.add_row("Display name", profile.display_name)
    table.add_row("Picture URL", profile.picture_url or "-")
    table.add_row("Status message", profile.status_message or "-")
    console.print(table)
    return 0


def cmd_content(args: argparse.Namespace, config: BotConfig) -> int:
    with LineBotApi.from_config(config) as api:
        content = api.get_message_content(args.message_id)

    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_bytes(content.content)
    console.print(
        f"[green]Saved {content.content_length} bytes ({content.content_type or 'unknown type'})"
        f" to {output}[/]"
    )
    return 0


def build_echo_handler(config: BotConfig, api: LineBotApi) -> WebhookHandler:
    """Handler that replies to text messages with the same text and logs other events."""
    handler = WebhookHandler(config.channel.channel_secret, api=api)

    @handler.add(MessageEvent, message=TextMessage)
    def echo(event: MessageEvent) -> None:
        api.reply_message(event.reply_token, new_text_message(event.message.text))

    @handler.default()
    def log_event(event: Event) -> None:
        logger.info("Received %s event", event.type)

    return handler


def cmd_serve(args: argparse.Namespace, config: BotConfig) -> int:
    server_config = config.webhook.model_copy(
        update={
            key: value
            for key, value in (("host", args.host), ("port", args.port))
            if value is not None
        }
    )

    api = LineBotApi.from_config(config)
    if args.echo:
        handler = build_echo_handler(config, api)
    else:
        handler = WebhookHandler(config.channel.channel_secret, api=api)

        @handler.default()
        def log_event(event: Event) -> None:
            logger.info("Received %s event: %s", event.type, event.as_json_string())

    server = WebhookServer(server_config, handler)
    console.print(
        f"[bold]Listening on[/] http://{server_config.host}:{server_config.port}{server_config.path}"
    )
    try:
        server.serve_forever()
    finally:
        api.close()
    return 0


HANDLERS = {
    "push": cmd_push,
    "profile": cmd_profile,
    "content": cmd_content,
    "serve": cmd_serve,
}


def run_command(args: argparse.Namespace) -> int:
    """Load configuration and run the selected command, mapping errors to exit codes."""
    try:
        config = load_config(args)
    except (FileNotFoundError, ValueError) as exc:
        # pydantic.ValidationError is a ValueError
        print(f"Error: invalid configuration: {exc}")
        return 1

    try:
        return HANDLERS[args.command](args, config)
    except LineBotApiError as exc:
        print(f"Error: {exc}")
        return 1
    except (httpx.HTTPError, ValidationError, OSError) as exc:
        log_exception(logger, exc, f"Command {args.command} failed")
        print(f"Error: {exc}")
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        return 0
