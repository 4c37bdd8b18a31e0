"""Configuration management for the LINE Messaging Bot SDK.

This module provides configuration models and loading functionality using Pydantic
for validation and type safety.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ENDPOINT_BASE = "https://api.line.me"

_DOTENV_LOADED = False


def _load_env_once() -> None:
    """Load environment variables from a .env file exactly once."""

    global _DOTENV_LOADED
    if not _DOTENV_LOADED:
        load_dotenv()
        _DOTENV_LOADED = True


def _expand_env_vars(data: Any) -> Any:
    """Recursively expand environment variables in configuration data."""

    if isinstance(data, str):
        return os.path.expandvars(data)
    if isinstance(data, dict):
        return {key: _expand_env_vars(value) for key, value in data.items()}
    if isinstance(data, list):
        return [_expand_env_vars(item) for item in data]
    return data


class ChannelConfig(BaseModel):
    """Credentials of a LINE Messaging API channel."""

    channel_secret: str = Field(..., description="Channel secret used to sign webhooks")
    channel_access_token: str = Field(..., description="Long-lived channel access token")

    @field_validator("channel_secret", "channel_access_token")
    @classmethod
    def validate_not_empty(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("Channel credentials cannot be empty")
        # Unexpanded ${VAR} placeholders mean the variable was not set
        if value.startswith("${"):
            raise ValueError(f"Unresolved environment placeholder: {value}")
        return value.strip()


class HTTPClientConfig(BaseModel):
    """Default HTTP client configuration."""

    endpoint_base: str = Field(
        default=DEFAULT_ENDPOINT_BASE, description="Base URL of the Messaging API"
    )
    timeout: float = Field(default=10.0, gt=0.0, description="Default HTTP timeout in seconds")

    @field_validator("endpoint_base")
    @classmethod
    def validate_endpoint(cls, value: str) -> str:
        if not value.startswith("http"):
            raise ValueError("Endpoint base must start with http:// or https://")
        return value.rstrip("/")


class WebhookServerConfig(BaseModel):
    """Configuration for the inbound webhook server."""

    enabled: bool = Field(default=False, description="Enable inbound webhook server")
    host: str = Field(default="0.0.0.0", description="Bind host")
    port: int = Field(default=8000, ge=1, le=65535, description="Bind port")
    path: str = Field(default="/callback", description="Webhook callback path")

    @field_validator("path")
    @classmethod
    def validate_path(cls, value: str) -> str:
        if not value.startswith("/"):
            return f"/{value}"
        return value


class LoggingConfig(BaseModel):
    """Configuration for logging."""

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format",
    )
    log_file: str | None = Field(default=None, description="Log file path")
    max_bytes: int = Field(default=10485760, description="Max log file size (10MB)")
    backup_count: int = Field(default=5, description="Number of backup files")

    @field_validator("level")
    @classmethod
    def normalise_level(cls, value: str) -> str:
        level = (value or "INFO").strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unsupported log level: {value}")
        return level


class BotConfig(BaseSettings):
    """Main configuration for a LINE bot.

    Values come from keyword arguments, ``LINE_BOT_*`` environment variables
    (``LINE_BOT_CHANNEL__CHANNEL_SECRET`` and so on) or a YAML/JSON file.
    """

    model_config = SettingsConfigDict(
        env_prefix="LINE_BOT_",
        env_nested_delimiter="__",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    channel: ChannelConfig = Field(..., description="Channel credentials")
    http: HTTPClientConfig = Field(
        default_factory=HTTPClientConfig, description="Default HTTP client settings"
    )
    webhook: WebhookServerConfig = Field(
        default_factory=WebhookServerConfig, description="Inbound webhook server settings"
    )
    logging: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )

    @classmethod
    def from_yaml(cls, path: str | Path) -> BotConfig:
        """Load configuration from a YAML file."""

        _load_env_once()
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, encoding="utf-8") as handle:
            try:
                config_data = yaml.safe_load(handle)
            except yaml.YAMLError as exc:
                raise ValueError(f"Invalid YAML in config file: {exc}") from exc

        if not config_data:
            config_data = {}

        config_data = _expand_env_vars(config_data)
        return cls(**config_data)

    @classmethod
    def from_json(cls, path: str | Path) -> BotConfig:
        """Load configuration from a JSON file."""

        _load_env_once()
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, encoding="utf-8") as handle:
            try:
                config_data = json.load(handle)
            except json.JSONDecodeError as exc:
                raise ValueError(f"Invalid JSON in config file: {exc}") from exc

        config_data = _expand_env_vars(config_data)
        return cls(**config_data)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""

        return self.model_dump()
