"""Logging setup for the LINE Messaging Bot SDK.

SDK modules log under the ``line_bot`` namespace. ``setup_logging`` is only
called by applications (the CLI, the examples); a library user who never
calls it keeps their own logging configuration untouched.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

from .config import LoggingConfig

LOGGER_NAMESPACE = "line_bot"

console = Console(stderr=True)


def _build_handlers(config: LoggingConfig) -> list[logging.Handler]:
    handlers: list[logging.Handler] = [
        RichHandler(
            console=console,
            show_path=False,
            markup=False,
            rich_tracebacks=True,
        )
    ]

    if config.log_file:
        log_path = Path(config.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=config.max_bytes,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(config.format))
        handlers.append(file_handler)

    return handlers


def setup_logging(config: LoggingConfig | None = None) -> None:
    """Replace the root handlers with a rich console handler and optional log file.

    Args:
        config: Logging settings. Defaults to ``LoggingConfig()``.
    """
    config = config or LoggingConfig()
    level = getattr(logging, config.level)

    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    for handler in _build_handlers(config):
        handler.setLevel(level)
        root_logger.addHandler(handler)

    root_logger.setLevel(level)
    # SDK loggers inherit from the namespace logger
    logging.getLogger(LOGGER_NAMESPACE).setLevel(level)

    get_logger("setup").info(
        "Logging configured: level=%s, file=%s", config.level, config.log_file or "-"
    )


def get_logger(name: str) -> logging.Logger:
    """Return the SDK logger ``line_bot.<name>``."""
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")


def log_exception(logger: logging.Logger, exc: Exception, context: str = "") -> None:
    """Log ``exc`` with its traceback, prefixed by ``context`` when given.

    Must be called from inside the ``except`` block handling ``exc``.
    """
    if context:
        logger.exception("%s: %s", context, exc)
    else:
        logger.exception("Exception occurred: %s", exc)
