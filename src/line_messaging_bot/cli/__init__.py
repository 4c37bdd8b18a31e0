"""CLI module for the LINE Messaging Bot SDK.

This module provides the command-line interface for the SDK.
"""

from __future__ import annotations

from collections.abc import Sequence

from .commands import HANDLERS, build_echo_handler, load_config, run_command
from .parser import build_parser


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point.

    Args:
        argv: Optional sequence of CLI arguments (without the program name).

    Returns:
        Process exit code. 0 for success.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        raise SystemExit(0)

    return run_command(args)


__all__ = ["main", "build_parser", "build_echo_handler", "load_config", "run_command", "HANDLERS"]
