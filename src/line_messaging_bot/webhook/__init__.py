"""Webhook receiving: signature validation, event parsing and dispatch.

Components:
- signature.py: X-Line-Signature generation and validation
- parser.py: WebhookParser and parse_events
- handler.py: WebhookHandler callback registry
- server.py: FastAPI app and uvicorn-backed WebhookServer
"""

from .handler import WebhookHandler
from .parser import WebhookParser, parse_events
from .server import WebhookServer, create_webhook_app
from .signature import SIGNATURE_HEADER, SignatureValidator, generate_signature

__all__ = [
    "SIGNATURE_HEADER",
    "SignatureValidator",
    "generate_signature",
    "WebhookParser",
    "parse_events",
    "WebhookHandler",
    "WebhookServer",
    "create_webhook_app",
]
