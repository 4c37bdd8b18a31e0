"""Signature utilities for LINE webhook requests.

The platform signs every webhook body and sends the result in the
``X-Line-Signature`` header:

    signature = base64(hmac-sha256(channel_secret, body))
"""

from __future__ import annotations

import base64
import hashlib
import hmac

SIGNATURE_HEADER = "X-Line-Signature"


def _to_bytes(value: str | bytes) -> bytes:
    if isinstance(value, bytes):
        return value
    return value.encode("utf-8")


def generate_signature(channel_secret: str, body: str | bytes) -> str:
    """Compute the X-Line-Signature value for a request body.

    Args:
        channel_secret: Channel secret.
        body: Raw request body, exactly as received.

    Returns:
        Base64-encoded HMAC-SHA256 digest.

    Example:
        ```python
        headers = {"X-Line-Signature": generate_signature(secret, body)}
        ```
    """
    digest = hmac.new(
        _to_bytes(channel_secret),
        _to_bytes(body),
        digestmod=hashlib.sha256,
    ).digest()
    return base64.b64encode(digest).decode("utf-8")


class SignatureValidator:
    """Validate X-Line-Signature headers against a channel secret."""

    def __init__(self, channel_secret: str) -> None:
        if not channel_secret:
            raise ValueError("Channel secret is required")
        self._channel_secret = channel_secret

    def validate(self, body: str | bytes, signature: str | None) -> bool:
        """Check a signature header against the body.

        Args:
            body: Raw request body.
            signature: Value of the X-Line-Signature header.

        Returns:
            True if the signature matches.
        """
        if not signature:
            return False
        expected = generate_signature(self._channel_secret, body)
        # Constant-time comparison
        return hmac.compare_digest(_to_bytes(expected), _to_bytes(signature))
