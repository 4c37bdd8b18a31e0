"""Tests for X-Line-Signature generation and validation."""

from __future__ import annotations

import base64
import hashlib
import hmac

import pytest

from line_messaging_bot.webhook import SignatureValidator, generate_signature

BODY = b'{"events":[]}'


def test_generate_signature_matches_hmac():
    """Test the signature is base64(HMAC-SHA256(secret, body))."""
    expected = base64.b64encode(
        hmac.new(b"testsecret", BODY, digestmod=hashlib.sha256).digest()
    ).decode("utf-8")

    assert generate_signature("testsecret", BODY) == expected
    assert generate_signature("testsecret", BODY.decode("utf-8")) == expected


class TestSignatureValidator:
    """Tests for SignatureValidator."""

    def test_valid_signature(self, channel_secret):
        validator = SignatureValidator(channel_secret)

        assert validator.validate(BODY, generate_signature(channel_secret, BODY))

    def test_signature_from_other_secret(self, channel_secret):
        validator = SignatureValidator(channel_secret)

        assert not validator.validate(BODY, generate_signature("othersecret", BODY))

    def test_tampered_body(self, channel_secret):
        validator = SignatureValidator(channel_secret)
        signature = generate_signature(channel_secret, BODY)

        assert not validator.validate(b'{"events":[{}]}', signature)

    @pytest.mark.parametrize("signature", [None, ""])
    def test_missing_signature(self, channel_secret, signature):
        assert not SignatureValidator(channel_secret).validate(BODY, signature)

    def test_non_ascii_signature_rejected(self, channel_secret):
        assert not SignatureValidator(channel_secret).validate(BODY, "sïgnature")

    def test_empty_secret(self):
        with pytest.raises(ValueError, match="Channel secret is required"):
            SignatureValidator("")
