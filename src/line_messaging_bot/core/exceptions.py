"""Exceptions raised by the LINE Messaging Bot SDK."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..models.responses import ErrorResponse


class LineBotError(Exception):
    """Base exception for all SDK errors."""

    pass


class LineBotApiError(LineBotError):
    """Raised when the Messaging API answers with a non-2xx status.

    Attributes:
        status_code: HTTP status code of the response.
        error: Decoded error body, or None when the body was not an error JSON.
        request_id: Value of the ``X-Line-Request-Id`` header, if present.
    """

    def __init__(
        self,
        status_code: int,
        error: ErrorResponse | None = None,
        request_id: str | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            status_code: HTTP status code
            error: Decoded error response body
            request_id: Request ID reported by the platform
        """
        self.status_code = status_code
        self.error = error
        self.request_id = request_id
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        if self.error is None:
            return f"LINE API error: status={self.status_code}"
        message = f"LINE API error: status={self.status_code}, message={self.error.message}"
        if self.error.details:
            details = ", ".join(
                f"{detail.property}: {detail.message}" for detail in self.error.details
            )
            message = f"{message} ({details})"
        return message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LineBotApiError):
            return NotImplemented
        return self.status_code == other.status_code and self.error == other.error

    __hash__ = LineBotError.__hash__


class InvalidSignatureError(LineBotError):
    """Raised when a webhook request fails X-Line-Signature validation."""

    def __init__(self, message: str = "Invalid signature") -> None:
        super().__init__(message)


class WebhookParseError(LineBotError):
    """Raised when a webhook body is not a valid event envelope."""

    def __init__(self, message: str, body: str | None = None) -> None:
        """Initialize the exception.

        Args:
            message: Error message
            body: The offending request body
        """
        self.body = body
        super().__init__(message)
