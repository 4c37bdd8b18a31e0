"""Response bodies returned by the Messaging API."""

from __future__ import annotations

from pydantic import Field

from .base import LineModel


class BasicResponse(LineModel):
    """Empty body returned by send and leave operations."""

    request_id: str | None = Field(default=None, exclude=True)


class ProfileResponse(LineModel):
    user_id: str
    display_name: str
    picture_url: str = ""
    status_message: str = ""


class MessageContentResponse(LineModel):
    """Binary content of an image, video or audio message."""

    content: bytes = Field(exclude=True)
    content_type: str = ""
    content_length: int = 0


class ErrorDetail(LineModel):
    message: str = ""
    property: str = ""


class ErrorResponse(LineModel):
    """Error body sent with any non-2xx status."""

    message: str
    details: list[ErrorDetail] = Field(default_factory=list)
