"""Message objects sent to and received from the Messaging API.

The same classes serve both directions. Messages received through a webhook
carry an ``id`` which is never part of the outbound wire form; the
``new_*`` constructors build outbound messages with every required field.
"""

from __future__ import annotations

from typing import Any, Literal, Union

from pydantic import Field

from .actions import ImagemapAction, ImagemapBaseSize
from .base import LineModel
from .templates import Template


class MessageType:
    """Wire values of the ``type`` key of messages."""

    TEXT = "text"
    IMAGE = "image"
    VIDEO = "video"
    AUDIO = "audio"
    LOCATION = "location"
    STICKER = "sticker"
    IMAGEMAP = "imagemap"
    TEMPLATE = "template"


class TextMessage(LineModel):
    type: Literal["text"] = MessageType.TEXT
    id: str | None = Field(default=None, exclude=True)
    text: str


class ImageMessage(LineModel):
    type: Literal["image"] = MessageType.IMAGE
    id: str | None = Field(default=None, exclude=True)
    original_content_url: str | None = None
    preview_image_url: str | None = None


class VideoMessage(LineModel):
    type: Literal["video"] = MessageType.VIDEO
    id: str | None = Field(default=None, exclude=True)
    original_content_url: str | None = None
    preview_image_url: str | None = None


class AudioMessage(LineModel):
    """Audio clip; ``duration`` is in milliseconds."""

    type: Literal["audio"] = MessageType.AUDIO
    id: str | None = Field(default=None, exclude=True)
    original_content_url: str | None = None
    duration: int | None = Field(default=None, ge=0)


class LocationMessage(LineModel):
    type: Literal["location"] = MessageType.LOCATION
    id: str | None = Field(default=None, exclude=True)
    title: str = ""
    address: str = ""
    latitude: float
    longitude: float


class StickerMessage(LineModel):
    type: Literal["sticker"] = MessageType.STICKER
    id: str | None = Field(default=None, exclude=True)
    package_id: str
    sticker_id: str


class ImagemapMessage(LineModel):
    """Image with tappable areas.

    ``baseUrl`` is the prefix of the image set; the platform appends the
    requested width (240, 300, 460, 700 or 1040) to it.
    """

    type: Literal["imagemap"] = MessageType.IMAGEMAP
    base_url: str
    alt_text: str
    base_size: ImagemapBaseSize
    actions: list[ImagemapAction] = Field(default_factory=list)


class TemplateMessage(LineModel):
    """Template shown on supported clients, ``altText`` elsewhere."""

    type: Literal["template"] = MessageType.TEMPLATE
    alt_text: str = Field(max_length=400)
    template: Template


class UnknownMessage(LineModel):
    """Inbound message of a type this SDK does not model yet."""

    type: str
    id: str | None = None
    raw: dict[str, Any] = Field(default_factory=dict, exclude=True)


SendingMessage = Union[
    TextMessage,
    ImageMessage,
    VideoMessage,
    AudioMessage,
    LocationMessage,
    StickerMessage,
    ImagemapMessage,
    TemplateMessage,
]

Message = Union[
    TextMessage,
    ImageMessage,
    VideoMessage,
    AudioMessage,
    LocationMessage,
    StickerMessage,
    UnknownMessage,
]

_INBOUND_MESSAGE_TYPES: dict[str, type[LineModel]] = {
    MessageType.TEXT: TextMessage,
    MessageType.IMAGE: ImageMessage,
    MessageType.VIDEO: VideoMessage,
    MessageType.AUDIO: AudioMessage,
    MessageType.LOCATION: LocationMessage,
    MessageType.STICKER: StickerMessage,
}


def parse_message(data: dict[str, Any]) -> Message:
    """Decode the ``message`` object of a message event."""
    message_type = data.get("type")
    message_cls = (
        _INBOUND_MESSAGE_TYPES.get(message_type) if isinstance(message_type, str) else None
    )
    if message_cls is None:
        return UnknownMessage.model_validate({**data, "raw": data})
    return message_cls.model_validate(data)  # type: ignore[return-value]


def new_text_message(text: str) -> TextMessage:
    return TextMessage(text=text)


def new_image_message(original_content_url: str, preview_image_url: str) -> ImageMessage:
    return ImageMessage(
        original_content_url=original_content_url,
        preview_image_url=preview_image_url,
    )


def new_video_message(original_content_url: str, preview_image_url: str) -> VideoMessage:
    return VideoMessage(
        original_content_url=original_content_url,
        preview_image_url=preview_image_url,
    )


def new_audio_message(original_content_url: str, duration: int) -> AudioMessage:
    return AudioMessage(original_content_url=original_content_url, duration=duration)


def new_location_message(
    title: str, address: str, latitude: float, longitude: float
) -> LocationMessage:
    return LocationMessage(title=title, address=address, latitude=latitude, longitude=longitude)


def new_sticker_message(package_id: str, sticker_id: str) -> StickerMessage:
    return StickerMessage(package_id=package_id, sticker_id=sticker_id)


def new_imagemap_message(
    base_url: str,
    alt_text: str,
    base_size: ImagemapBaseSize,
    *actions: ImagemapAction,
) -> ImagemapMessage:
    return ImagemapMessage(
        base_url=base_url,
        alt_text=alt_text,
        base_size=base_size,
        actions=list(actions),
    )


def new_template_message(alt_text: str, template: Template) -> TemplateMessage:
    return TemplateMessage(alt_text=alt_text, template=template)
