"""Typed Messaging API payloads.

Components:
- actions.py: template and imagemap actions
- templates.py: buttons, confirm and carousel templates
- messages.py: outbound and inbound message objects
- events.py: webhook events
- responses.py: API response bodies
"""

from .actions import (
    ImagemapAction,
    ImagemapArea,
    ImagemapBaseSize,
    MessageImagemapAction,
    MessageTemplateAction,
    PostbackTemplateAction,
    TemplateAction,
    TemplateActionType,
    URIImagemapAction,
    URITemplateAction,
    new_message_imagemap_action,
    new_message_template_action,
    new_postback_template_action,
    new_uri_imagemap_action,
    new_uri_template_action,
)
from .base import LineModel
from .events import (
    Beacon,
    BeaconEvent,
    Event,
    EventSource,
    EventSourceType,
    EventType,
    FollowEvent,
    JoinEvent,
    LeaveEvent,
    MessageEvent,
    Postback,
    PostbackEvent,
    UnfollowEvent,
    UnknownEvent,
    parse_event,
)
from .messages import (
    AudioMessage,
    ImagemapMessage,
    ImageMessage,
    LocationMessage,
    Message,
    MessageType,
    SendingMessage,
    StickerMessage,
    TemplateMessage,
    TextMessage,
    UnknownMessage,
    VideoMessage,
    new_audio_message,
    new_image_message,
    new_imagemap_message,
    new_location_message,
    new_sticker_message,
    new_template_message,
    new_text_message,
    new_video_message,
    parse_message,
)
from .responses import (
    BasicResponse,
    ErrorDetail,
    ErrorResponse,
    MessageContentResponse,
    ProfileResponse,
)
from .templates import (
    ButtonsTemplate,
    CarouselColumn,
    CarouselTemplate,
    ConfirmTemplate,
    Template,
    TemplateType,
    new_buttons_template,
    new_carousel_column,
    new_carousel_template,
    new_confirm_template,
)

__all__ = [
    "LineModel",
    # Actions
    "TemplateActionType",
    "TemplateAction",
    "URITemplateAction",
    "MessageTemplateAction",
    "PostbackTemplateAction",
    "new_uri_template_action",
    "new_message_template_action",
    "new_postback_template_action",
    "ImagemapAction",
    "ImagemapArea",
    "ImagemapBaseSize",
    "URIImagemapAction",
    "MessageImagemapAction",
    "new_uri_imagemap_action",
    "new_message_imagemap_action",
    # Templates
    "TemplateType",
    "Template",
    "ButtonsTemplate",
    "ConfirmTemplate",
    "CarouselTemplate",
    "CarouselColumn",
    "new_buttons_template",
    "new_confirm_template",
    "new_carousel_template",
    "new_carousel_column",
    # Messages
    "MessageType",
    "Message",
    "SendingMessage",
    "TextMessage",
    "ImageMessage",
    "VideoMessage",
    "AudioMessage",
    "LocationMessage",
    "StickerMessage",
    "ImagemapMessage",
    "TemplateMessage",
    "UnknownMessage",
    "parse_message",
    "new_text_message",
    "new_image_message",
    "new_video_message",
    "new_audio_message",
    "new_location_message",
    "new_sticker_message",
    "new_imagemap_message",
    "new_template_message",
    # Events
    "EventType",
    "EventSourceType",
    "EventSource",
    "Event",
    "MessageEvent",
    "FollowEvent",
    "UnfollowEvent",
    "JoinEvent",
    "LeaveEvent",
    "PostbackEvent",
    "BeaconEvent",
    "UnknownEvent",
    "Postback",
    "Beacon",
    "parse_event",
    # Responses
    "BasicResponse",
    "ProfileResponse",
    "MessageContentResponse",
    "ErrorResponse",
    "ErrorDetail",
]
