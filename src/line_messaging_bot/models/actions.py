"""Actions attached to template and imagemap messages."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import Field

from .base import LineModel, OmitEmptyStr


class TemplateActionType:
    """Wire values of the ``type`` key of template actions."""

    URI = "uri"
    MESSAGE = "message"
    POSTBACK = "postback"


class URITemplateAction(LineModel):
    """Opens ``uri`` when the user taps the action."""

    type: Literal["uri"] = TemplateActionType.URI
    label: str
    uri: str


class MessageTemplateAction(LineModel):
    """Sends ``text`` as a message from the user."""

    type: Literal["message"] = TemplateActionType.MESSAGE
    label: str
    text: str


class PostbackTemplateAction(LineModel):
    """Returns ``data`` to the bot through a postback event.

    ``text`` is optionally posted as a message from the user as well.
    """

    type: Literal["postback"] = TemplateActionType.POSTBACK
    label: str
    data: str
    text: OmitEmptyStr = None


TemplateAction = Annotated[
    Union[URITemplateAction, MessageTemplateAction, PostbackTemplateAction],
    Field(discriminator="type"),
]


def new_uri_template_action(label: str, uri: str) -> URITemplateAction:
    return URITemplateAction(label=label, uri=uri)


def new_message_template_action(label: str, text: str) -> MessageTemplateAction:
    return MessageTemplateAction(label=label, text=text)


def new_postback_template_action(label: str, data: str, text: str = "") -> PostbackTemplateAction:
    return PostbackTemplateAction(label=label, data=data, text=text)


class ImagemapArea(LineModel):
    """Tappable rectangle of an imagemap, in base-size pixels."""

    x: int = Field(ge=0)
    y: int = Field(ge=0)
    width: int = Field(gt=0)
    height: int = Field(gt=0)


class ImagemapBaseSize(LineModel):
    width: int = Field(gt=0)
    height: int = Field(gt=0)


class URIImagemapAction(LineModel):
    type: Literal["uri"] = TemplateActionType.URI
    link_uri: str
    area: ImagemapArea


class MessageImagemapAction(LineModel):
    type: Literal["message"] = TemplateActionType.MESSAGE
    text: str
    area: ImagemapArea


ImagemapAction = Annotated[
    Union[URIImagemapAction, MessageImagemapAction],
    Field(discriminator="type"),
]


def new_uri_imagemap_action(link_uri: str, area: ImagemapArea) -> URIImagemapAction:
    return URIImagemapAction(link_uri=link_uri, area=area)


def new_message_imagemap_action(text: str, area: ImagemapArea) -> MessageImagemapAction:
    return MessageImagemapAction(text=text, area=area)
