"""Templates carried by template messages (buttons, confirm, carousel)."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import Field

from .actions import TemplateAction
from .base import LineModel, OmitEmptyStr


class TemplateType:
    """Wire values of the ``type`` key of templates."""

    BUTTONS = "buttons"
    CONFIRM = "confirm"
    CAROUSEL = "carousel"


class ButtonsTemplate(LineModel):
    """Image, title, text and a list of action buttons.

    ``thumbnailImageUrl`` is always sent, even when empty; ``title`` is
    dropped when empty.
    """

    type: Literal["buttons"] = TemplateType.BUTTONS
    thumbnail_image_url: str = ""
    title: OmitEmptyStr = None
    text: str
    actions: list[TemplateAction] = Field(default_factory=list)


class ConfirmTemplate(LineModel):
    """Text with exactly two actions (left and right)."""

    type: Literal["confirm"] = TemplateType.CONFIRM
    text: str
    actions: list[TemplateAction] = Field(min_length=2, max_length=2)


class CarouselColumn(LineModel):
    thumbnail_image_url: str = ""
    title: OmitEmptyStr = None
    text: str
    actions: list[TemplateAction] = Field(default_factory=list)


class CarouselTemplate(LineModel):
    """Horizontally scrollable list of columns."""

    type: Literal["carousel"] = TemplateType.CAROUSEL
    columns: list[CarouselColumn] = Field(default_factory=list)


Template = Annotated[
    Union[ButtonsTemplate, ConfirmTemplate, CarouselTemplate],
    Field(discriminator="type"),
]


def new_buttons_template(
    thumbnail_image_url: str,
    title: str,
    text: str,
    *actions: TemplateAction,
) -> ButtonsTemplate:
    return ButtonsTemplate(
        thumbnail_image_url=thumbnail_image_url,
        title=title,
        text=text,
        actions=list(actions),
    )


def new_confirm_template(
    text: str,
    left: TemplateAction,
    right: TemplateAction,
) -> ConfirmTemplate:
    return ConfirmTemplate(text=text, actions=[left, right])


def new_carousel_template(*columns: CarouselColumn) -> CarouselTemplate:
    return CarouselTemplate(columns=list(columns))


def new_carousel_column(
    thumbnail_image_url: str,
    title: str,
    text: str,
    *actions: TemplateAction,
) -> CarouselColumn:
    return CarouselColumn(
        thumbnail_image_url=thumbnail_image_url,
        title=title,
        text=text,
        actions=list(actions),
    )
