"""Webhook events delivered by the LINE platform.

Example webhook body:
```json
{
    "events": [
        {
            "replyToken": "nHuyWiB7yP5Zw52FIkcQobQuGDXCTA",
            "type": "message",
            "timestamp": 1462629479859,
            "source": {"type": "user", "userId": "U206d25c2ea6bd87c17655609a1c37cb8"},
            "message": {"id": "325708", "type": "text", "text": "Hello, world"}
        }
    ]
}
```
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Literal

from pydantic import Field, field_serializer, field_validator

from .base import LineModel
from .messages import Message, parse_message


class EventType:
    """Wire values of the ``type`` key of events."""

    MESSAGE = "message"
    FOLLOW = "follow"
    UNFOLLOW = "unfollow"
    JOIN = "join"
    LEAVE = "leave"
    POSTBACK = "postback"
    BEACON = "beacon"


class EventSourceType:
    USER = "user"
    GROUP = "group"
    ROOM = "room"


class EventSource(LineModel):
    """Where an event came from: a user, a group or a room."""

    type: str
    user_id: str | None = None
    group_id: str | None = None
    room_id: str | None = None


class Postback(LineModel):
    data: str


class Beacon(LineModel):
    hwid: str
    type: str = "enter"


class Event(LineModel):
    """Fields common to every webhook event.

    ``timestamp`` arrives in milliseconds since the epoch and is exposed as
    an aware UTC datetime.
    """

    type: str
    timestamp: datetime
    source: EventSource | None = None

    @field_validator("timestamp", mode="before")
    @classmethod
    def _from_millis(cls, value: Any) -> Any:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        return value

    @field_serializer("timestamp")
    def _to_millis(self, value: datetime | None) -> int | None:
        if value is None:
            return None
        return round(value.timestamp() * 1000)


class MessageEvent(Event):
    type: Literal["message"] = EventType.MESSAGE
    reply_token: str
    message: Message

    @field_validator("message", mode="before")
    @classmethod
    def _decode_message(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return parse_message(value)
        return value


class FollowEvent(Event):
    type: Literal["follow"] = EventType.FOLLOW
    reply_token: str


class UnfollowEvent(Event):
    type: Literal["unfollow"] = EventType.UNFOLLOW


class JoinEvent(Event):
    type: Literal["join"] = EventType.JOIN
    reply_token: str


class LeaveEvent(Event):
    type: Literal["leave"] = EventType.LEAVE


class PostbackEvent(Event):
    type: Literal["postback"] = EventType.POSTBACK
    reply_token: str
    postback: Postback


class BeaconEvent(Event):
    type: Literal["beacon"] = EventType.BEACON
    reply_token: str
    beacon: Beacon


class UnknownEvent(Event):
    """Event of a type this SDK does not model yet; ``raw`` keeps the payload."""

    timestamp: datetime | None = None  # type: ignore[assignment]
    raw: dict[str, Any] = Field(default_factory=dict, exclude=True)


_EVENT_TYPES: dict[str, type[Event]] = {
    EventType.MESSAGE: MessageEvent,
    EventType.FOLLOW: FollowEvent,
    EventType.UNFOLLOW: UnfollowEvent,
    EventType.JOIN: JoinEvent,
    EventType.LEAVE: LeaveEvent,
    EventType.POSTBACK: PostbackEvent,
    EventType.BEACON: BeaconEvent,
}


def parse_event(data: dict[str, Any]) -> Event:
    """Decode a single event object into its typed class.

    Raises:
        pydantic.ValidationError: If a known event type lacks required fields.
    """
    event_type = data.get("type")
    event_cls = _EVENT_TYPES.get(event_type) if isinstance(event_type, str) else None
    if event_cls is None:
        return UnknownEvent.model_validate({**data, "raw": data})
    return event_cls.model_validate(data)
