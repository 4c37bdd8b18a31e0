"""Base model shared by every Messaging API payload."""

from __future__ import annotations

import json
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel


class LineModel(BaseModel):
    """Pydantic model with camelCase wire names and snake_case attributes.

    Fields left as ``None`` are omitted from the wire form, which mirrors how
    the platform treats optional keys.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready wire representation."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def as_json_string(self) -> str:
        """Return the compact JSON wire representation."""
        return json.dumps(self.to_dict(), ensure_ascii=False, separators=(",", ":"))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Any:
        """Build a model from its wire representation."""
        return cls.model_validate(data)


def empty_to_none(value: Any) -> Any:
    """Treat an empty string as an absent optional field."""
    if value == "":
        return None
    return value


OmitEmptyStr = Annotated[str | None, BeforeValidator(empty_to_none)]
"""Optional string that is left out of the wire form when empty."""
