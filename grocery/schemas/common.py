"""Shared schema helpers."""

from datetime import UTC, datetime

from pydantic import AliasChoices, AliasGenerator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# Responses are written in camelCase; either spelling is accepted on input so
# the same models can read API payloads back.
API_MODEL_CONFIG = ConfigDict(
    from_attributes=True,
    alias_generator=AliasGenerator(
        validation_alias=lambda name: AliasChoices(name, to_camel(name)),
        serialization_alias=to_camel,
    ),
)


def require_text(value: str, field: str) -> str:
    """Trim a string and reject it when nothing is left."""
    trimmed = value.strip()
    if not trimmed:
        raise ValueError(f"{field} is required")
    return trimmed


def to_epoch_millis(value: datetime | int | float) -> int:
    """Convert a stored timestamp to epoch milliseconds.

    Naive datetimes (SQLite drops the offset) are taken to be UTC.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return int(value.timestamp() * 1000)
    return int(value)


class OkResponse(BaseModel):
    """Acknowledgement for deletes."""

    ok: bool = True
