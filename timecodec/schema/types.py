"""Pydantic field types backed by the RFC 3339 codec.

Use these in place of plain ``datetime`` fields when a model must accept
and emit RFC 3339 text with the codec's rules:

    class Event(BaseModel):
        starts_at: DateTime
        day: Date
        reminder: Time

Validation always produces an Instant (UTC, millisecond precision). JSON
serialization emits the codec's text form; python-mode dumps keep the
datetime.
"""

from datetime import date, datetime, UTC
from typing import Annotated, Any

from pydantic import PlainSerializer, PlainValidator, WithJsonSchema

from ..utils import instant, isodatetime


def _validate_date_time(value: Any) -> datetime:
    if isinstance(value, datetime):
        return instant.to_instant(value)
    return isodatetime.parse_date_time(value)


def _validate_date(value: Any) -> datetime:
    if isinstance(value, datetime):
        return instant.to_instant(value)
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day, tzinfo=UTC)
    return isodatetime.parse_date(value)


def _validate_time(value: Any) -> datetime:
    if isinstance(value, datetime):
        return instant.to_instant(value)
    return isodatetime.parse_time(value)


DateTime = Annotated[
    datetime,
    PlainValidator(_validate_date_time),
    PlainSerializer(isodatetime.serialize_date_time, return_type=str, when_used="json"),
    WithJsonSchema({"type": "string", "format": "date-time"}),
]
"""Instant exchanged as YYYY-MM-DDThh:mm:ss.sssZ."""

Date = Annotated[
    datetime,
    PlainValidator(_validate_date),
    PlainSerializer(isodatetime.serialize_date, return_type=str, when_used="json"),
    WithJsonSchema({"type": "string", "format": "date"}),
]
"""Instant exchanged as YYYY-MM-DD."""

Time = Annotated[
    datetime,
    PlainValidator(_validate_time),
    PlainSerializer(isodatetime.serialize_time, return_type=str, when_used="json"),
    WithJsonSchema({"type": "string", "format": "time"}),
]
"""Instant on the current UTC date, exchanged as hh:mm:ss.sssZ."""
