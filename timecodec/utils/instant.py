"""Instant normalization utilities.

An Instant is a timezone-aware datetime in UTC with millisecond precision.
This module is the only place that decides how arbitrary datetimes become
Instants; the codec and the schema types go through ``to_instant``.
"""

from datetime import datetime, timedelta, UTC

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)

_ONE_MILLISECOND = timedelta(milliseconds=1)


def to_instant(dt: datetime) -> datetime:
    """Normalize a datetime to UTC with millisecond precision.

    Naive datetimes are treated as UTC. Sub-millisecond digits are
    truncated, never rounded.

    Raises:
        TypeError: If dt is not a datetime
    """
    if not isinstance(dt, datetime):
        raise TypeError(f"Expected datetime, got {type(dt).__name__}")
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    else:
        dt = dt.astimezone(UTC)
    return dt.replace(microsecond=dt.microsecond - dt.microsecond % 1000)


def is_instant(value: object) -> bool:
    """Check whether value is already a normalized Instant."""
    return (
        isinstance(value, datetime)
        and value.tzinfo is UTC
        and value.microsecond % 1000 == 0
    )


def to_epoch_millis(dt: datetime) -> int:
    """Convert datetime to milliseconds since 1970-01-01T00:00:00Z."""
    return (to_instant(dt) - EPOCH) // _ONE_MILLISECOND


def from_epoch_millis(millis: int) -> datetime:
    """Convert milliseconds since the epoch to an Instant.

    Raises:
        OverflowError: If millis falls outside the datetime range
    """
    return EPOCH + timedelta(milliseconds=millis)
