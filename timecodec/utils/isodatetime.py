"""RFC 3339 time/date/date-time conversion utilities.

This module centralizes all transformations between Instants (UTC datetimes
with millisecond precision) and RFC 3339 strings. Every parser returns an
Instant and every serializer emits UTC text with a "Z" designator and
exactly three fractional digits.

    parse_time("11:00:12Z")           # today at 11:00:12 UTC
    serialize_time(instant)           # "02:04:10.344Z"
    parse_date("2016-12-17")          # 2016-12-17T00:00:00Z
    serialize_date(instant)           # "2016-02-01"
    parse_date_time("2017-01-07T11:25:00.450+01:00")
    serialize_date_time(instant)      # "2016-02-01T02:04:10.344Z"

Fractional seconds are truncated to milliseconds, never rounded:
"00:00:00.12399Z" parses to 123 ms.
"""

import logging
import re
from datetime import datetime, timedelta, UTC

from ..clock import Clock, get_default_clock
from ..config import settings
from ..exceptions import ParseError
from .instant import to_instant

logger = logging.getLogger(__name__)

_DATE = r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
_TIME = (
    r"(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})"
    r"(?:\.(?P<fraction>\d+))?"
    r"(?P<offset>[Zz]|(?P<sign>[+-])(?P<offset_hour>\d{2}):(?P<offset_minute>\d{2}))"
)

_TIME_RE = re.compile(_TIME, re.ASCII)
_DATE_RE = re.compile(_DATE, re.ASCII)
_DATE_TIME_RE = re.compile(rf"{_DATE}(?P<separator>[Tt ]){_TIME}", re.ASCII)


def _error(message: str, value: object, kind: str) -> ParseError:
    logger.debug(f"Rejected {kind} value {value!r}: {message}")
    return ParseError(message, {"value": value, "kind": kind})


def _match(text: str, kind: str, *patterns: re.Pattern) -> re.Match:
    """Match text against the first fitting pattern and check designators."""
    if not isinstance(text, str):
        raise _error(f"Expected a string, got {type(text).__name__}", text, kind)

    for pattern in patterns:
        match = pattern.fullmatch(text)
        if match is not None:
            break
    else:
        raise _error(f"Invalid RFC 3339 {kind} string: {text!r}", text, kind)

    fields = match.groupdict()
    separator = fields.get("separator")
    if separator == " " and not settings.allow_space_separator:
        raise _error("Space separator between date and time is not allowed", text, kind)
    if not settings.allow_lowercase_designators and (
        separator == "t" or fields.get("offset") == "z"
    ):
        raise _error("Lowercase 't' and 'z' designators are not allowed", text, kind)
    return match


def _build(match: re.Match, value: str, kind: str) -> datetime:
    """Build an Instant from matched RFC 3339 fields."""
    fields = match.groupdict()

    # Keep the first three digits only; ".1" means 100 ms
    fraction = (fields.get("fraction") or "")[:3].ljust(3, "0")

    try:
        local = datetime(
            int(fields["year"]),
            int(fields["month"]),
            int(fields["day"]),
            int(fields.get("hour") or 0),
            int(fields.get("minute") or 0),
            int(fields.get("second") or 0),
            int(fraction) * 1000,
        )
    except ValueError as e:
        raise _error(str(e).capitalize(), value, kind) from e

    offset = timedelta(0)
    if fields.get("sign"):
        offset_hour = int(fields["offset_hour"])
        offset_minute = int(fields["offset_minute"])
        if offset_hour > 23 or offset_minute > 59:
            raise _error(f"Offset out of range: {fields['offset']}", value, kind)
        offset = timedelta(hours=offset_hour, minutes=offset_minute)
        if fields["sign"] == "-":
            offset = -offset

    try:
        return (local - offset).replace(tzinfo=UTC)
    except OverflowError as e:
        raise _error("Date-time out of range after applying offset", value, kind) from e


def parse_time(time: str, clock: Clock | None = None) -> datetime:
    """Parse an RFC 3339 time string into an Instant on the current UTC date.

    The current date comes from ``clock`` (or the default clock) and is
    combined with the time string. Suppose the current date is 2016-01-01,
    then parse_time("11:00:12Z") returns 2016-01-01T11:00:12Z. An offset can
    move the result into the adjacent UTC day.

    Raises:
        ParseError: If time is not a valid RFC 3339 full-time string
    """
    _match(time, "time", _TIME_RE)
    today = serialize_date((clock or get_default_clock()).now())
    return _build(_match(f"{today}T{time}", "time", _DATE_TIME_RE), time, "time")


def serialize_time(dt: datetime) -> str:
    """Serialize a datetime into an RFC 3339 time string (hh:mm:ss.sssZ)."""
    date_time = serialize_date_time(dt)
    return date_time[date_time.index("T") + 1:]


def parse_date(date: str) -> datetime:
    """Parse an RFC 3339 date string into an Instant at midnight UTC.

    Full date-time strings are accepted as well and keep their time of day.

    Raises:
        ParseError: If date is neither a full-date nor a date-time string
    """
    return _build(_match(date, "date", _DATE_RE, _DATE_TIME_RE), date, "date")


def serialize_date(dt: datetime) -> str:
    """Serialize a datetime into an RFC 3339 date string (YYYY-MM-DD)."""
    return serialize_date_time(dt).split("T")[0]


def parse_date_time(date_time: str) -> datetime:
    """Parse an RFC 3339 date-time string into an Instant.

    Raises:
        ParseError: If date_time is not a valid RFC 3339 date-time string
    """
    return _build(_match(date_time, "date-time", _DATE_TIME_RE), date_time, "date-time")


def serialize_date_time(dt: datetime) -> str:
    """Serialize a datetime into an RFC 3339 date-time string.

    Output is always YYYY-MM-DDThh:mm:ss.sssZ. Naive datetimes are treated
    as UTC.
    """
    return to_instant(dt).isoformat(timespec="milliseconds").replace("+00:00", "Z")
