"""timecodec: RFC 3339 text codec for UTC Instants.

Six functions convert between Instants and RFC 3339 time, date and
date-time strings:

    from timecodec import parse_date_time, serialize_date_time
    serialize_date_time(parse_date_time("2017-01-07T11:25:00+01:00"))
    # "2017-01-07T10:25:00.000Z"
"""

from .utils import instant
from .utils.isodatetime import (
    parse_date,
    parse_date_time,
    parse_time,
    serialize_date,
    serialize_date_time,
    serialize_time,
)
from .clock import Clock, FixedClock, SystemClock, get_default_clock, set_default_clock
from .exceptions import ParseError, TimecodecError

__all__ = [
    "parse_time",
    "serialize_time",
    "parse_date",
    "serialize_date",
    "parse_date_time",
    "serialize_date_time",
    "instant",
    "Clock",
    "FixedClock",
    "SystemClock",
    "get_default_clock",
    "set_default_clock",
    "ParseError",
    "TimecodecError",
]
