"""Utility functions for timecodec.

This package provides the RFC 3339 codec and the Instant helpers it is
built on. Import convention: use module-level imports for clarity.

    from timecodec.utils import isodatetime, instant
    moment = isodatetime.parse_date_time("2017-01-07T11:25:00+01:00")
    text = isodatetime.serialize_date_time(moment)
    millis = instant.to_epoch_millis(moment)
"""

# instant must load first: isodatetime depends on it through the clock module
from . import instant, isodatetime

__all__ = ["instant", "isodatetime"]
