"""Clock abstraction for time-only parsing.

parse_time() needs "today" to turn a time-of-day into an Instant. Rather
than reading the wall clock directly, it asks a Clock. Callers can pass one
explicitly, or replace the process default (tests usually do the latter
through the ``fixed_clock`` fixture).
"""

import logging
from datetime import datetime, timedelta, UTC
from typing import Protocol

from .utils.instant import to_instant

logger = logging.getLogger(__name__)


class Clock(Protocol):
    """Anything that can report the current Instant."""

    def now(self) -> datetime:
        ...


class SystemClock:
    """Clock backed by the system wall clock."""

    def now(self) -> datetime:
        return to_instant(datetime.now(UTC))


class FixedClock:
    """Clock that always reports the same Instant until moved."""

    def __init__(self, instant: datetime):
        self._instant = to_instant(instant)

    def now(self) -> datetime:
        return self._instant

    def set(self, instant: datetime) -> None:
        self._instant = to_instant(instant)

    def advance(self, delta: timedelta) -> None:
        self._instant = to_instant(self._instant + delta)


_default_clock: Clock = SystemClock()


def get_default_clock() -> Clock:
    """Get the clock used when parse_time() is called without one."""
    return _default_clock


def set_default_clock(clock: Clock | None) -> Clock:
    """Replace the default clock, returning the previous one.

    Passing None restores the system clock.
    """
    global _default_clock
    previous = _default_clock
    _default_clock = clock if clock is not None else SystemClock()
    logger.debug(f"Default clock set to {type(_default_clock).__name__}")
    return previous
