"""Shared test fixtures for timecodec."""

from datetime import datetime, UTC

import pytest

from timecodec.clock import FixedClock, set_default_clock
from timecodec.config import settings


@pytest.fixture
def fixed_clock():
    """Pin the default clock to 2017-01-01T00:00:00.000Z.

    Returns the FixedClock so tests can move it with set() or advance().
    The previous default clock is restored afterwards.
    """
    clock = FixedClock(datetime(2017, 1, 1, tzinfo=UTC))
    previous = set_default_clock(clock)

    yield clock

    set_default_clock(previous)


@pytest.fixture
def override_settings():
    """Allow tests to change codec settings for their duration.

    Returns the live settings object; every field is restored afterwards.
    """
    original = settings.model_dump()

    yield settings

    for name, value in original.items():
        setattr(settings, name, value)
