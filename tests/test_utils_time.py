"""
Tests for src/utils/time.py

These tests verify the clock abstraction works correctly for both real and
frozen time, and that the date helpers honour an injected clock.
"""

from datetime import datetime, timezone
import time

from src.utils.date import current_timestamp, is_future
from src.utils.time import (
    Clock,
    FrozenClock,
    RealClock,
    get_frozen_clock,
    get_real_clock,
)


def test_real_clock_returns_current_time():
    """Test that RealClock returns a time close to actual current time."""
    clock = RealClock()

    before = datetime.now(timezone.utc)
    clock_time = clock.now()
    after = datetime.now(timezone.utc)

    assert before <= clock_time <= after
    assert clock_time.tzinfo == timezone.utc


def test_real_clock_advances():
    """Test that RealClock returns different times on successive calls."""
    clock = RealClock()

    time1 = clock.now()
    time.sleep(0.01)
    time2 = clock.now()

    assert time2 > time1


def test_frozen_clock_returns_fixed_time():
    """Test that FrozenClock always returns the configured instant."""
    fixed_time = datetime(2015, 1, 5, 12, 30, 45, tzinfo=timezone.utc)
    clock = FrozenClock(fixed_time)

    assert clock.now() == fixed_time
    assert clock.now() == fixed_time


def test_frozen_clock_treats_naive_datetime_as_utc():
    clock = FrozenClock(datetime(2020, 7, 4, 10, 30))
    assert clock.now() == datetime(2020, 7, 4, 10, 30, tzinfo=timezone.utc)


def test_frozen_clock_from_timestamp():
    clock = FrozenClock.from_timestamp(0)
    assert clock.now() == datetime(1970, 1, 1, tzinfo=timezone.utc)
    assert current_timestamp(FrozenClock.from_timestamp(-3600)) == -3600


def test_get_real_clock_factory():
    """Test that get_real_clock() returns a working, shared RealClock."""
    clock = get_real_clock()

    assert isinstance(clock, RealClock)
    assert clock is get_real_clock()
    assert clock.now().tzinfo == timezone.utc


def test_get_frozen_clock_factory():
    """Test that get_frozen_clock() returns a working FrozenClock."""
    fixed_time = datetime(2018, 3, 10, 8, 15, 0, tzinfo=timezone.utc)
    clock = get_frozen_clock(fixed_time)

    assert clock.now() == fixed_time
    assert "2018-03-10" in repr(clock)


def test_any_object_with_now_is_a_clock():
    """Date helpers only need a now() method (structural typing)."""

    class TickingClock:
        def __init__(self):
            self.calls = 0

        def now(self) -> datetime:
            self.calls += 1
            return datetime(2030, 1, 1, tzinfo=timezone.utc)

    clock: Clock = TickingClock()
    assert not is_future(1_000, clock)
    assert is_future(4_000_000_000, clock)
    assert clock.calls == 2
