"""
Clock abstraction behind every "current time" read.

The date helpers never call datetime.now() directly. They ask a Clock, which
is a RealClock unless the caller passes something else. Tests pass a
FrozenClock, making is_future(), is_past() and current_timestamp()
deterministic without patching the system clock.
"""

from datetime import datetime, timezone
from typing import Protocol


class Clock(Protocol):
    """
    Abstract time source protocol.

    **Conceptual**: A Clock is any object that can answer "what time is it
    right now?". Functions that need the wall clock accept an optional
    clock argument and call clock.now().

    **Example**:
        current_timestamp()                              # system clock
        current_timestamp(FrozenClock.from_timestamp(0))  # always 0
    """

    def now(self) -> datetime:
        """
        Return the current time according to this clock.

        Returns:
            Timezone-aware datetime (UTC).
        """
        ...


class RealClock:
    """Clock that returns the actual current system time (UTC)."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FrozenClock:
    """
    Clock that always returns a fixed instant.

    **Usage**:
        clock = FrozenClock(datetime(2015, 1, 5, tzinfo=timezone.utc))
        clock.now()  # Always 2015-01-05T00:00:00+00:00

        clock = FrozenClock.from_timestamp(1_700_000_000)
    """

    def __init__(self, fixed_now: datetime):
        """
        Args:
            fixed_now: The datetime to return on every call to now().
                       Naive datetimes are interpreted as UTC.
        """
        if fixed_now.tzinfo is None:
            fixed_now = fixed_now.replace(tzinfo=timezone.utc)
        self._fixed_now = fixed_now

    @classmethod
    def from_timestamp(cls, seconds: float) -> "FrozenClock":
        """Build a FrozenClock pinned to `seconds` since the Unix epoch."""
        return cls(datetime.fromtimestamp(seconds, tz=timezone.utc))

    def now(self) -> datetime:
        return self._fixed_now

    def __repr__(self) -> str:
        return f"FrozenClock({self._fixed_now.isoformat()})"


_real_clock = RealClock()


def get_real_clock() -> Clock:
    """
    Return the shared RealClock instance.

    RealClock holds no state, so a single instance serves every caller.
    """
    return _real_clock


def get_frozen_clock(fixed_now: datetime) -> Clock:
    """
    Factory function to create a FrozenClock with a given instant.

    Args:
        fixed_now: The datetime to freeze at (timezone-aware recommended).

    Returns:
        FrozenClock instance configured with fixed_now.
    """
    return FrozenClock(fixed_now)
