"""
Timestamp acquisition and arithmetic.

Timestamps are plain integers counting seconds (or milliseconds, for the
`_millis` helpers) since the Unix epoch, 1970-01-01T00:00:00 UTC. They may be
negative (before 1970) or far in the future; arithmetic results are held to
the signed 64-bit range and raise ArithmeticOverflowError outside it.

**Two kinds of division**:
  - Epoch-relative helpers (get_days, get_hours, get_minutes, start_of_day...)
    FLOOR, so that one second before the epoch falls on day -1, not day 0.
  - Duration conversions (seconds_to_minutes/hours/days) TRUNCATE toward zero,
    so -90 seconds is -1 minute, like the positive case mirrored.

**Clock reads**: current_timestamp() and everything built on it read time
from a Clock (src.utils.time). Pass a FrozenClock to make them deterministic.

**Text layout**: format() always renders `YYYY-MM-DD HH:MM:SS` in UTC and
parse() accepts exactly that layout. The layout is a fixed contract; callers
may compare formatted strings directly.
"""

import calendar
import re
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Optional

from src.utils.errors import InvalidArgumentError
from src.utils.math import check_int64, divide
from src.utils.time import Clock, get_real_clock

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400
SECONDS_PER_WEEK = 7 * SECONDS_PER_DAY

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_SECOND = timedelta(seconds=1)
_ONE_MILLISECOND = timedelta(milliseconds=1)
_LAYOUT_RE = re.compile(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}$")

# 1970-01-01 was a Thursday; shifting by 3 makes Monday == 0
_EPOCH_WEEKDAY_SHIFT = 3


class OffsetUnit(Enum):
    """Unit for offset(); each value is the unit's length in seconds."""
    SECONDS = 1
    MINUTES = SECONDS_PER_MINUTE
    HOURS = SECONDS_PER_HOUR
    DAYS = SECONDS_PER_DAY


def _now(clock: Optional[Clock]) -> datetime:
    return (clock or get_real_clock()).now()


def _to_datetime(ts: int) -> datetime:
    try:
        return _EPOCH + timedelta(seconds=ts)
    except OverflowError as e:
        raise InvalidArgumentError(
            f"timestamp {ts} is outside the calendar range (years 1-9999)"
        ) from e


def _to_timestamp(dt: datetime) -> int:
    return (dt - _EPOCH) // _ONE_SECOND


def current_timestamp(clock: Optional[Clock] = None) -> int:
    """
    Current time in whole seconds since the epoch.

    Args:
        clock: Time source; defaults to the system clock (RealClock).

    Returns:
        Seconds since 1970-01-01T00:00:00 UTC, floored.
    """
    return _to_timestamp(_now(clock))


def current_timestamp_millis(clock: Optional[Clock] = None) -> int:
    """Current time in whole milliseconds since the epoch."""
    return (_now(clock) - _EPOCH) // _ONE_MILLISECOND


def current_date(clock: Optional[Clock] = None) -> str:
    """Current time rendered with format()."""
    return format(current_timestamp(clock))


def is_future(ts: int, clock: Optional[Clock] = None) -> bool:
    """True if `ts` is strictly after now; ts == now is not future."""
    return ts > current_timestamp(clock)


def is_past(ts: int, clock: Optional[Clock] = None) -> bool:
    """True if `ts` is strictly before now; ts == now is not past."""
    return ts < current_timestamp(clock)


def diff_seconds(ts1: int, ts2: int) -> int:
    """
    Signed difference ts1 - ts2 in seconds.

    diff_seconds(100, 50) == 50 and diff_seconds(50, 100) == -50; the sign
    is kept, not clamped or made absolute.
    """
    return check_int64(ts1 - ts2, f"diff_seconds({ts1}, {ts2})")


def add_seconds(ts: int, n: int) -> int:
    return check_int64(ts + n, f"add_seconds({ts}, {n})")


def subtract_seconds(ts: int, n: int) -> int:
    return check_int64(ts - n, f"subtract_seconds({ts}, {n})")


def offset(ts: int, value: int, unit: OffsetUnit) -> int:
    """
    Shift `ts` by `value` units (negative values shift backwards).

    offset(0, 2, OffsetUnit.HOURS) == 7200

    Raises:
        ArithmeticOverflowError: If the shift or the result leaves the
            signed 64-bit range.
    """
    shift = check_int64(value * unit.value, f"offset({ts}, {value}, {unit.name})")
    return check_int64(ts + shift, f"offset({ts}, {value}, {unit.name})")


def get_minutes(ts: int) -> int:
    """Whole minutes since the epoch, floored (get_minutes(-1) == -1)."""
    return ts // SECONDS_PER_MINUTE


def get_hours(ts: int) -> int:
    """Whole hours since the epoch, floored."""
    return ts // SECONDS_PER_HOUR


def get_days(ts: int) -> int:
    """
    Whole days since the epoch, floored toward negative infinity.

    get_days(86399) == 0, get_days(86400) == 1, get_days(-1) == -1: an instant
    before the epoch belongs to the calendar day it falls on (1969-12-31 is
    day -1).
    """
    return ts // SECONDS_PER_DAY


def seconds_to_minutes(seconds: int) -> int:
    """Duration conversion, truncating toward zero (-90 -> -1)."""
    return divide(seconds, SECONDS_PER_MINUTE)


def seconds_to_hours(seconds: int) -> int:
    """Duration conversion, truncating toward zero."""
    return divide(seconds, SECONDS_PER_HOUR)


def seconds_to_days(seconds: int) -> int:
    """Duration conversion, truncating toward zero."""
    return divide(seconds, SECONDS_PER_DAY)


def format(ts: int) -> str:
    """
    Render `ts` as `YYYY-MM-DD HH:MM:SS` in UTC.

    **Functionally**:
    - format(0) == "1970-01-01 00:00:00"
    - format(-1) == "1969-12-31 23:59:59"
    - Years are always four digits, zero padded (year 1 is "0001").

    Raises:
        InvalidArgumentError: If `ts` falls outside years 1-9999.
    """
    dt = _to_datetime(ts)
    # Built by hand: strftime("%Y") does not zero-pad years below 1000 on glibc
    return (
        f"{dt.year:04d}-{dt.month:02d}-{dt.day:02d} "
        f"{dt.hour:02d}:{dt.minute:02d}:{dt.second:02d}"
    )


def format_millis(ts_millis: int) -> str:
    """Render a millisecond timestamp as `YYYY-MM-DD HH:MM:SS.mmm` in UTC."""
    seconds, millis = divmod(ts_millis, 1000)
    return f"{format(seconds)}.{millis:03d}"


def parse(text: str) -> int:
    """
    Parse text in the format() layout back to a timestamp.

    parse(format(ts)) == ts for every formattable ts.

    Raises:
        InvalidArgumentError: If `text` is not exactly `YYYY-MM-DD HH:MM:SS`
            or names an impossible date/time (e.g., 2023-02-30).
    """
    if not _LAYOUT_RE.match(text):
        raise InvalidArgumentError(
            f"timestamp text must look like 'YYYY-MM-DD HH:MM:SS', got: {text!r}"
        )
    try:
        dt = datetime.strptime(text, TIMESTAMP_FORMAT)
    except ValueError as e:
        raise InvalidArgumentError(f"invalid timestamp text {text!r}: {e}") from e
    return _to_timestamp(dt.replace(tzinfo=timezone.utc))


def is_am(ts: int) -> bool:
    """True if the UTC hour of `ts` is before noon."""
    return (ts % SECONDS_PER_DAY) < 12 * SECONDS_PER_HOUR


def is_pm(ts: int) -> bool:
    """True if the UTC hour of `ts` is noon or later."""
    return not is_am(ts)


def start_of_day(ts: int) -> int:
    """Midnight UTC of the day containing `ts`."""
    return check_int64(ts - ts % SECONDS_PER_DAY, f"start_of_day({ts})")


def end_of_day(ts: int) -> int:
    """Last second (23:59:59 UTC) of the day containing `ts`."""
    return check_int64(start_of_day(ts) + SECONDS_PER_DAY - 1, f"end_of_day({ts})")


def start_of_week(ts: int) -> int:
    """Monday 00:00:00 UTC of the week containing `ts`."""
    days = get_days(ts)
    weekday = (days + _EPOCH_WEEKDAY_SHIFT) % 7
    return check_int64((days - weekday) * SECONDS_PER_DAY, f"start_of_week({ts})")


def end_of_week(ts: int) -> int:
    """Sunday 23:59:59 UTC of the week containing `ts`."""
    return check_int64(start_of_week(ts) + SECONDS_PER_WEEK - 1, f"end_of_week({ts})")


def start_of_month(ts: int) -> int:
    """
    First second of the calendar month containing `ts` (UTC).

    Raises:
        InvalidArgumentError: If `ts` falls outside years 1-9999.
    """
    dt = _to_datetime(ts)
    return _to_timestamp(dt.replace(day=1, hour=0, minute=0, second=0, microsecond=0))


def end_of_month(ts: int) -> int:
    """Last second of the calendar month containing `ts` (UTC); handles leap years."""
    dt = _to_datetime(ts)
    last_day = calendar.monthrange(dt.year, dt.month)[1]
    return _to_timestamp(dt.replace(day=last_day, hour=23, minute=59, second=59, microsecond=0))


def start_of_year(ts: int) -> int:
    """January 1st 00:00:00 UTC of the year containing `ts`."""
    dt = _to_datetime(ts)
    return _to_timestamp(
        dt.replace(month=1, day=1, hour=0, minute=0, second=0, microsecond=0)
    )


def end_of_year(ts: int) -> int:
    """December 31st 23:59:59 UTC of the year containing `ts`."""
    dt = _to_datetime(ts)
    return _to_timestamp(
        dt.replace(month=12, day=31, hour=23, minute=59, second=59, microsecond=0)
    )
