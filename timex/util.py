"""Utility constants and helpers for timex.

Timestamps are integer nanoseconds since the Unix epoch and durations are
integer nanoseconds. The constants below are durations in nanoseconds.
"""

from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

# Time unit constants (all values in nanoseconds)
NANOSECOND = 1
MICROSECOND = 1_000
MILLISECOND = 1_000_000
SECOND = 1_000_000_000
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE
DAY = 24 * HOUR
WEEK = 7 * DAY

# Smallest representable step between two timestamps
TICK = NANOSECOND

DEFAULT_TZ = "UTC"

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def to_nanos(value: int | datetime) -> int:
    """Convert a timestamp-like value to integer nanoseconds since the epoch.

    Accepts:
    - int: Passed through as-is (nanoseconds)
    - datetime: Must be timezone-aware; converted exactly

    Raises:
        TypeError: If value is an unsupported type or a naive datetime
    """
    # bool is an int subclass but never a timestamp
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, datetime):
        if value.tzinfo is None:
            raise TypeError(
                f"Timestamp must be a timezone-aware datetime.\n"
                f"Got naive datetime: {value!r}\n"
                f"Hint: Add timezone info:\n"
                f"  from zoneinfo import ZoneInfo\n"
                f"  dt = datetime(..., tzinfo=ZoneInfo('UTC'))"
            )
        return ((value - EPOCH) // timedelta(microseconds=1)) * MICROSECOND
    raise TypeError(
        f"Timestamp must be int (nanoseconds) or datetime.\n"
        f"Got {type(value).__name__!r}: {value!r}"
    )


def require_nanos(value: object, name: str) -> None:
    """Reject anything but an int nanosecond timestamp for field `name`."""
    if isinstance(value, int) and not isinstance(value, bool):
        return
    raise TypeError(
        f"Range {name} must be int (nanoseconds).\n"
        f"Got {type(value).__name__!r}: {value!r}\n"
        f"Hint: Use the between() constructor to pass datetimes:\n"
        f"  InclusiveRange.between(start_dt, end_dt)"
    )


def to_duration(value: int | timedelta) -> int:
    """Convert a duration-like value to integer nanoseconds."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    if isinstance(value, timedelta):
        return (value // timedelta(microseconds=1)) * MICROSECOND
    raise TypeError(
        f"Duration must be int (nanoseconds) or timedelta.\n"
        f"Got {type(value).__name__!r}: {value!r}"
    )


def from_nanos(ns: int, tz: str = DEFAULT_TZ) -> datetime:
    """Return the aware datetime for `ns` in `tz`, floored to microseconds."""
    dt = EPOCH + timedelta(microseconds=ns // MICROSECOND)
    return dt.astimezone(ZoneInfo(tz))


def format_nanos(ns: int) -> str:
    """ISO-8601 rendering in UTC with all nine fractional digits."""
    base = (EPOCH + timedelta(seconds=ns // SECOND)).strftime("%Y-%m-%dT%H:%M:%S")
    return f"{base}.{ns % SECOND:09d}Z"
