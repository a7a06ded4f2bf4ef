"""Calendar-day helpers.

Timestamps are decomposed on the civil calendar of an IANA timezone, so
"start of day" means local midnight and a day across a DST change is 23 or
25 hours long.
"""

from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

from timex.bounded import Bound, BoundedRange
from timex.util import DEFAULT_TZ, MICROSECOND, SECOND, from_nanos, to_nanos


def civil_date(ts: int, tz: str = DEFAULT_TZ) -> tuple[int, int, int]:
    """Return (year, month, day) of `ts` in `tz`."""
    dt = from_nanos(ts, tz)
    return dt.year, dt.month, dt.day


def make_timestamp(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    nanosecond: int = 0,
    tz: str = DEFAULT_TZ,
) -> int:
    """Nanosecond timestamp of a local wall-clock time in `tz`.

    Raises:
        ValueError: If any component is out of range
    """
    if not 0 <= nanosecond < SECOND:
        raise ValueError(
            f"nanosecond must be in [0, {SECOND}), got {nanosecond}"
        )
    dt = datetime(year, month, day, hour, minute, second, tzinfo=ZoneInfo(tz))
    return to_nanos(dt) + nanosecond


def start_of_day(ts: int, tz: str = DEFAULT_TZ) -> int:
    """Local midnight of the day containing `ts` in `tz`."""
    year, month, day = civil_date(ts, tz)
    return make_timestamp(year, month, day, tz=tz)


def is_start_of_day(ts: int, tz: str = DEFAULT_TZ) -> bool:
    dt = from_nanos(ts, tz)
    # from_nanos floors to microseconds; check the remainder separately
    return (
        dt.hour == 0
        and dt.minute == 0
        and dt.second == 0
        and dt.microsecond == 0
        and ts % MICROSECOND == 0
    )


def day_range(ts: int, tz: str = DEFAULT_TZ) -> BoundedRange:
    """Half-open range ``[midnight, next midnight)`` of the day containing `ts`."""
    year, month, day = civil_date(ts, tz)
    # Step on the calendar, not by 24h, so DST days keep their true length
    following = datetime(year, month, day) + timedelta(days=1)
    return BoundedRange(
        start=make_timestamp(year, month, day, tz=tz),
        end=make_timestamp(following.year, following.month, following.day, tz=tz),
        start_bound=Bound.CLOSED,
        end_bound=Bound.OPEN,
    )
