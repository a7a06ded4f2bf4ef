from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from timex import DAY, MICROSECOND, SECOND, from_nanos, to_duration, to_nanos


def test_to_nanos_passes_ints_through() -> None:
    assert to_nanos(123) == 123
    assert to_nanos(-5) == -5


def test_to_nanos_converts_datetimes_exactly() -> None:
    dt = datetime(2024, 1, 1, 0, 0, 0, 123456, tzinfo=timezone.utc)

    assert to_nanos(dt) == 1704067200 * SECOND + 123456 * MICROSECOND


def test_to_nanos_same_instant_in_any_timezone() -> None:
    utc = datetime(2024, 1, 1, 5, tzinfo=timezone.utc)
    ny = datetime(2024, 1, 1, tzinfo=ZoneInfo("America/New_York"))

    assert to_nanos(utc) == to_nanos(ny)


def test_to_nanos_rejects_bad_input() -> None:
    with pytest.raises(TypeError, match="timezone-aware"):
        to_nanos(datetime(2024, 1, 1))
    with pytest.raises(TypeError, match="int"):
        to_nanos("2024-01-01")  # pyright: ignore[reportArgumentType]
    with pytest.raises(TypeError):
        to_nanos(True)


def test_to_duration() -> None:
    assert to_duration(7) == 7
    assert to_duration(timedelta(days=1)) == DAY
    assert to_duration(timedelta(microseconds=-1)) == -MICROSECOND
    with pytest.raises(TypeError, match="timedelta"):
        to_duration(1.5)  # pyright: ignore[reportArgumentType]


def test_from_nanos_floors_to_microseconds() -> None:
    ts = 1704067200 * SECOND + 1999

    assert from_nanos(ts) == datetime(2024, 1, 1, 0, 0, 0, 1, tzinfo=timezone.utc)
    assert from_nanos(-1) == datetime(
        1969, 12, 31, 23, 59, 59, 999999, tzinfo=timezone.utc
    )


def test_from_nanos_in_timezone() -> None:
    dt = from_nanos(1704067200 * SECOND, "America/New_York")

    assert (dt.year, dt.month, dt.day, dt.hour) == (2023, 12, 31, 19)
