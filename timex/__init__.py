from .bounded import Bound, BoundedRange, must_bounded_range
from .days import civil_date, day_range, is_start_of_day, make_timestamp, start_of_day
from .interval import (
    InclusiveRange,
    InvalidRangeError,
    InvalidStepError,
    RangeInvariantError,
    must_inclusive_range,
)
from .util import (
    DAY,
    HOUR,
    MICROSECOND,
    MILLISECOND,
    MINUTE,
    NANOSECOND,
    SECOND,
    TICK,
    WEEK,
    from_nanos,
    to_duration,
    to_nanos,
)

__all__ = [
    "InclusiveRange",
    "BoundedRange",
    "Bound",
    "InvalidRangeError",
    "InvalidStepError",
    "RangeInvariantError",
    "must_inclusive_range",
    "must_bounded_range",
    "civil_date",
    "make_timestamp",
    "start_of_day",
    "is_start_of_day",
    "day_range",
    "to_nanos",
    "to_duration",
    "from_nanos",
    "TICK",
    "NANOSECOND",
    "MICROSECOND",
    "MILLISECOND",
    "SECOND",
    "MINUTE",
    "HOUR",
    "DAY",
    "WEEK",
]
