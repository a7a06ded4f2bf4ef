"""Time ranges with an independently open or closed bound on each side.

An open bound is normalized by nudging its endpoint one tick inward, which
turns every range into a closed one over the same set of instants. All
queries compare against those nudged endpoints; the raw endpoints are kept
only for the ``start``/``end`` accessors.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Literal, assert_never

from typing_extensions import override

from timex.interval import InclusiveRange, InvalidRangeError, RangeInvariantError
from timex.util import TICK, format_nanos, require_nanos, to_nanos

logger = logging.getLogger(__name__)


class Bound(Enum):
    CLOSED = "closed"
    OPEN = "open"

    @classmethod
    def from_inclusive(cls, inclusive: bool) -> "Bound":
        return cls.CLOSED if inclusive else cls.OPEN

    @property
    def inclusive(self) -> bool:
        return self is Bound.CLOSED

    def nudge(self, value: int, edge: Literal["start", "end"]) -> int:
        """Move `value` inward by one tick if this bound excludes it."""
        match self:
            case Bound.CLOSED:
                return value
            case Bound.OPEN:
                return value + TICK if edge == "start" else value - TICK
            case _:
                assert_never(self)


@dataclass(frozen=True, kw_only=True)
class BoundedRange:
    start: int
    end: int
    start_bound: Bound = Bound.CLOSED
    end_bound: Bound = Bound.OPEN

    def __post_init__(self) -> None:
        require_nanos(self.start, "start")
        require_nanos(self.end, "end")
        if self.inclusive_start > self.inclusive_end:
            raise InvalidRangeError(
                f"BoundedRange start ({self.start}, {self.start_bound.value}) "
                f"to end ({self.end}, {self.end_bound.value}) is empty: first "
                f"included instant ({self.inclusive_start}) is after last "
                f"({self.inclusive_end})"
            )

    @classmethod
    def between(
        cls,
        start: int | datetime,
        end: int | datetime,
        start_bound: Bound = Bound.CLOSED,
        end_bound: Bound = Bound.OPEN,
    ) -> "BoundedRange":
        """Build a range from ints or timezone-aware datetimes."""
        return cls(
            start=to_nanos(start),
            end=to_nanos(end),
            start_bound=start_bound,
            end_bound=end_bound,
        )

    @classmethod
    def from_flags(
        cls,
        start: int | datetime,
        end: int | datetime,
        start_inclusive: bool,
        end_inclusive: bool,
    ) -> "BoundedRange":
        """Build a range from boolean inclusivity flags."""
        return cls.between(
            start,
            end,
            Bound.from_inclusive(start_inclusive),
            Bound.from_inclusive(end_inclusive),
        )

    @property
    def inclusive_start(self) -> int:
        """Earliest instant inside the range."""
        return self.start_bound.nudge(self.start, "start")

    @property
    def inclusive_end(self) -> int:
        """Latest instant inside the range."""
        return self.end_bound.nudge(self.end, "end")

    @property
    def is_start_inclusive(self) -> bool:
        return self.start_bound.inclusive

    @property
    def is_end_inclusive(self) -> bool:
        return self.end_bound.inclusive

    def is_before_start(self, t: int | datetime) -> bool:
        """True if `t` precedes the range; an open start counts as before."""
        return to_nanos(t) < self.inclusive_start

    def is_after_end(self, t: int | datetime) -> bool:
        """True if `t` follows the range; an open end counts as after."""
        return to_nanos(t) > self.inclusive_end

    def contains(self, t: int | datetime) -> bool:
        return not self.is_before_start(t) and not self.is_after_end(t)

    def __contains__(self, t: int | datetime) -> bool:
        return self.contains(t)

    def to_inclusive(self) -> InclusiveRange:
        """Closed range with the same members, down to the tick.

        Raises:
            InvalidRangeError: If nudging leaves no instants
        """
        return InclusiveRange(start=self.inclusive_start, end=self.inclusive_end)

    @override
    def __str__(self) -> str:
        left = "[" if self.is_start_inclusive else "("
        right = "]" if self.is_end_inclusive else ")"
        return f"{left}{format_nanos(self.start)}, {format_nanos(self.end)}{right}"


def must_bounded_range(
    start: int | datetime,
    end: int | datetime,
    start_bound: Bound = Bound.CLOSED,
    end_bound: Bound = Bound.OPEN,
) -> BoundedRange:
    """Build a BoundedRange the caller guarantees is valid.

    Raises:
        RangeInvariantError: If the range is empty after normalization
    """
    try:
        return BoundedRange.between(start, end, start_bound, end_bound)
    except InvalidRangeError as e:
        logger.error("bounded range invariant violated: %s", e)
        raise RangeInvariantError(str(e)) from e
