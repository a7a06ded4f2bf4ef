import logging
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime, timedelta

from typing_extensions import override

from timex.util import format_nanos, require_nanos, to_duration, to_nanos

logger = logging.getLogger(__name__)


class InvalidRangeError(ValueError):
    """A range whose effective start falls after its effective end."""


class InvalidStepError(ValueError):
    """A non-positive step passed to range iteration."""


class RangeInvariantError(AssertionError):
    """Raised by the strict factories when a range the caller vouched for is invalid."""


@dataclass(frozen=True, kw_only=True)
class InclusiveRange:
    """Time range closed on both ends: ``[start, end]`` in epoch nanoseconds.

    ``start == end`` is a valid single-instant range.
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        require_nanos(self.start, "start")
        require_nanos(self.end, "end")
        if self.start > self.end:
            raise InvalidRangeError(
                f"InclusiveRange start ({self.start}) must be <= end ({self.end})"
            )

    @classmethod
    def between(cls, start: int | datetime, end: int | datetime) -> "InclusiveRange":
        """Build a range from ints or timezone-aware datetimes."""
        return cls(start=to_nanos(start), end=to_nanos(end))

    def contains(self, t: int | datetime) -> bool:
        t = to_nanos(t)
        return self.start <= t <= self.end

    def __contains__(self, t: int | datetime) -> bool:
        return self.contains(t)

    def is_before_start(self, t: int | datetime) -> bool:
        return to_nanos(t) < self.start

    def is_after_end(self, t: int | datetime) -> bool:
        return to_nanos(t) > self.end

    def iter_by(self, interval: int | timedelta) -> Iterator[int]:
        """Lazily yield ``start, start + interval, ...`` while ``<= end``.

        The step is checked here rather than on first ``next()``, so a bad
        step fails at the call site. Every call returns a fresh generator.

        Raises:
            InvalidStepError: If ``interval`` is zero or negative
        """
        step = to_duration(interval)
        if step <= 0:
            raise InvalidStepError(
                f"Iteration step must be positive.\n"
                f"Got {interval!r} ({step}ns)"
            )
        logger.debug("iterating %s by %dns", self, step)
        return self._stepped(step)

    def _stepped(self, step: int) -> Iterator[int]:
        t = self.start
        while t <= self.end:
            yield t
            t += step

    @override
    def __str__(self) -> str:
        return f"[{format_nanos(self.start)}, {format_nanos(self.end)}]"


def must_inclusive_range(start: int | datetime, end: int | datetime) -> InclusiveRange:
    """Build an InclusiveRange the caller guarantees is valid.

    An invalid range here is a bug in the caller, not bad input, so it is
    raised as RangeInvariantError instead of InvalidRangeError.
    """
    try:
        return InclusiveRange.between(start, end)
    except InvalidRangeError as e:
        logger.error("inclusive range invariant violated: %s", e)
        raise RangeInvariantError(str(e)) from e
