"""
Closed and open date intervals behind a single type.

An :class:`Interval` is one of three shapes:

- Closed: a start and a duration, so both sides are bounded
- OpenStart: unbounded before an inclusive end
- OpenEnd: unbounded after an inclusive start

Only closed intervals can be iterated. :class:`IntervalWithStart` and
:class:`IntervalWithEnd` narrow an interval to the shapes that always carry
the named side.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Iterator, Optional, Union

from calends.bound import Bound
from calends.duration import RelativeDuration
from calends.exceptions import IntervalShapeError, NotIterableError
from calends.util import to_date
from calends.util.date import DateLike

from .base import IntervalLike
from .closed import ClosedInterval
from .iter import UntilAfter
from .open import OpenEndInterval, OpenStartInterval


class IntervalKind(Enum):
    """Shapes an interval can take."""

    CLOSED = "CLOSED"
    OPEN_START = "OPEN_START"
    OPEN_END = "OPEN_END"


_INNER_TYPES = {
    IntervalKind.CLOSED: ClosedInterval,
    IntervalKind.OPEN_START: OpenStartInterval,
    IntervalKind.OPEN_END: OpenEndInterval,
}

Shape = Union[ClosedInterval, OpenStartInterval, OpenEndInterval]


@dataclass(frozen=True)
class Interval(IntervalLike):
    """A closed or open span of dates."""

    kind: IntervalKind
    inner: Shape

    def __post_init__(self) -> None:
        expected = _INNER_TYPES[self.kind]
        if not isinstance(self.inner, expected):
            raise TypeError(
                f"{self.kind.value} interval requires {expected.__name__}, "
                f"got {type(self.inner).__name__}"
            )

    @classmethod
    def closed_from_start(cls, start: DateLike, duration: RelativeDuration) -> "Interval":
        return cls(IntervalKind.CLOSED, ClosedInterval.from_start(start, duration))

    @classmethod
    def closed_from_end(cls, end: DateLike, duration: RelativeDuration) -> "Interval":
        return cls(IntervalKind.CLOSED, ClosedInterval.from_end(end, duration))

    @classmethod
    def closed_with_dates(cls, start: DateLike, end: DateLike) -> "Interval":
        return cls(IntervalKind.CLOSED, ClosedInterval.with_dates(start, end))

    @classmethod
    def open_start(cls, end: DateLike) -> "Interval":
        return cls(IntervalKind.OPEN_START, OpenStartInterval.with_end(end))

    @classmethod
    def open_end(cls, start: DateLike) -> "Interval":
        return cls(IntervalKind.OPEN_END, OpenEndInterval.with_start(start))

    @property
    def is_closed(self) -> bool:
        return self.kind == IntervalKind.CLOSED

    def bound_start(self) -> Bound[date]:
        return self.inner.bound_start()

    def bound_end(self) -> Bound[date]:
        return self.inner.bound_end()

    def duration(self) -> Optional[RelativeDuration]:
        """Duration of a closed interval, None for open shapes."""
        if self.kind == IntervalKind.CLOSED:
            return self.inner.duration
        return None

    def with_start(self) -> "IntervalWithStart":
        return IntervalWithStart.from_interval(self)

    def with_end(self) -> "IntervalWithEnd":
        return IntervalWithEnd.from_interval(self)

    def _closed(self) -> ClosedInterval:
        if self.kind != IntervalKind.CLOSED:
            raise NotIterableError(f"{self.kind.value} interval {self} cannot be iterated")
        return self.inner

    def __iter__(self) -> Iterator["Interval"]:
        closed = self._closed()
        return (Interval(IntervalKind.CLOSED, step) for step in closed)

    def until_after(self, until: DateLike) -> UntilAfter["Interval"]:
        """Iterate closed intervals, stopping before one ends at or past ``until``."""
        return UntilAfter(iter(self), to_date(until))

    def __repr__(self) -> str:
        return f"Interval.{self.kind.name}({self.iso8601()})"


@dataclass(frozen=True)
class IntervalWithStart(IntervalLike):
    """A closed or open-ended interval; the start is always present."""

    interval: Interval

    @classmethod
    def from_interval(cls, interval: Interval) -> "IntervalWithStart":
        if interval.kind == IntervalKind.OPEN_START:
            raise IntervalShapeError(f"Interval {interval} has no start")
        return cls(interval)

    def start(self) -> date:
        return self.interval.start_date()

    def bound_start(self) -> Bound[date]:
        return self.interval.bound_start()

    def bound_end(self) -> Bound[date]:
        return self.interval.bound_end()

    def into_interval(self) -> Interval:
        return self.interval


@dataclass(frozen=True)
class IntervalWithEnd(IntervalLike):
    """A closed or open-started interval; the end is always present."""

    interval: Interval

    @classmethod
    def from_interval(cls, interval: Interval) -> "IntervalWithEnd":
        if interval.kind == IntervalKind.OPEN_END:
            raise IntervalShapeError(f"Interval {interval} has no end")
        return cls(interval)

    def end(self) -> date:
        return self.interval.end_date()

    def bound_start(self) -> Bound[date]:
        return self.interval.bound_start()

    def bound_end(self) -> Bound[date]:
        return self.interval.bound_end()

    def into_interval(self) -> Interval:
        return self.interval
