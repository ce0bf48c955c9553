"""Interval with both a start and an end, derived from a start plus a duration."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterator

from calends.bound import Bound
from calends.duration import RelativeDuration
from calends.util import to_date
from calends.util.date import DateLike

from .base import IntervalLike
from .iter import UntilAfter

logger = logging.getLogger(__name__)

_ONE_DAY = timedelta(days=1)


@dataclass(frozen=True)
class ClosedInterval(IntervalLike):
    """
    A span of dates on the proleptic Gregorian calendar, inclusive on both ends.

    Creation rules (adapted from ISO 8601-2:2019 7.14 time intervals):

    - Start and duration: the start plus the duration gives the end.
    - End and duration: the day past the end minus the duration gives the start.
    - Start and end: the duration is derived from the two dates.

    The end is never stored. It is ``start + duration`` pulled back one day
    toward the start, so consecutive intervals from iteration never share a
    day, whichever direction the duration runs in.
    """

    start: date
    duration: RelativeDuration

    @classmethod
    def from_start(cls, start: DateLike, duration: RelativeDuration) -> "ClosedInterval":
        """Create an interval from a start and a duration."""
        return cls(to_date(start), duration)

    @classmethod
    def from_end(cls, end: DateLike, duration: RelativeDuration) -> "ClosedInterval":
        """Create an interval from an end and a duration.

        The duration is taken back from the day past ``end`` (the day before
        it, for a backward duration), so ``end`` itself stays inside the
        interval the same way :meth:`with_dates` counts it.
        """
        end = to_date(end)
        if end - duration == end:
            return cls(end, duration)
        start = (end + _ONE_DAY) - duration
        if start <= end:
            return cls(start, duration)
        return cls((end - _ONE_DAY) - duration, duration)

    @classmethod
    def with_dates(cls, start: DateLike, end: DateLike) -> "ClosedInterval":
        """Create an interval spanning ``start`` through ``end`` inclusive.

        The duration counts whole months crossed plus the remaining days, so
        reading it back and rebuilding from the start gives the same bounds.
        """
        start, end = to_date(start), to_date(end)
        exclusive_end = end + _ONE_DAY if end >= start else end - _ONE_DAY
        duration = RelativeDuration.from_duration_between(start, exclusive_end)
        logger.debug("Derived duration %r for %s/%s", duration, start, end)
        return cls(start, duration)

    # ------------------------------------------------------------------
    # Bounds
    # ------------------------------------------------------------------

    def _step(self) -> date:
        return self.start + self.duration

    def is_forward(self) -> bool:
        """Whether the duration moves the start forward in time."""
        return self._step() >= self.start

    def end(self) -> date:
        """End date of the interval."""
        step = self._step()
        if step > self.start:
            return step - _ONE_DAY
        if step < self.start:
            return step + _ONE_DAY
        return self.start

    def bound_start(self) -> Bound[date]:
        return Bound.included(self.start)

    def bound_end(self) -> Bound[date]:
        return Bound.included(self.end())

    # ------------------------------------------------------------------
    # Iteration
    # ------------------------------------------------------------------

    def succ(self) -> "ClosedInterval":
        """The adjacent interval of the same duration."""
        return ClosedInterval(self._step(), self.duration)

    def __iter__(self) -> Iterator["ClosedInterval"]:
        current = self
        while True:
            yield current
            following = current.succ()
            if following.start == current.start:
                # A duration with no net displacement would repeat forever
                logger.debug("Duration %r does not advance %s", self.duration, current.start)
                return
            current = following

    def until_after(self, until: DateLike) -> UntilAfter["ClosedInterval"]:
        """Iterate until just before the first interval ending at or past ``until``."""
        return UntilAfter(iter(self), to_date(until))

    def __repr__(self) -> str:
        return f"ClosedInterval({self.start.isoformat()}/{self.end().isoformat()}, {self.duration!r})"
