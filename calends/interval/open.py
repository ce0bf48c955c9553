"""Intervals missing one side."""

from dataclasses import dataclass
from datetime import date

from calends.bound import Bound
from calends.util import to_date
from calends.util.date import DateLike

from .base import IntervalLike


@dataclass(frozen=True)
class OpenStartInterval(IntervalLike):
    """Every date up to and including ``end``."""

    end: date

    @classmethod
    def with_end(cls, end: DateLike) -> "OpenStartInterval":
        return cls(to_date(end))

    def bound_start(self) -> Bound[date]:
        return Bound.unbounded()

    def bound_end(self) -> Bound[date]:
        return Bound.included(self.end)


@dataclass(frozen=True)
class OpenEndInterval(IntervalLike):
    """Every date from ``start`` onward."""

    start: date

    @classmethod
    def with_start(cls, start: DateLike) -> "OpenEndInterval":
        return cls(to_date(start))

    def bound_start(self) -> Bound[date]:
        return Bound.included(self.start)

    def bound_end(self) -> Bound[date]:
        return Bound.unbounded()
