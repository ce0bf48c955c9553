"""Interval given directly as a pair of bounds."""

from dataclasses import dataclass
from datetime import date, timedelta
from functools import total_ordering
from typing import Any, Dict, Optional

from calends.bound import Bound, cmp_range
from calends.conventions.types import BoundKind
from calends.util import to_date

from .base import IntervalLike

_ONE_DAY = timedelta(days=1)


def _bound_from(kind: str, value: Optional[Any]) -> Bound[date]:
    bound_kind = BoundKind(kind.upper())
    if bound_kind == BoundKind.UNBOUNDED:
        return Bound.unbounded()
    return Bound(bound_kind, to_date(value))


def _describe(bound: Bound[date]) -> str:
    if bound.is_unbounded:
        return "Unbounded"
    return f"{bound.kind.value.capitalize()}({bound.value.isoformat()})"


@total_ordering
@dataclass(frozen=True, eq=True)
class NaiveInterval(IntervalLike):
    """
    A range of dates with an explicit start bound and end bound.

    Any combination of included, excluded and unbounded sides is allowed.
    Instances order by start bound, then end bound.
    """

    start: Bound[date]
    end: Bound[date]

    @classmethod
    def from_interval(cls, interval: IntervalLike) -> "NaiveInterval":
        return cls(interval.bound_start(), interval.bound_end())

    def bound_start(self) -> Bound[date]:
        return self.start

    def bound_end(self) -> Bound[date]:
        return self.end

    def normalized(self) -> "NaiveInterval":
        """Same dates, with excluded sides rewritten as included ones."""
        start, end = self.start, self.end
        if start.is_excluded:
            start = Bound.included(start.value + _ONE_DAY)
        if end.is_excluded:
            end = Bound.included(end.value - _ONE_DAY)
        return NaiveInterval(start, end)

    def iso8601(self) -> str:
        if self.start.is_excluded or self.end.is_excluded:
            return self.normalized().iso8601()
        return super().iso8601()

    def to_dict(self) -> Dict[str, Optional[Any]]:
        return {
            "start_bound": self.start.kind.value,
            "start_date": self.start.to_opt(),
            "end_bound": self.end.kind.value,
            "end_date": self.end.to_opt(),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NaiveInterval":
        return cls(
            _bound_from(data["start_bound"], data.get("start_date")),
            _bound_from(data["end_bound"], data.get("end_date")),
        )

    def __lt__(self, other: "NaiveInterval") -> bool:
        if not isinstance(other, NaiveInterval):
            return NotImplemented
        return cmp_range((self.start, self.end), (other.start, other.end)) < 0

    def __str__(self) -> str:
        return f"{_describe(self.start)} to {_describe(self.end)}"
