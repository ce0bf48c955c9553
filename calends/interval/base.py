"""
Shared behaviour for anything with a start bound and an end bound.

Used to coalesce closed, open and calendar intervals into one interface.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import Dict, Optional

from calends.bound import Bound, within
from calends.conventions.types import BoundKind
from calends.util import date_to_str, to_date
from calends.util.date import DateLike

OPEN_MARKER = ".."


class IntervalLike(ABC):
    """Base class for date spans described by a pair of bounds."""

    @abstractmethod
    def bound_start(self) -> Bound[date]:
        """Start bound of the span."""

    @abstractmethod
    def bound_end(self) -> Bound[date]:
        """End bound of the span."""

    def start_date(self) -> Optional[date]:
        """Start date, or None when the start is unbounded."""
        return self.bound_start().to_opt()

    def end_date(self) -> Optional[date]:
        """End date, or None when the end is unbounded."""
        return self.bound_end().to_opt()

    def within(self, dt: DateLike) -> bool:
        """Determine whether a date falls within the span, both ends inclusive."""
        start, end = self.bound_start(), self.bound_end()
        # Closed spans running backwards in time still cover the dates between their ends
        if (
            start.kind == BoundKind.INCLUDED
            and end.kind == BoundKind.INCLUDED
            and end.value < start.value
        ):
            start, end = end, start
        return within(to_date(dt), start, end)

    def __contains__(self, dt: DateLike) -> bool:
        return self.within(dt)

    def iso8601(self) -> str:
        """
        ISO 8601-2:2019 formatting of the span as ``start/end``.

        Unbounded sides are written as ``..``, e.g. ``../2022-12-31``.
        """
        start, end = self.start_date(), self.end_date()
        left = date_to_str(start) if start is not None else OPEN_MARKER
        right = date_to_str(end) if end is not None else OPEN_MARKER
        return f"{left}/{right}"

    def to_dict(self) -> Dict[str, Optional[date]]:
        """Structured form ``{start, end}``; None marks an unbounded side."""
        return {"start": self.start_date(), "end": self.end_date()}

    def __str__(self) -> str:
        return self.iso8601()
