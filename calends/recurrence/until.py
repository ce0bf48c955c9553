"""Bound any date sequence by a final date."""

import logging
from datetime import date
from typing import Iterable, Iterator

from calends.bound import Bound, cmp_bound
from calends.util import to_date
from calends.util.date import DateLike

logger = logging.getLogger(__name__)


class Until(Iterator[date]):
    """
    Yield dates from ``dates`` until one falls past ``until``.

    The limit is either inclusive or exclusive. The first date past it ends
    iteration for good, so later dates are never inspected.
    """

    def __init__(self, until: Bound[date], dates: Iterable[date]):
        if until.is_unbounded:
            raise ValueError("Until needs a bounded limit")
        self.until = until
        self._dates = iter(dates)
        self._done = False

    @classmethod
    def inclusive(cls, until: DateLike, dates: Iterable[date]) -> "Until":
        return cls(Bound.included(to_date(until)), dates)

    @classmethod
    def exclusive(cls, until: DateLike, dates: Iterable[date]) -> "Until":
        return cls(Bound.excluded(to_date(until)), dates)

    def __iter__(self) -> "Until":
        return self

    def __next__(self) -> date:
        if self._done:
            raise StopIteration
        value = next(self._dates, None)
        if value is None:
            self._done = True
            raise StopIteration
        if cmp_bound(Bound.included(value), self.until) > 0:
            logger.debug("Stopped at %s past %r", value, self.until)
            self._done = True
            raise StopIteration
        return value
