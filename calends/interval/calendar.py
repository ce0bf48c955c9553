"""
Intervals aligned to the standard calendar: years, quarters, months,
biweeks, ISO weeks and single days.
"""

from __future__ import annotations

import base64
import hashlib
import logging
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any, Dict, Iterator

from calends import util
from calends.bound import Bound, cmp_bound
from calends.conventions.types import CalendarBasis
from calends.util.date import DateLike

from .base import IntervalLike

logger = logging.getLogger(__name__)


def _bucket(basis: CalendarBasis, dt: date):
    if basis == CalendarBasis.YEAR:
        return util.beginning_of_year(dt), util.end_of_year(dt)
    elif basis == CalendarBasis.QUARTER:
        return util.beginning_of_quarter(dt), util.end_of_quarter(dt)
    elif basis == CalendarBasis.MONTH:
        return util.beginning_of_month(dt), util.end_of_month(dt)
    elif basis == CalendarBasis.BIWEEK:
        return util.beginning_of_biweek(dt), util.end_of_biweek(dt)
    elif basis == CalendarBasis.WEEK:
        return util.beginning_of_week(dt), util.end_of_week(dt)
    elif basis == CalendarBasis.DAY:
        return dt, dt
    else:
        raise ValueError(f"Unknown calendar basis: {basis}")


@dataclass(frozen=True)
class CalendarInterval(IntervalLike):
    """
    A calendar bucket, inclusive on both ends.

    A day bucket is degenerate and holds a single date.
    """

    start: date
    end: date
    basis: CalendarBasis

    @classmethod
    def for_date(cls, basis: CalendarBasis, dt: DateLike) -> "CalendarInterval":
        """Bucket of the given basis containing ``dt``."""
        start, end = _bucket(basis, util.to_date(dt))
        return cls(start, end, basis)

    @classmethod
    def year_for_date(cls, dt: DateLike) -> "CalendarInterval":
        return cls.for_date(CalendarBasis.YEAR, dt)

    @classmethod
    def quarter_for_date(cls, dt: DateLike) -> "CalendarInterval":
        return cls.for_date(CalendarBasis.QUARTER, dt)

    @classmethod
    def month_for_date(cls, dt: DateLike) -> "CalendarInterval":
        return cls.for_date(CalendarBasis.MONTH, dt)

    @classmethod
    def biweek_for_date(cls, dt: DateLike) -> "CalendarInterval":
        return cls.for_date(CalendarBasis.BIWEEK, dt)

    @classmethod
    def week_for_date(cls, dt: DateLike) -> "CalendarInterval":
        return cls.for_date(CalendarBasis.WEEK, dt)

    @classmethod
    def day_for_date(cls, dt: DateLike) -> "CalendarInterval":
        return cls.for_date(CalendarBasis.DAY, dt)

    def bound_start(self) -> Bound[date]:
        return Bound.included(self.start)

    def bound_end(self) -> Bound[date]:
        return Bound.included(self.end)

    def succ(self) -> "CalendarInterval":
        """The bucket holding the day after this one ends."""
        return CalendarInterval.for_date(self.basis, self.end + timedelta(days=1))

    def __iter__(self) -> Iterator["CalendarInterval"]:
        current = self
        while True:
            yield current
            current = current.succ()

    def until(self, until: DateLike) -> Iterator["CalendarInterval"]:
        """Iterate buckets while they end on or before ``until``."""
        limit = Bound.included(util.to_date(until))
        for bucket in self:
            if cmp_bound(bucket.bound_end(), limit) > 0:
                logger.debug("Stopped at %s past %s", bucket, limit.value)
                return
            yield bucket

    def into_interval(self):
        """Closed :class:`~calends.interval.Interval` over the same dates."""
        from .interval import Interval

        return Interval.closed_with_dates(self.start, self.end)

    def hash_str(self) -> str:
        """Stable base64 digest identifying the bucket outside the process."""
        key = f"{self.start.isoformat()}|{self.end.isoformat()}|{self.basis.value}"
        digest = hashlib.blake2b(key.encode("utf-8"), digest_size=8).digest()
        return base64.b64encode(digest).decode("ascii")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "start": self.start,
            "end": self.end,
            "period": self.basis.value,
            "hash": self.hash_str(),
        }
