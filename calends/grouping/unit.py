"""
Named calendar periods: a year, or the nth half, quarter, month or ISO
week within a year.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from calends.conventions.types import Grain
from calends.interval import Interval
from calends.util import half_month, quarter_month, to_date, weeks_in_year
from calends.util.date import DateLike

_PERIODS = {
    Grain.YEAR: 1,
    Grain.HALF: 2,
    Grain.QUARTER: 4,
    Grain.MONTH: 12,
}


@dataclass(frozen=True)
class CalendarUnit:
    """
    A calendar period identified by grain, year and 1-based ordinal.

    Week units use the ISO week-numbering year, so ``week(2020, 53)`` is
    valid while ``week(2021, 53)`` is not.
    """

    grain: Grain
    year: int
    ordinal: int = 1

    def __post_init__(self) -> None:
        if self.grain not in _PERIODS and self.grain != Grain.WEEK:
            raise ValueError(f"Unsupported grain for a calendar unit: {self.grain}")
        limit = self.periods_per_year()
        if not 1 <= self.ordinal <= limit:
            raise ValueError(
                f"{self.grain.value.lower()} ordinal must be within 1..{limit}, got {self.ordinal}"
            )

    @classmethod
    def year_of(cls, year: int) -> "CalendarUnit":
        return cls(Grain.YEAR, year, 1)

    @classmethod
    def half(cls, year: int, half: int) -> "CalendarUnit":
        return cls(Grain.HALF, year, half)

    @classmethod
    def quarter(cls, year: int, quarter: int) -> "CalendarUnit":
        return cls(Grain.QUARTER, year, quarter)

    @classmethod
    def month(cls, year: int, month: int) -> "CalendarUnit":
        return cls(Grain.MONTH, year, month)

    @classmethod
    def week(cls, year: int, week: int) -> "CalendarUnit":
        return cls(Grain.WEEK, year, week)

    # ------------------------------------------------------------------
    # From a date
    # ------------------------------------------------------------------

    @classmethod
    def from_date_for_year(cls, dt: DateLike) -> "CalendarUnit":
        return cls.year_of(to_date(dt).year)

    @classmethod
    def from_date_for_half(cls, dt: DateLike) -> "CalendarUnit":
        dt = to_date(dt)
        return cls.half(dt.year, (half_month(dt) - 1) // 6 + 1)

    @classmethod
    def from_date_for_quarter(cls, dt: DateLike) -> "CalendarUnit":
        dt = to_date(dt)
        return cls.quarter(dt.year, (quarter_month(dt) - 1) // 3 + 1)

    @classmethod
    def from_date_for_month(cls, dt: DateLike) -> "CalendarUnit":
        dt = to_date(dt)
        return cls.month(dt.year, dt.month)

    @classmethod
    def from_date_for_week(cls, dt: DateLike) -> "CalendarUnit":
        iso_year, iso_week, _ = to_date(dt).isocalendar()
        return cls.week(iso_year, iso_week)

    # ------------------------------------------------------------------
    # Readers
    # ------------------------------------------------------------------

    def periods_per_year(self) -> int:
        """Number of units of this grain in the unit's year."""
        if self.grain == Grain.WEEK:
            return weeks_in_year(self.year)
        return _PERIODS[self.grain]

    def start_date(self) -> date:
        if self.grain == Grain.YEAR:
            return date(self.year, 1, 1)
        elif self.grain == Grain.HALF:
            return date(self.year, self.ordinal * 6 - 5, 1)
        elif self.grain == Grain.QUARTER:
            return date(self.year, self.ordinal * 3 - 2, 1)
        elif self.grain == Grain.MONTH:
            return date(self.year, self.ordinal, 1)
        return date.fromisocalendar(self.year, self.ordinal, 1)

    def into_interval(self) -> Interval:
        """Closed interval covering the unit."""
        return Interval.closed_from_start(self.start_date(), self.grain.into_duration())

    def succ(self) -> "CalendarUnit":
        """The following unit of the same grain, rolling into the next year."""
        if self.ordinal < self.periods_per_year():
            return CalendarUnit(self.grain, self.year, self.ordinal + 1)
        return CalendarUnit(self.grain, self.year + 1, 1)

    def __str__(self) -> str:
        if self.grain == Grain.YEAR:
            return f"{self.year}"
        elif self.grain == Grain.HALF:
            return f"{self.year}-H{self.ordinal}"
        elif self.grain == Grain.QUARTER:
            return f"{self.year}-Q{self.ordinal}"
        elif self.grain == Grain.MONTH:
            return f"{self.year}-{self.ordinal:02d}"
        return f"{self.year}-W{self.ordinal:02d}"
