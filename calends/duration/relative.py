"""Compound calendar duration of months, weeks and days.

Each component carries its own sign and none of them carry into another:
40 days stays 40 days, it never becomes a month and some days.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from calends.exceptions import DurationOverflowError
from calends.util import shift

from .format import format_iso8601, pluralize

# Each magnitude fits a 20 bit unsigned field
MAGNITUDE_BITS = 20
MAX_MAGNITUDE = (1 << MAGNITUDE_BITS) - 1


def _fits(value: int) -> bool:
    return abs(value) <= MAX_MAGNITUDE


def _trunc_div(value: int, divisor: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(value) // abs(divisor)
    return quotient if (value < 0) == (divisor < 0) else -quotient


@dataclass(frozen=True, order=True)
class RelativeDuration:
    """A signed duration in months, weeks and days.

    Applying a duration to a date shifts by months first, then weeks, then
    days. Month shifting follows the end-of-month rule of
    :func:`calends.util.shift_months`, so the operation is not invertible:

        >>> date(2022, 1, 30) + RelativeDuration.months(1)
        datetime.date(2022, 2, 28)
        >>> date(2022, 2, 28) - RelativeDuration.months(1)
        datetime.date(2022, 1, 31)

    Equality, ordering and hashing use the signed (months, weeks, days)
    triple. Use :meth:`from_mwd` (raises) or :meth:`from_mwd_opt` (returns
    None) to build one from raw components.
    """

    _months: int = 0
    _weeks: int = 0
    _days: int = 0

    def __post_init__(self) -> None:
        for name, value in (("months", self._months), ("weeks", self._weeks), ("days", self._days)):
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"{name} must be an int, got {type(value).__name__}")
            if not _fits(value):
                raise DurationOverflowError(
                    f"{name}={value} exceeds the maximum magnitude of {MAX_MAGNITUDE}"
                )

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_mwd(cls, months: int, weeks: int, days: int) -> "RelativeDuration":
        """Build from components, raising DurationOverflowError when out of range."""
        return cls(months, weeks, days)

    @classmethod
    def from_mwd_opt(cls, months: int, weeks: int, days: int) -> Optional["RelativeDuration"]:
        """Build from components, returning None when out of range."""
        if not (_fits(months) and _fits(weeks) and _fits(days)):
            return None
        return cls(months, weeks, days)

    @classmethod
    def zero(cls) -> "RelativeDuration":
        return cls(0, 0, 0)

    @classmethod
    def years(cls, years: int) -> "RelativeDuration":
        return cls(years * 12, 0, 0)

    @classmethod
    def months(cls, months: int) -> "RelativeDuration":
        return cls(months, 0, 0)

    @classmethod
    def weeks(cls, weeks: int) -> "RelativeDuration":
        return cls(0, weeks, 0)

    @classmethod
    def days(cls, days: int) -> "RelativeDuration":
        return cls(0, 0, days)

    @classmethod
    def from_duration_between(cls, start: date, end: date) -> "RelativeDuration":
        """Whole months from ``start`` toward ``end``, then the remaining days.

        The result always satisfies ``start + result == end``.
        """
        months = (end.year - start.year) * 12 + (end.month - start.month)
        anchor = shift.shift_months(start, months)
        # Back off one month if the month shift overshoots the end
        if end >= start and anchor > end:
            months -= 1
            anchor = shift.shift_months(start, months)
        elif end < start and anchor < end:
            months += 1
            anchor = shift.shift_months(start, months)
        return cls(months, 0, (end - anchor).days)

    @classmethod
    def parse(cls, text: str) -> "RelativeDuration":
        """Parse an ISO 8601-2 duration such as ``P1Y2M3W4D``."""
        from .parse import parse_duration

        return parse_duration(text)

    # ------------------------------------------------------------------
    # Builders / readers
    # ------------------------------------------------------------------

    def with_months(self, months: int) -> "RelativeDuration":
        return RelativeDuration(months, self._weeks, self._days)

    def with_weeks(self, weeks: int) -> "RelativeDuration":
        return RelativeDuration(self._months, weeks, self._days)

    def with_days(self, days: int) -> "RelativeDuration":
        return RelativeDuration(self._months, self._weeks, days)

    def num_months(self) -> int:
        return self._months

    def num_weeks(self) -> int:
        return self._weeks

    def num_days(self) -> int:
        return self._days

    def is_zero(self) -> bool:
        return self._months == 0 and self._weeks == 0 and self._days == 0

    def as_tuple(self) -> tuple[int, int, int]:
        return (self._months, self._weeks, self._days)

    # ------------------------------------------------------------------
    # Date application
    # ------------------------------------------------------------------

    def apply(self, dt: date) -> date:
        """Shift ``dt`` by months, then weeks, then days."""
        dt = shift.shift_months(dt, self._months)
        dt = shift.shift_weeks(dt, self._weeks)
        return shift.shift_days(dt, self._days)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def __neg__(self) -> "RelativeDuration":
        return RelativeDuration(-self._months, -self._weeks, -self._days)

    def __pos__(self) -> "RelativeDuration":
        return self

    def __add__(self, other):
        if isinstance(other, RelativeDuration):
            return RelativeDuration(
                self._months + other._months,
                self._weeks + other._weeks,
                self._days + other._days,
            )
        if isinstance(other, date):
            return self.apply(other)
        return NotImplemented

    def __radd__(self, other):
        # date + duration lands here since date.__add__ only knows timedelta
        if isinstance(other, date):
            return self.apply(other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, RelativeDuration):
            return self + (-other)
        return NotImplemented

    def __rsub__(self, other):
        if isinstance(other, date):
            return (-self).apply(other)
        return NotImplemented

    def __mul__(self, factor):
        if not isinstance(factor, int) or isinstance(factor, bool):
            return NotImplemented
        return RelativeDuration(
            self._months * factor, self._weeks * factor, self._days * factor
        )

    __rmul__ = __mul__

    def __truediv__(self, divisor):
        if not isinstance(divisor, int) or isinstance(divisor, bool):
            return NotImplemented
        if divisor == 0:
            raise ZeroDivisionError("RelativeDuration division by zero")
        return RelativeDuration(
            _trunc_div(self._months, divisor),
            _trunc_div(self._weeks, divisor),
            _trunc_div(self._days, divisor),
        )

    __floordiv__ = __truediv__

    def __bool__(self) -> bool:
        return not self.is_zero()

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def iso8601(self, style: Optional[str] = None) -> str:
        """ISO 8601-2:2019 duration text without the time part.

        - 'P5D' is a duration of 5 days
        - 'P4W3D' is a duration of 4 weeks and 3 days
        - 'P-4M3W' is negative 4 months and positive 3 weeks; the sign
          applies per component
        """
        return format_iso8601(self._months, self._weeks, self._days, style)

    def __str__(self) -> str:
        parts = [
            p
            for p in (
                pluralize("month", self._months),
                pluralize("week", self._weeks),
                pluralize("day", self._days),
            )
            if p is not None
        ]
        return " ".join(parts) if parts else "0 days"

    def __repr__(self) -> str:
        return (
            f"RelativeDuration(months={self._months}, "
            f"weeks={self._weeks}, days={self._days})"
        )
