"""
Basic enums shared across durations, intervals and groupings.
"""

from enum import Enum


class BoundKind(Enum):
    """Kinds of range endpoints."""

    INCLUDED = "INCLUDED"
    EXCLUDED = "EXCLUDED"
    UNBOUNDED = "UNBOUNDED"


class BoundRole(Enum):
    """Side of a range a bound is compared on."""

    START = "START"
    END = "END"


class Grain(Enum):
    """Fixed calendar bucket sizes."""

    DAY = "DAY"
    WEEK = "WEEK"
    MONTH = "MONTH"
    QUARTER = "QUARTER"
    HALF = "HALF"
    YEAR = "YEAR"

    def into_duration(self):
        from calends.duration import RelativeDuration

        if self == Grain.DAY:
            return RelativeDuration.days(1)
        elif self == Grain.WEEK:
            return RelativeDuration.days(7)
        elif self == Grain.MONTH:
            return RelativeDuration.months(1)
        elif self == Grain.QUARTER:
            return RelativeDuration.months(3)
        elif self == Grain.HALF:
            return RelativeDuration.months(6)
        elif self == Grain.YEAR:
            return RelativeDuration.months(12)
        else:
            raise ValueError(f"Unknown grain: {self}")


class CalendarBasis(Enum):
    """Bases for calendar-aligned intervals."""

    YEAR = "YEAR"
    QUARTER = "QUARTER"
    MONTH = "MONTH"
    BIWEEK = "BIWEEK"
    WEEK = "WEEK"
    DAY = "DAY"
