# Re-export interval types and codecs
from .base import IntervalLike
from .calendar import CalendarInterval
from .closed import ClosedInterval
from .interval import Interval, IntervalKind, IntervalWithEnd, IntervalWithStart
from .iter import UntilAfter
from .naive import NaiveInterval
from .open import OpenEndInterval, OpenStartInterval
from .parse import parse_date, parse_interval
from .serde import interval_from_dict, interval_from_iso, interval_to_dict, interval_to_iso

__all__ = [
    "IntervalLike",
    "CalendarInterval",
    "ClosedInterval",
    "Interval",
    "IntervalKind",
    "IntervalWithEnd",
    "IntervalWithStart",
    "UntilAfter",
    "NaiveInterval",
    "OpenEndInterval",
    "OpenStartInterval",
    "parse_date",
    "parse_interval",
    "interval_from_dict",
    "interval_from_iso",
    "interval_to_dict",
    "interval_to_iso",
]
