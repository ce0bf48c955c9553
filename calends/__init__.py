"""Calendar-aware durations, intervals and recurrences.

This package provides date arithmetic that follows the calendar instead of
fixed lengths of time: a month is a month, whatever its number of days.

Key modules:
- duration: RelativeDuration and its ISO 8601 codecs
- interval: closed, open, naive and calendar-aligned intervals
- grouping: named calendar periods such as 2022-Q1
- recurrence: rule driven date sequences and the Until combinator
- bound: three-state range endpoints and their ordering
- util: month-end aware shifting and calendar boundary lookups
"""

from .bound import Bound, cmp_bound, cmp_range, within
from .conventions import BoundKind, BoundRole, CalendarBasis, Grain
from .duration import RelativeDuration, parse_duration
from .exceptions import (
    CalendsError,
    DurationOverflowError,
    IntervalShapeError,
    NotIterableError,
    ParseError,
    RuleNotImplementedError,
)
from .grouping import CalendarUnit
from .interval import (
    CalendarInterval,
    Interval,
    IntervalKind,
    IntervalWithEnd,
    IntervalWithStart,
    NaiveInterval,
    parse_interval,
)
from .recurrence import Recurrence, Rule, Until

__version__ = "1.0.0"

__all__ = [
    "__version__",
    "Bound",
    "cmp_bound",
    "cmp_range",
    "within",
    "BoundKind",
    "BoundRole",
    "CalendarBasis",
    "Grain",
    "RelativeDuration",
    "parse_duration",
    "CalendsError",
    "DurationOverflowError",
    "IntervalShapeError",
    "NotIterableError",
    "ParseError",
    "RuleNotImplementedError",
    "CalendarUnit",
    "CalendarInterval",
    "Interval",
    "IntervalKind",
    "IntervalWithEnd",
    "IntervalWithStart",
    "NaiveInterval",
    "parse_interval",
    "Recurrence",
    "Rule",
    "Until",
]
