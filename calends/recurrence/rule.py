"""Rules describing how a recurrence advances from one date to the next."""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional

from dateutil.relativedelta import weekday as Weekday

from calends.duration import RelativeDuration
from calends.exceptions import RuleNotImplementedError


class RuleKind(Enum):
    """Ways a rule can derive the next date."""

    OFFSET = "OFFSET"
    OCCURRENCE = "OCCURRENCE"
    ONCE = "ONCE"


@dataclass(frozen=True)
class Rule:
    """
    How a recurrence advances.

    - OFFSET: step by ``duration``; ``offset`` records an intra-period
      offset carried for callers but not applied to the step
    - OCCURRENCE: the ``nth`` ``weekday`` of each ``duration`` period, e.g.
      the second Tuesday of every month
    - ONCE: no step at all; the recurrence yields its start and stops
    """

    kind: RuleKind
    duration: RelativeDuration
    offset: int = 0
    nth: Optional[int] = None
    weekday: Optional[Weekday] = None

    def __post_init__(self) -> None:
        if self.kind == RuleKind.OCCURRENCE and (self.nth is None or self.weekday is None):
            raise ValueError("An occurrence rule needs both nth and weekday")

    @classmethod
    def offset_by(cls, duration: RelativeDuration, offset: int = 0) -> "Rule":
        return cls(RuleKind.OFFSET, duration, offset)

    @classmethod
    def occurrence(cls, duration: RelativeDuration, nth: int, wd: Weekday) -> "Rule":
        return cls(RuleKind.OCCURRENCE, duration, nth=nth, weekday=wd)

    @classmethod
    def once(cls) -> "Rule":
        return cls(RuleKind.ONCE, RelativeDuration.zero())

    @classmethod
    def daily(cls) -> "Rule":
        return cls.offset_by(RelativeDuration.days(1))

    @classmethod
    def weekly(cls) -> "Rule":
        return cls.offset_by(RelativeDuration.weeks(1))

    @classmethod
    def biweekly(cls) -> "Rule":
        return cls.offset_by(RelativeDuration.weeks(2))

    @classmethod
    def monthly(cls) -> "Rule":
        return cls.offset_by(RelativeDuration.months(1))

    @classmethod
    def quarterly(cls) -> "Rule":
        return cls.offset_by(RelativeDuration.months(3))

    @classmethod
    def semiannually(cls) -> "Rule":
        return cls.offset_by(RelativeDuration.months(6))

    @classmethod
    def yearly(cls) -> "Rule":
        return cls.offset_by(RelativeDuration.years(1))

    def ensure_supported(self) -> None:
        """Raise if dates cannot be produced under this rule."""
        if self.kind == RuleKind.OCCURRENCE:
            raise RuleNotImplementedError(
                f"Occurrence rules ({self.nth} {self.weekday} every {self.duration}) are not supported yet"
            )

    def advance(self, dt: date) -> Optional[date]:
        """The date following ``dt`` under this rule, None when there is none."""
        self.ensure_supported()
        if self.kind == RuleKind.ONCE:
            return None
        return dt + self.duration
