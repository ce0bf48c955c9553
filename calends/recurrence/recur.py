"""Lazy date sequences driven by a rule."""

import logging
from datetime import date
from itertools import islice
from typing import Iterator, Optional

from calends.util import to_date
from calends.util.date import DateLike

from .rule import Rule
from .until import Until

logger = logging.getLogger(__name__)


class Recurrence(Iterator[date]):
    """
    A sequence of dates produced by repeatedly applying a rule.

    The first value is the start date itself. Each step is applied to the
    previous value, so month-end dates keep following month ends:

        >>> list(Recurrence.with_start(Rule.monthly(), "2022-01-31").take(3))
        [datetime.date(2022, 1, 31), datetime.date(2022, 2, 28), datetime.date(2022, 3, 31)]

    The next date is only computed when it is requested. The sequence ends
    when the rule has no further date, or when the step would leave the
    representable range of dates.

    ``until``, ``until_and_including`` and ``take`` start from the current
    position and leave this recurrence untouched.
    """

    def __init__(self, rule: Rule, start: date):
        self.rule = rule
        self._cursor: Optional[date] = start
        # whether _cursor has already been returned
        self._yielded = False

    @classmethod
    def with_start(cls, rule: Rule, start: DateLike) -> "Recurrence":
        return cls(rule, to_date(start))

    def __iter__(self) -> "Recurrence":
        return self

    def _step(self, current: date) -> Optional[date]:
        try:
            return self.rule.advance(current)
        except (OverflowError, ValueError):
            logger.debug("Rule %r leaves the date range after %s", self.rule, current)
            return None

    def __next__(self) -> date:
        self.rule.ensure_supported()
        if self._cursor is not None and self._yielded:
            self._cursor = self._step(self._cursor)
        if self._cursor is None:
            raise StopIteration
        self._yielded = True
        return self._cursor

    def _fork(self) -> "Recurrence":
        fork = Recurrence(self.rule, self._cursor)
        fork._yielded = self._yielded
        return fork

    def until(self, until: DateLike) -> Until:
        """Dates strictly before ``until``."""
        return Until.exclusive(until, self._fork())

    def until_and_including(self, until: DateLike) -> Until:
        """Dates on or before ``until``."""
        return Until.inclusive(until, self._fork())

    def take(self, count: int) -> Iterator[date]:
        """The next ``count`` dates."""
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")
        return islice(self._fork(), count)

    def __repr__(self) -> str:
        position = self._cursor.isoformat() if self._cursor is not None else "end"
        state = "after" if self._yielded else "at"
        return f"Recurrence({self.rule!r}, {state}={position})"
