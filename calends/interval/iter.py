"""Termination of interval sequences at a boundary date."""

import logging
from datetime import date
from typing import Iterator, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class UntilAfter(Iterator[T]):
    """
    Yield intervals until one ends at or past ``until``; that one is dropped.

    "Past" follows the direction of each interval: a forward interval stops
    once its end reaches ``until`` from below, a backward one once its end
    reaches it from above. After stopping the iterator stays exhausted.
    """

    def __init__(self, intervals: Iterator[T], until: date):
        self._intervals = intervals
        self.until = until
        self._done = False

    def __iter__(self) -> "UntilAfter[T]":
        return self

    def _reached(self, interval) -> bool:
        start, end = interval.start_date(), interval.end_date()
        if end >= start:
            return end >= self.until
        return end <= self.until

    def __next__(self) -> T:
        if self._done:
            raise StopIteration
        interval = next(self._intervals, None)
        if interval is None:
            self._done = True
            raise StopIteration
        if self._reached(interval):
            logger.debug("Stopped at %s, reaching %s", interval, self.until)
            self._done = True
            raise StopIteration
        return interval
