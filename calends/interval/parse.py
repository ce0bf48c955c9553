"""
ISO 8601-2:2019 interval parser.

Accepted forms::

    2022-01-01/2022-03-31    start and end
    2022-01-01/P3M           start and duration
    ../2022-03-31            open start
    2022-01-01/..            open end
"""

import logging
import re
from datetime import date
from typing import Tuple

from calends.duration.parse import parse_relative_duration
from calends.exceptions import ParseError

from .base import OPEN_MARKER
from .interval import Interval

logger = logging.getLogger(__name__)

_DATE = re.compile(r"(\d{4})-(\d{2})-(\d{2})")


def _fail(message: str, text: str, offset: int) -> ParseError:
    logger.debug("Interval parse failed at %s in %r: %s", offset, text, message)
    return ParseError(message, text, offset)


def parse_date(text: str, pos: int = 0) -> Tuple[date, int]:
    """Parse a ``YYYY-MM-DD`` date at ``pos``, returning it and the next offset."""
    match = _DATE.match(text, pos)
    if match is None:
        raise _fail("expected a YYYY-MM-DD date", text, pos)
    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day), match.end()
    except ValueError as exc:
        raise _fail(f"invalid calendar date ({exc})", text, pos) from exc


def _expect(token: str, text: str, pos: int) -> int:
    if not text.startswith(token, pos):
        raise _fail(f"expected '{token}'", text, pos)
    return pos + len(token)


def _finish(interval: Interval, text: str, pos: int) -> Interval:
    if pos != len(text):
        raise _fail("unexpected trailing input", text, pos)
    return interval


def parse_interval(text: str) -> Interval:
    """Parse an interval in any of the accepted forms."""
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")

    if text.startswith(OPEN_MARKER):
        pos = _expect("/", text, len(OPEN_MARKER))
        if text.startswith(OPEN_MARKER, pos):
            raise _fail("an interval cannot be open on both sides", text, pos)
        end, pos = parse_date(text, pos)
        return _finish(Interval.open_start(end), text, pos)

    start, pos = parse_date(text)
    pos = _expect("/", text, pos)
    if text.startswith(OPEN_MARKER, pos):
        return _finish(Interval.open_end(start), text, pos + len(OPEN_MARKER))
    if text.startswith("P", pos):
        duration, pos = parse_relative_duration(text, pos)
        return _finish(Interval.closed_from_start(start, duration), text, pos)
    end, pos = parse_date(text, pos)
    return _finish(Interval.closed_with_dates(start, end), text, pos)
