"""
ISO 8601-2:2019 duration parser (date part only).

Grammar: ``P`` followed by up to four optional chunks in the fixed order
years, months, weeks, days. Each chunk is an optionally signed integer and a
unit letter, e.g. ``P1Y-2M3W4D``. Years fold into months at parse time.
"""

import logging
import re
from typing import Tuple

from calends.exceptions import ParseError

from .relative import RelativeDuration

logger = logging.getLogger(__name__)

_CHUNK = re.compile(r"([+-]?)(\d+)([YMWD])")
_NUMBER = re.compile(r"[+-]?\d+")
_UNIT_ORDER = "YMWD"


def _fail(message: str, text: str, offset: int) -> ParseError:
    logger.debug("Duration parse failed at %s in %r: %s", offset, text, message)
    return ParseError(message, text, offset)


def parse_relative_duration(text: str, pos: int = 0) -> Tuple[RelativeDuration, int]:
    """Parse a duration starting at ``pos``.

    Returns the duration and the offset just past it, so callers can keep
    parsing whatever follows.
    """
    if not text.startswith("P", pos):
        raise _fail("expected 'P'", text, pos)
    start = pos
    pos += 1

    amounts = {unit: 0 for unit in _UNIT_ORDER}
    last_rank = -1
    while True:
        match = _CHUNK.match(text, pos)
        if match is None:
            number = _NUMBER.match(text, pos)
            if number is not None:
                raise _fail("expected one of Y, M, W, D", text, number.end())
            break

        sign, digits, unit = match.groups()
        rank = _UNIT_ORDER.index(unit)
        if rank <= last_rank:
            raise _fail(f"unit '{unit}' is duplicated or out of order", text, match.start(3))
        last_rank = rank

        amount = int(digits)
        amounts[unit] = -amount if sign == "-" else amount
        pos = match.end()

    duration = RelativeDuration.from_mwd_opt(
        amounts["Y"] * 12 + amounts["M"], amounts["W"], amounts["D"]
    )
    if duration is None:
        raise _fail("duration component exceeds the supported magnitude", text, start)
    return duration, pos


def parse_duration(text: str) -> RelativeDuration:
    """Parse a complete ISO 8601-2 duration string."""
    if not isinstance(text, str):
        raise TypeError(f"Expected str, got {type(text).__name__}")
    duration, pos = parse_relative_duration(text)
    if pos != len(text):
        raise _fail("unexpected trailing input", text, pos)
    return duration
