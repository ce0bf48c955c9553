"""
Structured and ISO 8601 codecs for intervals.

The structured form is ``{"start": date | None, "end": date | None}``. A
missing or None side is unbounded. Closed intervals decode through
:meth:`Interval.closed_with_dates`, so the duration is derived again from
the two dates.
"""

import json
from datetime import date
from typing import Any, Dict, Mapping, Optional

from calends.exceptions import IntervalShapeError
from calends.util import date_to_str, to_date

from .interval import Interval
from .parse import parse_interval


def interval_to_dict(interval: Interval) -> Dict[str, Optional[date]]:
    return interval.to_dict()


def interval_from_dict(data: Mapping[str, Any]) -> Interval:
    unknown = set(data) - {"start", "end"}
    if unknown:
        raise ValueError(f"Unknown interval fields: {sorted(unknown)}")

    start, end = data.get("start"), data.get("end")
    if start is not None and end is not None:
        return Interval.closed_with_dates(to_date(start), to_date(end))
    if start is not None:
        return Interval.open_end(to_date(start))
    if end is not None:
        return Interval.open_start(to_date(end))
    raise IntervalShapeError("An interval needs at least one of start and end")


def interval_to_iso(interval: Interval) -> str:
    return interval.iso8601()


def interval_from_iso(text: str) -> Interval:
    return parse_interval(text)


def dumps(interval: Interval, iso: bool = False) -> str:
    """JSON text for an interval, either as an object or as an ISO string."""
    if iso:
        return json.dumps(interval.iso8601())
    return json.dumps(
        {
            key: date_to_str(value) if value is not None else None
            for key, value in interval.to_dict().items()
        }
    )


def loads(text: str) -> Interval:
    """Inverse of :func:`dumps`; accepts either JSON shape."""
    data = json.loads(text)
    if isinstance(data, str):
        return parse_interval(data)
    if isinstance(data, dict):
        return interval_from_dict(data)
    raise TypeError(f"Expected a JSON object or string, got {type(data).__name__}")
