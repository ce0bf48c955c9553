"""
Structured and ISO 8601 codecs for relative durations.

The structured form is a plain mapping ``{"months": int, "weeks": int,
"days": int}`` that round-trips through ``json``.
"""

import json
from typing import Any, Dict, Mapping

from .parse import parse_duration
from .relative import RelativeDuration

_FIELDS = ("months", "weeks", "days")


def duration_to_dict(rd: RelativeDuration) -> Dict[str, int]:
    """Serialize a duration as ``{months, weeks, days}``."""
    return {
        "months": rd.num_months(),
        "weeks": rd.num_weeks(),
        "days": rd.num_days(),
    }


def duration_from_dict(data: Mapping[str, Any]) -> RelativeDuration:
    """Build a duration from ``{months, weeks, days}``; absent fields are zero."""
    unknown = set(data) - set(_FIELDS)
    if unknown:
        raise ValueError(f"Unknown duration fields: {sorted(unknown)}")

    values = []
    for name in _FIELDS:
        value = data.get(name, 0)
        if not isinstance(value, int) or isinstance(value, bool):
            raise TypeError(f"Duration field '{name}' must be an int, got {value!r}")
        values.append(value)
    return RelativeDuration.from_mwd(*values)


def duration_to_iso(rd: RelativeDuration) -> str:
    return rd.iso8601()


def duration_from_iso(text: str) -> RelativeDuration:
    return parse_duration(text)


def dumps(rd: RelativeDuration, iso: bool = False) -> str:
    """JSON text for a duration, either as an object or as an ISO string."""
    if iso:
        return json.dumps(rd.iso8601())
    return json.dumps(duration_to_dict(rd))


def loads(text: str) -> RelativeDuration:
    """Inverse of :func:`dumps`; accepts either JSON shape."""
    data = json.loads(text)
    if isinstance(data, str):
        return parse_duration(data)
    if isinstance(data, dict):
        return duration_from_dict(data)
    raise TypeError(f"Expected a JSON object or string, got {type(data).__name__}")
