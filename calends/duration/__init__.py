# Re-export duration components
from .format import get_default_iso_style, set_default_iso_style
from .parse import parse_duration, parse_relative_duration
from .relative import MAX_MAGNITUDE, RelativeDuration
from .serde import duration_from_dict, duration_from_iso, duration_to_dict, duration_to_iso

__all__ = [
    "MAX_MAGNITUDE",
    "RelativeDuration",
    "parse_duration",
    "parse_relative_duration",
    "duration_to_dict",
    "duration_from_dict",
    "duration_to_iso",
    "duration_from_iso",
    "get_default_iso_style",
    "set_default_iso_style",
]
