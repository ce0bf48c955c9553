"""
Text formatting for relative durations.
"""

import os
from typing import Optional

ISO_STYLES = ("compact", "full")

# Default formatting settings
_DEFAULT_ISO_STYLE = os.getenv("CALENDS_ISO_STYLE", "compact").lower()
if _DEFAULT_ISO_STYLE not in ISO_STYLES:
    _DEFAULT_ISO_STYLE = "compact"


def set_default_iso_style(style: str) -> None:
    """Set the default ISO 8601 output style: 'compact' omits zero chunks, 'full' keeps them."""
    global _DEFAULT_ISO_STYLE
    key = style.lower()
    if key not in ISO_STYLES:
        raise ValueError(f"Unsupported ISO style: {style}. Available: {', '.join(ISO_STYLES)}")
    _DEFAULT_ISO_STYLE = key


def get_default_iso_style() -> str:
    return _DEFAULT_ISO_STYLE


def format_iso8601(months: int, weeks: int, days: int, style: Optional[str] = None) -> str:
    """Render signed components as ``P[nM][nW][nD]``."""
    if style is None:
        style = _DEFAULT_ISO_STYLE
    elif style.lower() not in ISO_STYLES:
        raise ValueError(f"Unsupported ISO style: {style}. Available: {', '.join(ISO_STYLES)}")

    chunks = [(months, "M"), (weeks, "W"), (days, "D")]
    if style.lower() == "compact":
        chunks = [(count, unit) for count, unit in chunks if count != 0]
        if not chunks:
            # ISO 8601 requires at least one chunk
            return "P0D"

    return "P" + "".join(f"{count}{unit}" for count, unit in chunks)


def pluralize(unit: str, num: int) -> Optional[str]:
    """'1 month', '-1 week', '3 days'; None for zero."""
    if num == 0:
        return None
    if num in (1, -1):
        return f"{num} {unit}"
    return f"{num} {unit}s"
