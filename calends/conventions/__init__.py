# Re-export convention enums
from .types import BoundKind, BoundRole, CalendarBasis, Grain

__all__ = [
    "BoundKind",
    "BoundRole",
    "CalendarBasis",
    "Grain",
]
