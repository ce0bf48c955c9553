# Re-export calendar grouping
from calends.conventions.types import Grain

from .unit import CalendarUnit

__all__ = ["CalendarUnit", "Grain"]
