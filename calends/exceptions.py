"""Exception types raised across the calends package."""


class CalendsError(Exception):
    """Base class for all calends errors."""


class DurationOverflowError(CalendsError, OverflowError):
    """Raised when a duration component exceeds its representable magnitude."""


class IntervalShapeError(CalendsError, ValueError):
    """Raised when an interval lacks the bound a narrowing conversion needs."""


class NotIterableError(CalendsError, TypeError):
    """Raised when iterating an interval that has no duration."""


class RuleNotImplementedError(CalendsError, NotImplementedError):
    """Raised when a recurrence rule variant cannot be evaluated yet."""


class ParseError(CalendsError, ValueError):
    """Raised on malformed ISO-8601 duration or interval text.

    Attributes:
        offset: Position in the input where parsing failed
        remaining: The unconsumed input starting at ``offset``
    """

    def __init__(self, message: str, text: str, offset: int):
        self.text = text
        self.offset = offset
        self.remaining = text[offset:]
        super().__init__(f"{message} at offset {offset}: {self.remaining!r}")
