"""Three-state range endpoints and their ordering.

A single comparator orders both start and end bounds. ``Unbounded`` is the
most extreme value in the direction the bound is used, and ``Excluded(x)``
sits just outside ``x``. Both flip between the START and END roles.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Optional, Tuple, TypeVar

from calends.conventions.types import BoundKind, BoundRole

T = TypeVar("T")


@dataclass(frozen=True)
class Bound(Generic[T]):
    """An endpoint of a range: included, excluded or unbounded."""

    kind: BoundKind
    value: Optional[T] = None

    def __post_init__(self) -> None:
        if self.kind == BoundKind.UNBOUNDED:
            if self.value is not None:
                raise ValueError("Unbounded bound cannot carry a value")
        elif self.value is None:
            raise ValueError(f"{self.kind.value.lower()} bound requires a value")

    @classmethod
    def included(cls, value: T) -> "Bound[T]":
        return cls(BoundKind.INCLUDED, value)

    @classmethod
    def excluded(cls, value: T) -> "Bound[T]":
        return cls(BoundKind.EXCLUDED, value)

    @classmethod
    def unbounded(cls) -> "Bound[T]":
        return cls(BoundKind.UNBOUNDED)

    @property
    def is_included(self) -> bool:
        return self.kind == BoundKind.INCLUDED

    @property
    def is_excluded(self) -> bool:
        return self.kind == BoundKind.EXCLUDED

    @property
    def is_unbounded(self) -> bool:
        return self.kind == BoundKind.UNBOUNDED

    def to_opt(self) -> Optional[T]:
        """The wrapped value, or None when unbounded."""
        return self.value

    def describe(self) -> str:
        if self.kind == BoundKind.INCLUDED:
            return "inclusive"
        elif self.kind == BoundKind.EXCLUDED:
            return "exclusive"
        return "unbounded"

    def __repr__(self) -> str:
        if self.kind == BoundKind.UNBOUNDED:
            return "Unbounded"
        return f"{self.kind.value.capitalize()}({self.value!r})"


def _offset(bound: Bound[Any], role: BoundRole) -> int:
    # Excluded sits just outside its value: above it as a start, below it as an end
    if bound.kind == BoundKind.INCLUDED:
        return 0
    return 1 if role == BoundRole.START else -1


def cmp_bound(e1: Bound[Any], e2: Bound[Any], role: BoundRole = BoundRole.END) -> int:
    """Compare two bounds used on the same side of a range.

    Returns -1, 0 or 1 the way ``cmp`` would.
    """
    if e1.is_unbounded and e2.is_unbounded:
        return 0
    if e1.is_unbounded or e2.is_unbounded:
        # Unbounded is greatest on the end side and least on the start side
        extreme = 1 if role == BoundRole.END else -1
        return extreme if e1.is_unbounded else -extreme

    k1 = (e1.value, _offset(e1, role))
    k2 = (e2.value, _offset(e2, role))
    if k1 < k2:
        return -1
    if k1 > k2:
        return 1
    return 0


def cmp_range(
    e1: Tuple[Bound[Any], Bound[Any]], e2: Tuple[Bound[Any], Bound[Any]]
) -> int:
    """Order two ranges by start bound, then by end bound."""
    by_start = cmp_bound(e1[0], e2[0], BoundRole.START)
    if by_start != 0:
        return by_start
    return cmp_bound(e1[1], e2[1], BoundRole.END)


def within(item: T, start: Bound[T], end: Bound[T]) -> bool:
    """Whether ``item`` lies inside the range ``[start, end]``."""
    point = Bound.included(item)
    if cmp_bound(point, start, BoundRole.START) < 0:
        return False
    return cmp_bound(point, end, BoundRole.END) <= 0
