"""
tests/bound/test_bound.py

Covers:
  - Bound construction and validation
  - Role-aware comparison of included, excluded and unbounded bounds
  - Range ordering by start, then end
  - Inclusive containment
"""

from datetime import date

import pytest

from calends.bound import Bound, cmp_bound, cmp_range, within
from calends.conventions import BoundKind, BoundRole


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def jan1():
    return date(2022, 1, 1)


@pytest.fixture
def jan2():
    return date(2022, 1, 2)


# ── Construction ──────────────────────────────────────────────────────────────

class TestBound:

    def test_unbounded_has_no_value(self):
        assert Bound.unbounded().to_opt() is None

    def test_included_requires_value(self):
        with pytest.raises(ValueError):
            Bound(BoundKind.INCLUDED)

    def test_unbounded_rejects_value(self, jan1):
        with pytest.raises(ValueError):
            Bound(BoundKind.UNBOUNDED, jan1)

    def test_describe(self, jan1):
        assert Bound.included(jan1).describe() == "inclusive"
        assert Bound.excluded(jan1).describe() == "exclusive"
        assert Bound.unbounded().describe() == "unbounded"

    def test_repr(self):
        assert repr(Bound.included(3)) == "Included(3)"
        assert repr(Bound.unbounded()) == "Unbounded"


# ── Comparison ────────────────────────────────────────────────────────────────

class TestCmpBound:

    def test_unbounded_is_greatest_end(self, jan1):
        assert cmp_bound(Bound.unbounded(), Bound.included(jan1), BoundRole.END) == 1
        assert cmp_bound(Bound.included(jan1), Bound.unbounded(), BoundRole.END) == -1

    def test_unbounded_is_least_start(self, jan1):
        assert cmp_bound(Bound.unbounded(), Bound.included(jan1), BoundRole.START) == -1

    def test_both_unbounded_equal(self):
        assert cmp_bound(Bound.unbounded(), Bound.unbounded()) == 0

    def test_excluded_end_sits_below_value(self, jan1):
        assert cmp_bound(Bound.excluded(jan1), Bound.included(jan1), BoundRole.END) == -1

    def test_excluded_start_sits_above_value(self, jan1):
        assert cmp_bound(Bound.excluded(jan1), Bound.included(jan1), BoundRole.START) == 1

    def test_values_dominate_kind(self, jan1, jan2):
        assert cmp_bound(Bound.excluded(jan2), Bound.included(jan1), BoundRole.END) == 1

    def test_default_role_is_end(self, jan1):
        assert cmp_bound(Bound.excluded(jan1), Bound.included(jan1)) == -1


class TestCmpRange:

    def test_orders_by_start_first(self, jan1, jan2):
        r1 = (Bound.included(jan1), Bound.included(jan2))
        r2 = (Bound.included(jan2), Bound.included(jan2))
        assert cmp_range(r1, r2) == -1

    def test_then_by_end(self, jan1, jan2):
        r1 = (Bound.included(jan1), Bound.unbounded())
        r2 = (Bound.included(jan1), Bound.included(jan2))
        assert cmp_range(r1, r2) == 1

    def test_equal_ranges(self, jan1):
        r = (Bound.unbounded(), Bound.included(jan1))
        assert cmp_range(r, r) == 0


class TestWithin:

    def test_inclusive_on_both_ends(self, jan1, jan2):
        assert within(jan1, Bound.included(jan1), Bound.included(jan2))
        assert within(jan2, Bound.included(jan1), Bound.included(jan2))

    def test_excluded_end(self, jan1, jan2):
        assert not within(jan2, Bound.included(jan1), Bound.excluded(jan2))

    def test_excluded_start(self, jan1, jan2):
        assert not within(jan1, Bound.excluded(jan1), Bound.included(jan2))

    def test_unbounded_sides(self, jan1):
        assert within(jan1, Bound.unbounded(), Bound.unbounded())
        assert within(date(1900, 1, 1), Bound.unbounded(), Bound.included(jan1))
