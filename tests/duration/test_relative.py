"""
tests/duration/test_relative.py

Covers:
  - Component construction, readers and builders
  - Range checks (raising and None-returning constructors)
  - Arithmetic laws: additive inverse, scalar multiplication, truncating division
  - Application to dates with the end-of-month rule, and its non-invertibility
  - Deriving a duration between two dates
  - Human readable and ISO 8601 text, including the configurable ISO style
"""

from datetime import date

import pytest

from calends.duration import (
    MAX_MAGNITUDE,
    RelativeDuration,
    get_default_iso_style,
    set_default_iso_style,
)
from calends.exceptions import DurationOverflowError


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def mixed():
    """Negative weeks between positive months and days."""
    return RelativeDuration.from_mwd(3, -2, 5)


@pytest.fixture
def full_style():
    previous = get_default_iso_style()
    set_default_iso_style("full")
    yield
    set_default_iso_style(previous)


# ── Construction ──────────────────────────────────────────────────────────────

class TestConstruction:

    def test_readers_round_trip(self, mixed):
        assert mixed.num_months() == 3
        assert mixed.num_weeks() == -2
        assert mixed.num_days() == 5

    def test_builders_replace_one_component(self, mixed):
        assert mixed.with_days(0) == RelativeDuration.from_mwd(3, -2, 0)
        assert RelativeDuration.months(1).with_weeks(-2).with_days(2).as_tuple() == (1, -2, 2)

    def test_years_fold_into_months(self):
        assert RelativeDuration.years(2) == RelativeDuration.months(24)

    def test_zero(self):
        assert RelativeDuration.zero().is_zero()
        assert not RelativeDuration.zero()
        assert RelativeDuration.days(-0) == RelativeDuration.zero()

    def test_rejects_non_integers(self):
        with pytest.raises(TypeError):
            RelativeDuration.months(1.5)
        with pytest.raises(TypeError):
            RelativeDuration.days(True)

    def test_largest_magnitude_fits(self):
        assert RelativeDuration.from_mwd(MAX_MAGNITUDE, -MAX_MAGNITUDE, 0).num_months() == MAX_MAGNITUDE

    def test_overflow_raises(self):
        with pytest.raises(DurationOverflowError):
            RelativeDuration.from_mwd(MAX_MAGNITUDE + 1, 0, 0)

    def test_overflow_is_an_overflow_error(self):
        with pytest.raises(OverflowError):
            RelativeDuration.days(-(MAX_MAGNITUDE + 1))

    def test_overflow_opt_returns_none(self):
        assert RelativeDuration.from_mwd_opt(0, MAX_MAGNITUDE + 1, 0) is None
        assert RelativeDuration.from_mwd_opt(1, 2, 3) == RelativeDuration.from_mwd(1, 2, 3)

    def test_arithmetic_overflow_raises(self):
        with pytest.raises(DurationOverflowError):
            RelativeDuration.days(MAX_MAGNITUDE) + RelativeDuration.days(1)


# ── Arithmetic ────────────────────────────────────────────────────────────────

class TestArithmetic:

    def test_additive_inverse(self, mixed):
        assert mixed + (-mixed) == RelativeDuration.zero()
        assert mixed - mixed == RelativeDuration.zero()

    def test_components_never_carry(self):
        assert (RelativeDuration.days(20) + RelativeDuration.days(20)).as_tuple() == (0, 0, 40)

    def test_scalar_multiplication(self, mixed):
        assert mixed * 3 == mixed + mixed + mixed
        assert 3 * mixed == mixed * 3
        assert mixed * -1 == -mixed

    @pytest.mark.parametrize("k", [1, 2, -3, 7])
    def test_multiply_then_divide(self, mixed, k):
        assert (mixed * k) / k == mixed

    def test_division_truncates_toward_zero(self):
        assert RelativeDuration.from_mwd(7, -7, 3) / 2 == RelativeDuration.from_mwd(3, -3, 1)

    def test_division_by_zero(self, mixed):
        with pytest.raises(ZeroDivisionError):
            mixed / 0

    def test_ordering_is_lexicographic(self):
        assert RelativeDuration.months(1) > RelativeDuration.weeks(10)
        assert RelativeDuration.days(-1) < RelativeDuration.zero()

    def test_hashable(self):
        assert len({RelativeDuration.months(1), RelativeDuration.months(1)}) == 1


# ── Application to dates ──────────────────────────────────────────────────────

class TestApply:

    def test_month_end_clamps(self):
        assert date(2022, 1, 31) + RelativeDuration.months(1) == date(2022, 2, 28)

    def test_subtracting_from_month_end(self):
        assert date(2022, 2, 28) + RelativeDuration.months(-1) == date(2022, 1, 31)
        assert date(2022, 2, 28) - RelativeDuration.months(1) == date(2022, 1, 31)

    def test_not_invertible(self):
        there = date(2022, 1, 30) + RelativeDuration.months(1)
        assert there == date(2022, 2, 28)
        assert there - RelativeDuration.months(1) == date(2022, 1, 31)

    def test_months_then_weeks_then_days(self):
        rd = RelativeDuration.from_mwd(1, 1, 1)
        assert date(2022, 1, 31) + rd == date(2022, 3, 8)

    def test_duration_on_the_left(self):
        assert RelativeDuration.weeks(2) + date(2022, 1, 1) == date(2022, 1, 15)


class TestFromDurationBetween:

    def test_whole_year(self):
        assert RelativeDuration.from_duration_between(
            date(2022, 1, 1), date(2023, 1, 1)
        ) == RelativeDuration.months(12)

    def test_backs_off_an_overshooting_month(self):
        start, end = date(2022, 1, 31), date(2022, 3, 15)
        rd = RelativeDuration.from_duration_between(start, end)
        assert rd.as_tuple() == (1, 0, 15)
        assert start + rd == end

    def test_backwards(self):
        start, end = date(2022, 3, 15), date(2022, 1, 20)
        rd = RelativeDuration.from_duration_between(start, end)
        assert rd.as_tuple() == (-1, 0, -26)
        assert start + rd == end

    def test_same_date(self):
        assert RelativeDuration.from_duration_between(date(2022, 5, 5), date(2022, 5, 5)).is_zero()


# ── Text ──────────────────────────────────────────────────────────────────────

class TestText:

    def test_str(self):
        assert str(RelativeDuration.from_mwd(1, 2, 0)) == "1 month 2 weeks"
        assert str(RelativeDuration.days(-3)) == "-3 days"
        assert str(RelativeDuration.zero()) == "0 days"

    def test_repr(self):
        assert repr(RelativeDuration.weeks(2)) == "RelativeDuration(months=0, weeks=2, days=0)"

    @pytest.mark.parametrize(
        "rd, text",
        [
            (RelativeDuration.weeks(3).with_days(2), "P3W2D"),
            (RelativeDuration.from_mwd(-4, 3, 0), "P-4M3W"),
            (RelativeDuration.days(5), "P5D"),
            (RelativeDuration.zero(), "P0D"),
        ],
    )
    def test_iso8601_compact(self, rd, text):
        assert rd.iso8601() == text

    def test_iso8601_full_per_call(self):
        assert RelativeDuration.months(1).iso8601(style="full") == "P1M0W0D"

    def test_iso8601_default_style(self, full_style):
        assert RelativeDuration.days(5).iso8601() == "P0M0W5D"

    def test_unknown_style(self):
        with pytest.raises(ValueError):
            set_default_iso_style("verbose")
        with pytest.raises(ValueError):
            RelativeDuration.days(1).iso8601(style="verbose")
