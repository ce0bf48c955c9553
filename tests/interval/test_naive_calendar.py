"""
tests/interval/test_naive_calendar.py

Covers:
  - NaiveInterval ordering, normalization of excluded sides, and dict form
  - CalendarInterval buckets for every basis
  - Calendar iteration, including short biweeks and year rollovers
  - Inclusive until() and conversion into a closed Interval
"""

from datetime import date

import pytest

from calends.bound import Bound
from calends.conventions import CalendarBasis
from calends.duration import RelativeDuration
from calends.interval import CalendarInterval, Interval, NaiveInterval


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def jan1():
    return date(2022, 1, 1)


@pytest.fixture
def jan10():
    return date(2022, 1, 10)


# ── NaiveInterval ─────────────────────────────────────────────────────────────

class TestNaiveInterval:

    def test_orders_by_start_then_end(self, jan1, jan10):
        a = NaiveInterval(Bound.unbounded(), Bound.included(jan1))
        b = NaiveInterval(Bound.included(jan1), Bound.included(jan10))
        c = NaiveInterval(Bound.included(jan1), Bound.unbounded())
        d = NaiveInterval(Bound.excluded(jan1), Bound.included(jan10))
        assert sorted([d, c, b, a]) == [a, b, c, d]
        assert a < d
        assert c >= b

    def test_within_respects_exclusion(self, jan1, jan10):
        interval = NaiveInterval(Bound.excluded(jan1), Bound.excluded(jan10))
        assert not interval.within(jan1)
        assert interval.within(date(2022, 1, 2))
        assert not interval.within(jan10)

    def test_iso8601_normalizes_excluded_sides(self, jan1, jan10):
        interval = NaiveInterval(Bound.excluded(jan1), Bound.excluded(jan10))
        assert interval.iso8601() == "2022-01-02/2022-01-09"

    def test_iso8601_unbounded(self, jan1):
        interval = NaiveInterval(Bound.unbounded(), Bound.included(jan1))
        assert interval.iso8601() == "../2022-01-01"

    def test_str(self, jan1):
        interval = NaiveInterval(Bound.included(jan1), Bound.unbounded())
        assert str(interval) == "Included(2022-01-01) to Unbounded"

    def test_dict_round_trip(self, jan1, jan10):
        interval = NaiveInterval(Bound.included(jan1), Bound.excluded(jan10))
        data = interval.to_dict()
        assert data == {
            "start_bound": "INCLUDED",
            "start_date": jan1,
            "end_bound": "EXCLUDED",
            "end_date": jan10,
        }
        assert NaiveInterval.from_dict(data) == interval

    def test_from_dict_accepts_strings(self):
        interval = NaiveInterval.from_dict(
            {"start_bound": "unbounded", "end_bound": "included", "end_date": "2022-01-10"}
        )
        assert interval.end_date() == date(2022, 1, 10)
        assert interval.start_date() is None

    def test_from_interval(self):
        closed = Interval.closed_from_start(date(2022, 1, 1), RelativeDuration.months(1))
        naive = NaiveInterval.from_interval(closed)
        assert naive == NaiveInterval(Bound.included(date(2022, 1, 1)), Bound.included(date(2022, 1, 31)))


# ── CalendarInterval buckets ──────────────────────────────────────────────────

class TestCalendarBuckets:

    @pytest.mark.parametrize(
        "basis, start, end",
        [
            (CalendarBasis.YEAR, date(2022, 1, 1), date(2022, 12, 31)),
            (CalendarBasis.QUARTER, date(2022, 1, 1), date(2022, 3, 31)),
            (CalendarBasis.MONTH, date(2022, 2, 1), date(2022, 2, 28)),
            (CalendarBasis.BIWEEK, date(2022, 1, 31), date(2022, 2, 13)),
            (CalendarBasis.WEEK, date(2022, 1, 31), date(2022, 2, 6)),
            (CalendarBasis.DAY, date(2022, 2, 3), date(2022, 2, 3)),
        ],
    )
    def test_for_date(self, basis, start, end):
        bucket = CalendarInterval.for_date(basis, date(2022, 2, 3))
        assert bucket.start_date() == start
        assert bucket.end_date() == end
        assert bucket.basis == basis

    def test_biweek_across_year_end(self):
        bucket = CalendarInterval.biweek_for_date(date(2022, 1, 1))
        assert bucket.start == date(2021, 12, 20)
        assert bucket.end == date(2022, 1, 2)


class TestCalendarIteration:

    def test_year(self):
        it = iter(CalendarInterval.year_for_date(date(2022, 2, 3)))
        assert next(it).start == date(2022, 1, 1)
        assert next(it).start == date(2023, 1, 1)

    def test_quarter(self):
        it = iter(CalendarInterval.quarter_for_date(date(2022, 2, 3)))
        next(it)
        second = next(it)
        assert (second.start, second.end) == (date(2022, 4, 1), date(2022, 6, 30))

    def test_month(self):
        it = iter(CalendarInterval.month_for_date(date(2022, 1, 1)))
        spans = [(b.start, b.end) for b in (next(it), next(it), next(it))]
        assert spans == [
            (date(2022, 1, 1), date(2022, 1, 31)),
            (date(2022, 2, 1), date(2022, 2, 28)),
            (date(2022, 3, 1), date(2022, 3, 31)),
        ]

    def test_biweek(self):
        it = iter(CalendarInterval.biweek_for_date(date(2022, 2, 3)))
        next(it)
        second = next(it)
        assert (second.start, second.end) == (date(2022, 2, 14), date(2022, 2, 27))

    def test_week(self):
        bucket = CalendarInterval.week_for_date(date(2022, 2, 3)).succ()
        assert (bucket.start, bucket.end) == (date(2022, 2, 7), date(2022, 2, 13))

    def test_day(self):
        bucket = CalendarInterval.day_for_date(date(2022, 12, 31)).succ()
        assert bucket.start == bucket.end == date(2023, 1, 1)

    def test_until_is_inclusive_of_bucket_end(self):
        start = CalendarInterval.month_for_date(date(2022, 1, 15))
        assert len(list(start.until(date(2022, 3, 31)))) == 3
        assert len(list(start.until(date(2022, 3, 30)))) == 2

    def test_into_interval(self):
        bucket = CalendarInterval.month_for_date(date(2022, 1, 15))
        interval = bucket.into_interval()
        assert interval.duration() == RelativeDuration.months(1)
        assert interval.end_date() == date(2022, 1, 31)

    def test_hash_str_is_stable(self):
        a = CalendarInterval.month_for_date(date(2022, 1, 15))
        b = CalendarInterval.month_for_date(date(2022, 1, 31))
        c = CalendarInterval.month_for_date(date(2022, 2, 1))
        assert a.hash_str() == b.hash_str()
        assert a.hash_str() != c.hash_str()
        assert a.to_dict()["period"] == "MONTH"
