"""
Calendar boundary lookups: month ends, period starts/ends and weekday search.

Weeks start on Monday and are numbered the ISO way.
"""

import calendar
from datetime import date, timedelta

from dateutil.relativedelta import relativedelta, weekday


def days_in_month(year: int, month: int) -> int:
    """Number of days in the given month."""
    return calendar.monthrange(year, month)[1]


def month_end(year: int, month: int) -> date:
    """Get the last calendar day of a given month."""
    return date(year, month, days_in_month(year, month))


def is_end_of_month(dt: date) -> bool:
    """Check if date is end of month."""
    return dt.day == days_in_month(dt.year, dt.month)


def weeks_in_year(year: int) -> int:
    """Number of ISO weeks in the ISO year (52 or 53)."""
    # Dec 28th always falls in the last ISO week of its year
    return date(year, 12, 28).isocalendar()[1]


def quarter_month(dt: date) -> int:
    """First month of the quarter containing ``dt``."""
    return 1 + 3 * ((dt.month - 1) // 3)


def half_month(dt: date) -> int:
    """First month of the half-year containing ``dt``."""
    return 1 + 6 * ((dt.month - 1) // 6)


def find_weekday_ascending(wd: weekday, year: int, month: int, occurrence: int) -> date:
    """N-th ``wd`` of the month counting from the 1st, e.g. 3rd Wednesday."""
    if occurrence < 1:
        raise ValueError("occurrence must be positive")
    return date(year, month, 1) + relativedelta(weekday=wd(+occurrence))


def find_weekday_descending(wd: weekday, year: int, month: int, occurrence: int) -> date:
    """N-th ``wd`` of the month counting back from the month end, e.g. last Friday."""
    if occurrence < 1:
        raise ValueError("occurrence must be positive")
    return month_end(year, month) + relativedelta(weekday=wd(-occurrence))


def beginning_of_year(dt: date) -> date:
    return date(dt.year, 1, 1)


def beginning_of_half(dt: date) -> date:
    return date(dt.year, half_month(dt), 1)


def beginning_of_quarter(dt: date) -> date:
    return date(dt.year, quarter_month(dt), 1)


def beginning_of_month(dt: date) -> date:
    return date(dt.year, dt.month, 1)


def beginning_of_week(dt: date) -> date:
    """Monday of the ISO week containing ``dt``."""
    return dt - timedelta(days=dt.weekday())


def beginning_of_biweek(dt: date) -> date:
    """
    Monday starting the biweek containing ``dt``.

    Biweek 1 spans ISO weeks 1-2, biweek 26 spans weeks 51-52. In a 53 week
    year the last week forms a biweek of its own.
    """
    week = dt.isocalendar()[1]
    monday = beginning_of_week(dt)
    if week % 2 == 0:
        return monday - timedelta(weeks=1)
    return monday


def end_of_year(dt: date) -> date:
    return date(dt.year, 12, 31)


def end_of_half(dt: date) -> date:
    return month_end(dt.year, half_month(dt) + 5)


def end_of_quarter(dt: date) -> date:
    return month_end(dt.year, quarter_month(dt) + 2)


def end_of_month(dt: date) -> date:
    return month_end(dt.year, dt.month)


def end_of_week(dt: date) -> date:
    """Sunday of the ISO week containing ``dt``."""
    return beginning_of_week(dt) + timedelta(days=6)


def end_of_biweek(dt: date) -> date:
    start = beginning_of_biweek(dt)
    iso_year, week, _ = start.isocalendar()
    if week == weeks_in_year(iso_year):
        return start + timedelta(days=6)
    return start + timedelta(days=13)
