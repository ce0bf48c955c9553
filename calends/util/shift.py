"""
Shift dates by whole calendar units.
"""

from datetime import date, timedelta

from dateutil.relativedelta import relativedelta

from .search import is_end_of_month, month_end


def shift_months(dt: date, months: int) -> date:
    """Add months to a date, applying the end-of-month rule.

    This adds calendar months, not 30 or 31 days. A date on the last day of
    its month lands on the last day of the target month; any other day is
    clamped to the target month's length.

    Examples:
        >>> shift_months(date(2022, 1, 31), 1)
        datetime.date(2022, 2, 28)
        >>> shift_months(date(2022, 2, 28), 1)
        datetime.date(2022, 3, 31)
        >>> shift_months(date(2022, 2, 28), 11)
        datetime.date(2023, 1, 31)
    """
    if months == 0:
        return dt

    # relativedelta handles year rollover and clamps Jan 31 -> Feb 28
    shifted = dt + relativedelta(months=months)

    # A month-end source date stays on the month end
    if is_end_of_month(dt):
        return month_end(shifted.year, shifted.month)
    return shifted


def shift_quarters(dt: date, quarters: int) -> date:
    """Add quarters (three months each) to a date."""
    return shift_months(dt, 3 * quarters)


def shift_years(dt: date, years: int) -> date:
    """Add years to a date; Feb 29 maps to Feb 28 in non-leap years."""
    return shift_months(dt, 12 * years)


def shift_weeks(dt: date, weeks: int) -> date:
    return dt + timedelta(weeks=weeks)


def shift_days(dt: date, days: int) -> date:
    return dt + timedelta(days=days)
