# Re-export date primitives
from .date import DATE_FMT, DateLike, date_to_str, to_date
from .search import (
    beginning_of_biweek,
    beginning_of_half,
    beginning_of_month,
    beginning_of_quarter,
    beginning_of_week,
    beginning_of_year,
    days_in_month,
    end_of_biweek,
    end_of_half,
    end_of_month,
    end_of_quarter,
    end_of_week,
    end_of_year,
    find_weekday_ascending,
    find_weekday_descending,
    half_month,
    is_end_of_month,
    month_end,
    quarter_month,
    weeks_in_year,
)
from .shift import shift_days, shift_months, shift_quarters, shift_weeks, shift_years

__all__ = [
    "DATE_FMT",
    "DateLike",
    "date_to_str",
    "to_date",
    "beginning_of_biweek",
    "beginning_of_half",
    "beginning_of_month",
    "beginning_of_quarter",
    "beginning_of_week",
    "beginning_of_year",
    "days_in_month",
    "end_of_biweek",
    "end_of_half",
    "end_of_month",
    "end_of_quarter",
    "end_of_week",
    "end_of_year",
    "find_weekday_ascending",
    "find_weekday_descending",
    "half_month",
    "is_end_of_month",
    "month_end",
    "quarter_month",
    "weeks_in_year",
    "shift_days",
    "shift_months",
    "shift_quarters",
    "shift_weeks",
    "shift_years",
]
