"""caldate public API.

Date-only comparisons (time of day ignored) between dates, datetimes and
year-less recurring dates, plus a few civil-calendar helpers.
"""

from .core.errors import CaldateError, IncompatibleZoneError, InvalidDateError
from .core.time import days_in_month, is_leap_year, weekday_of
from .core.types import Month, Ordering, RecurringDate, Weekday, make_recurring_date
from .compare import (
    DateOnly,
    compare_date,
    compare_date_strict,
    date_eq,
    date_ne,
    date_lt,
    date_le,
    date_gt,
    date_ge,
    is_sorted,
    sort_by_date,
)
from .civil import (
    day_of_week,
    is_last_day_of_february,
    is_weekend_day,
    nth_weekday_of_month,
)

__all__ = [
    "CaldateError",
    "IncompatibleZoneError",
    "InvalidDateError",
    "Month",
    "Weekday",
    "Ordering",
    "RecurringDate",
    "make_recurring_date",
    "DateOnly",
    "compare_date",
    "compare_date_strict",
    "date_eq",
    "date_ne",
    "date_lt",
    "date_le",
    "date_gt",
    "date_ge",
    "is_sorted",
    "sort_by_date",
    "day_of_week",
    "is_weekend_day",
    "is_last_day_of_february",
    "nth_weekday_of_month",
    "days_in_month",
    "is_leap_year",
    "weekday_of",
]
