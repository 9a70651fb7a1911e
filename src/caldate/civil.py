from __future__ import annotations

from datetime import date
from typing import Optional

from caldate.core.time import days_in_month, is_leap_year, weekday_of
from caldate.core.types import Month, Weekday


def day_of_week(d: date) -> Weekday:
    return Weekday(weekday_of(d.year, d.month, d.day))

def is_weekend_day(d: date) -> bool:
    """True on Saturdays and Sundays."""
    return day_of_week(d) in (Weekday.SATURDAY, Weekday.SUNDAY)

def is_last_day_of_february(d: date) -> bool:
    if d.month != Month.FEBRUARY:
        return False
    return d.day == (29 if is_leap_year(d.year) else 28)


def nth_weekday_of_month(year: int, month: int, weekday: int, occurrence: int) -> Optional[int]:
    """
    Day of month of the `occurrence`-th `weekday` in (year, month), or None.

    Positive occurrences count from the 1st of the month, negative ones from
    its last day (-1 is the last such weekday). Occurrence 0, or any with
    magnitude above 5, finds nothing; so does a 5th weekday the month
    does not have.
    """
    if occurrence == 0 or abs(occurrence) > 5:
        return None

    weekday = Weekday(weekday)
    n_days = days_in_month(month, year)

    if occurrence > 0:
        first = weekday_of(year, month, 1)
        delta = weekday - first
        if delta >= 0:
            day = delta + 7 * (occurrence - 1) + 1
        else:
            day = delta + 7 * occurrence + 1
    else:
        last = weekday_of(year, month, n_days)
        delta = last - weekday
        k = -occurrence
        if delta >= 0:
            day = n_days - delta - 7 * (k - 1)
        else:
            day = n_days - delta - 7 * k

    if 1 <= day <= n_days:
        return day
    return None
