"""Thin adapters over the standard-library calendar primitive."""
from __future__ import annotations

import calendar as pycal


def is_leap_year(year: int) -> bool:
    return pycal.isleap(year)

def days_in_month(month: int, year: int) -> int:
    """Number of days in `month` of `year` (leap-year aware)."""
    return pycal.monthrange(year, int(month))[1]

def weekday_of(year: int, month: int, day: int) -> int:
    """Weekday ordinal, 0=Mon..6=Sun."""
    return pycal.weekday(year, int(month), day)
