from __future__ import annotations
from dataclasses import dataclass
from datetime import date, tzinfo
from enum import IntEnum
from typing import Optional

from .errors import InvalidDateError
from .time import is_leap_year

class Month(IntEnum):
    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

class Weekday(IntEnum):
    # Same ordinals as date.weekday()
    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

class Ordering(IntEnum):
    LESS = -1
    EQUAL = 0
    GREATER = 1

# Longest possible month, February taken in a leap year.
MAX_DAYS = {
    Month.JANUARY: 31, Month.FEBRUARY: 29, Month.MARCH: 31,
    Month.APRIL: 30, Month.MAY: 31, Month.JUNE: 30,
    Month.JULY: 31, Month.AUGUST: 31, Month.SEPTEMBER: 30,
    Month.OCTOBER: 31, Month.NOVEMBER: 30, Month.DECEMBER: 31,
}

@dataclass(frozen=True)
class RecurringDate:
    """
    A month/day pair that comes back every year (New Year's Day, Labour Day,
    Christmas...). The optional zone only restricts which values it may be
    compared with; it never takes part in the ordering.
    """
    month: Month
    day: int
    zone: Optional[tzinfo] = None

    def __post_init__(self) -> None:
        try:
            month = Month(self.month)
        except ValueError:
            raise InvalidDateError(f"Invalid month {self.month!r}") from None
        if isinstance(self.day, bool) or not isinstance(self.day, int):
            raise InvalidDateError(f"Day of month must be an int, got {self.day!r}")
        if not 1 <= self.day <= MAX_DAYS[month]:
            raise InvalidDateError(f"{month.name.title()} {self.day} does not exist in any year")
        object.__setattr__(self, "month", month)

    @property
    def day_of_month(self) -> int:
        return self.day

    @classmethod
    def from_date(cls, d: date) -> "RecurringDate":
        """Drop the year (and any time of day) of `d`, keeping its zone."""
        return cls(Month(d.month), d.day, getattr(d, "tzinfo", None))

    def occurs_in(self, year: int) -> bool:
        return not (self.month == Month.FEBRUARY and self.day == 29 and not is_leap_year(year))

    def in_year(self, year: int) -> date:
        if not self.occurs_in(year):
            raise InvalidDateError(f"February 29 does not occur in {year}")
        return date(year, self.month, self.day)

def make_recurring_date(month: int, day: int, zone: Optional[tzinfo] = None) -> RecurringDate:
    return RecurringDate(month, day, zone)
