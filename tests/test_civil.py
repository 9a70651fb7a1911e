# tests/test_civil.py

import pytest
import random
from datetime import date, datetime, timedelta

from caldate import (
    Month,
    Weekday,
    day_of_week,
    days_in_month,
    is_last_day_of_february,
    is_weekend_day,
    nth_weekday_of_month,
)

# August 2023 starts on a Tuesday and ends on a Thursday.
@pytest.mark.parametrize("weekday,n,expected", [
    (Weekday.MONDAY, 1, 7),
    (Weekday.MONDAY, 3, 21),
    (Weekday.MONDAY, 5, None),
    (Weekday.TUESDAY, 5, 29),
    (Weekday.TUESDAY, 1, 1),
    (Weekday.MONDAY, -1, 28),
    (Weekday.MONDAY, -3, 14),
    (Weekday.MONDAY, -5, None),
    (Weekday.WEDNESDAY, -1, 30),
    (Weekday.THURSDAY, -1, 31),
    (Weekday.THURSDAY, -5, 3),
    (Weekday.SATURDAY, -1, 26),
    (Weekday.SATURDAY, -3, 12),
])
def test_nth_weekday_august_2023(weekday, n, expected):
    assert nth_weekday_of_month(2023, Month.AUGUST, weekday, n) == expected

@pytest.mark.parametrize("n", [0, 6, -6, 100, -100])
def test_nth_weekday_out_of_range_occurrence(n):
    assert nth_weekday_of_month(2023, 8, 0, n) is None

def test_nth_weekday_accepts_plain_ints():
    # 4th Thursday of November 2023
    assert nth_weekday_of_month(2023, 11, 3, 4) == 23

def test_nth_weekday_february_leap_and_non_leap():
    # Feb 2024 has five Thursdays (1, 8, 15, 22, 29), Feb 2023 has four of each
    assert nth_weekday_of_month(2024, 2, Weekday.THURSDAY, 5) == 29
    assert nth_weekday_of_month(2024, 2, Weekday.THURSDAY, -5) == 1
    assert nth_weekday_of_month(2023, 2, Weekday.THURSDAY, 5) is None
    assert nth_weekday_of_month(2023, 2, Weekday.THURSDAY, -4) == 2

def test_nth_weekday_matches_brute_force():
    random.seed(42)
    for _ in range(2000):
        year = random.randint(1, 9999)
        month = random.randint(1, 12)
        weekday = random.randint(0, 6)
        n = random.choice([-5, -4, -3, -2, -1, 1, 2, 3, 4, 5])

        hits = [d for d in range(1, days_in_month(month, year) + 1)
                if date(year, month, d).weekday() == weekday]
        if n > 0:
            expected = hits[n - 1] if n <= len(hits) else None
        else:
            expected = hits[n] if -n <= len(hits) else None

        assert nth_weekday_of_month(year, month, weekday, n) == expected

def test_is_last_day_of_february():
    assert is_last_day_of_february(date(2024, 2, 29))
    assert is_last_day_of_february(date(2023, 2, 28))
    assert not is_last_day_of_february(date(2024, 2, 28))
    assert not is_last_day_of_february(date(2023, 3, 1))
    assert not is_last_day_of_february(date(2023, 1, 28))
    assert is_last_day_of_february(datetime(2000, 2, 29, 23, 59))
    # 1900 is not a leap year, 2000 is
    assert is_last_day_of_february(date(1900, 2, 28))
    assert not is_last_day_of_february(date(2000, 2, 28))

def test_weekend_days():
    d = date(2023, 8, 7)  # Monday
    flags = [is_weekend_day(d + timedelta(days=i)) for i in range(7)]
    assert flags == [False, False, False, False, False, True, True]
    assert day_of_week(d) is Weekday.MONDAY
    assert is_weekend_day(datetime(2023, 8, 12, 23, 0))
