"""
caldate.compare
---------------
Date-only comparison of date-bearing values: full dates (``datetime.date`` /
``datetime.datetime``) and ``RecurringDate``. Time of day is never looked at,
and a RecurringDate has no year, so full dates compared against one only
contribute their month and day.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, tzinfo
from functools import cmp_to_key
from typing import Callable, Iterable, List, Optional, Tuple, Union

from caldate.core.errors import IncompatibleZoneError
from caldate.core.types import Ordering, RecurringDate

DateLike = Union[date, RecurringDate]
Comparator = Callable[[DateLike, DateLike], Ordering]


@dataclass(frozen=True)
class DateKey:
    """Normalized projection shared by both operand shapes."""
    year: Optional[int]
    month: int
    day: int
    zone: Optional[tzinfo]
    zone_set: bool

    def fields(self, with_year: bool) -> Tuple[int, ...]:
        if with_year:
            return (self.year, self.month, self.day)
        return (self.month, self.day)


def date_key(value: DateLike) -> DateKey:
    if isinstance(value, RecurringDate):
        return DateKey(None, int(value.month), value.day, value.zone, value.zone is not None)
    if isinstance(value, date):
        # A naive datetime or plain date still has a definite zone: None.
        return DateKey(value.year, value.month, value.day, getattr(value, "tzinfo", None), True)
    raise TypeError(f"Expected a date, datetime or RecurringDate, got {type(value).__name__}")


def check_zones(a: DateKey, b: DateKey) -> None:
    """Zones must match unless a RecurringDate side leaves its zone unset."""
    if a.zone_set and b.zone_set and a.zone != b.zone:
        raise IncompatibleZoneError(f"Cannot compare dates in zones {a.zone!r} and {b.zone!r}")


def _sign(x: Tuple[int, ...], y: Tuple[int, ...]) -> Ordering:
    if x < y:
        return Ordering.LESS
    if x > y:
        return Ordering.GREATER
    return Ordering.EQUAL


def compare_date(a: DateLike, b: DateLike) -> Ordering:
    """
    Three-way comparison of the calendar dates of `a` and `b`.

    Full dates compare on (year, month, day); as soon as one side is a
    RecurringDate only (month, day) is used. Raises IncompatibleZoneError
    before looking at any field if the zones do not match.
    """
    if isinstance(a, RecurringDate) and not isinstance(b, RecurringDate):
        return Ordering(-compare_date(b, a))

    ka, kb = date_key(a), date_key(b)
    check_zones(ka, kb)
    with_year = ka.year is not None and kb.year is not None
    return _sign(ka.fields(with_year), kb.fields(with_year))


def compare_date_strict(a: DateLike, b: DateLike) -> Ordering:
    """
    Like compare_date but never EQUAL: ties are reported as GREATER, so a
    sortedness check with this comparator only accepts strictly increasing
    sequences.
    """
    if compare_date(a, b) == Ordering.LESS:
        return Ordering.LESS
    return Ordering.GREATER


def date_eq(a: DateLike, b: DateLike) -> bool:
    return compare_date(a, b) == Ordering.EQUAL

def date_ne(a: DateLike, b: DateLike) -> bool:
    return compare_date(a, b) != Ordering.EQUAL

def date_lt(a: DateLike, b: DateLike) -> bool:
    return compare_date(a, b) == Ordering.LESS

def date_le(a: DateLike, b: DateLike) -> bool:
    return compare_date(a, b) != Ordering.GREATER

def date_gt(a: DateLike, b: DateLike) -> bool:
    return compare_date(a, b) == Ordering.GREATER

def date_ge(a: DateLike, b: DateLike) -> bool:
    return compare_date(a, b) != Ordering.LESS


class DateOnly:
    """
    Operator adapter: ``DateOnly(dt1) == dt2`` is ``date_eq(dt1, dt2)``, and
    likewise for !=, <, <=, > and >=. Either operand may be wrapped.
    """
    __slots__ = ("value",)
    __hash__ = None  # equality is not structural

    def __init__(self, value: DateLike):
        date_key(value)
        self.value = value

    def __repr__(self) -> str:
        return f"DateOnly({self.value!r})"

    @staticmethod
    def _unwrap(other):
        if isinstance(other, DateOnly):
            return other.value
        if isinstance(other, (date, RecurringDate)):
            return other
        return None

    def _rel(self, other, fn: Callable[[DateLike, DateLike], bool]):
        rhs = self._unwrap(other)
        if rhs is None:
            return NotImplemented
        return fn(self.value, rhs)

    def __eq__(self, other):
        return self._rel(other, date_eq)

    def __ne__(self, other):
        return self._rel(other, date_ne)

    def __lt__(self, other):
        return self._rel(other, date_lt)

    def __le__(self, other):
        return self._rel(other, date_le)

    def __gt__(self, other):
        return self._rel(other, date_gt)

    def __ge__(self, other):
        return self._rel(other, date_ge)


def is_sorted(values: Iterable[DateLike], cmp: Comparator = compare_date) -> bool:
    """True if no adjacent pair compares GREATER under `cmp`."""
    prev = None
    first = True
    for v in values:
        if not first and cmp(prev, v) == Ordering.GREATER:
            return False
        prev, first = v, False
    return True


def sort_by_date(values: Iterable[DateLike]) -> List[DateLike]:
    """Stable sort on calendar date only; same-day values keep their order."""
    return sorted(values, key=cmp_to_key(compare_date))
