from __future__ import annotations

import calendar
from typing import Any

from .base import TimePeriod
from ._convention import DEFAULT_CONVENTION
from .day import Day
from .week import Week


class Month(TimePeriod):
    """A calendar month; ``month`` is zero-based (January is 0)."""

    __slots__ = ("_year", "_month", "_num_of_days", "_first_day", "_last_day")

    def __init__(self, year: int, month: int) -> None:
        carry, month = divmod(int(month), 12)
        self._year: int = int(year) + carry
        self._month: int = month
        self._num_of_days: int = calendar.monthrange(self._year, self._month + 1)[1]
        self._first_day: Day = Day.from_ymd(self._year, self._month, 1)
        self._last_day: Day = Day.from_ymd(self._year, self._month, self._num_of_days)

    @classmethod
    def from_day(cls, day: Day) -> Month:
        return cls(day.year, day.month)

    @classmethod
    def from_tstamp(cls, tstamp: Any) -> Month:
        """Month containing a Tstamp's instant (in the convention zone)."""
        return cls.from_day(tstamp.to_day())

    @classmethod
    def current(cls) -> Month:
        return cls.from_day(Day.now())

    @property
    def year(self) -> int:
        return self._year

    @property
    def month(self) -> int:
        return self._month

    @property
    def num_of_days(self) -> int:
        return self._num_of_days

    @property
    def first_day(self) -> Day:
        return self._first_day

    @property
    def last_day(self) -> Day:
        return self._last_day

    @property
    def days(self) -> tuple[Day, ...]:
        return tuple(self._first_day.increment(i) for i in range(self._num_of_days))

    @property
    def first_week_in_month(self) -> Week:
        return Week(self._first_day)

    @property
    def last_week_in_month(self) -> Week:
        return Week(self._last_day)

    def inc(self) -> Month:
        if self._month == 11:
            return Month(self._year + 1, 0)
        return Month(self._year, self._month + 1)

    def dec(self) -> Month:
        if self._month == 0:
            return Month(self._year - 1, 11)
        return Month(self._year, self._month - 1)

    def compare_to(self, other: Any) -> int:
        if self._year != other.year:
            return self._year - other.year
        return self._month - other.month

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Month):
            return NotImplemented
        return (self._year, self._month) == (other._year, other._month)

    def __hash__(self) -> int:
        return hash((Month, self._year, self._month))

    def __str__(self) -> str:
        abbr = DEFAULT_CONVENTION.month_abbreviations[self._month]
        return f"{abbr}-{self._year:04d}"

    def __repr__(self) -> str:
        return f"Month({self._year}, {self._month})"
