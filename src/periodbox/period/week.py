from __future__ import annotations

from typing import Any

from .base import TimePeriod
from ._convention import DEFAULT_CONVENTION
from .day import Day


def start_of_week(day: Day) -> Day:
    """The convention's first weekday on or before ``day``."""
    back = (day.date.weekday() - DEFAULT_CONVENTION.first_weekday) % 7
    return day.increment(-back)


class Week(TimePeriod):
    """
    Seven consecutive days starting on the convention's first weekday
    (Sunday).  Any day inside the week builds an equal Week.
    """

    __slots__ = ("_first_day", "_last_day", "_days")

    def __init__(self, day: Day | None = None) -> None:
        if day is None:
            day = Day.now()
        self._first_day: Day = start_of_week(day)
        self._last_day: Day = self._first_day.increment(6)
        self._days: tuple[Day, ...] = tuple(
            self._first_day.increment(i) for i in range(7)
        )

    @classmethod
    def current(cls) -> Week:
        return cls(Day.now())

    @classmethod
    def from_timestamp(cls, timestamp: int) -> Week:
        return cls(Day.from_timestamp(timestamp))

    @property
    def first_day(self) -> Day:
        return self._first_day

    @property
    def last_day(self) -> Day:
        return self._last_day

    @property
    def days(self) -> tuple[Day, ...]:
        return self._days

    @property
    def week_representation(self) -> str:
        """Label such as ``"28-Dec-2003 to 03-Jan-2004"``."""
        return f"{self._first_day} to {self._last_day}"

    def contains(self, day: Day) -> bool:
        return self._first_day <= day <= self._last_day

    def inc(self) -> Week:
        return Week(self._first_day.increment(7))

    def dec(self) -> Week:
        return Week(self._first_day.increment(-7))

    def compare_to(self, other: Any) -> int:
        return self._first_day.compare_to(other.first_day)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Week):
            return NotImplemented
        return self._first_day == other._first_day

    def __hash__(self) -> int:
        return hash((Week, self._first_day))

    def __str__(self) -> str:
        return str(self._last_day)

    def __repr__(self) -> str:
        return f"Week({self.week_representation!r})"
