from __future__ import annotations

import re
import time
from datetime import date, datetime, timedelta, timezone
from typing import Any

from ._convention import DEFAULT_CONVENTION
from ._exceptions import IllegalArgumentError, ParseError
from ._result import Result
from .base import TimePeriod

DAY_FORMAT = "dd-MMM-yyyy"
SIMPLE_DAY_FORMAT = "yyyy-MM-dd"

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MS = timedelta(milliseconds=1)

_PATTERNS: dict[str, re.Pattern[str]] = {
    DAY_FORMAT: re.compile(r"^\s*(\d{1,2})-([A-Za-z]{3})-(\d{4})\s*$"),
    SIMPLE_DAY_FORMAT: re.compile(r"^\s*(\d{4})-(\d{1,2})-(\d{1,2})\s*$"),
}


def current_millis() -> int:
    return time.time_ns() // 1_000_000


def millis_of(moment: datetime) -> int:
    """Milliseconds since the epoch of an aware datetime."""
    return (moment - _EPOCH) // _ONE_MS


def local_datetime(timestamp: int) -> datetime:
    """The instant ``timestamp`` (ms) as an aware datetime in the convention zone."""
    return (_EPOCH + timedelta(milliseconds=timestamp)).astimezone(
        DEFAULT_CONVENTION.timezone
    )


def lenient_date(year: int, month: int, day: int) -> date:
    """
    Calendar date for a zero-based month, rolling overflowing months and days
    into neighbouring ones (``(2003, 3, 31)`` is 1 May 2003, ``(2004, 0, 0)``
    is 31 Dec 2003).
    """
    carry, month = divmod(month, 12)
    return date(year + carry, month + 1, 1) + timedelta(days=day - 1)


class Day(TimePeriod):
    """
    A calendar day in the convention time zone, without time of day.

    Two Days are equal iff they denote the same calendar date, whatever
    instant they were built from.  Instances are immutable; obtain them via
    the ``now`` / ``from_*`` factories (or a DayCache).
    """

    __slots__ = ("_date",)

    def __init__(self, value: date) -> None:
        if isinstance(value, datetime):
            value = value.date()
        self._date: date = value

    # ── factories ────────────────────────────────────────────────────────

    @classmethod
    def now(cls) -> Day:
        return cls.from_timestamp(current_millis())

    @classmethod
    def from_timestamp(cls, timestamp: int) -> Day:
        return cls(local_datetime(int(timestamp)).date())

    @classmethod
    def from_date(cls, value: date) -> Day:
        return cls(value)

    @classmethod
    def from_ymd(cls, year: int, month: int, day: int) -> Day:
        """Month is zero-based (January is 0).  Overflow rolls over, never fails."""
        return cls(lenient_date(int(year), int(month), int(day)))

    @classmethod
    def from_string(cls, text: str, fmt: str = DAY_FORMAT) -> Day:
        """
        Parse ``text`` in ``DAY_FORMAT`` ("01-Jan-2004") or
        ``SIMPLE_DAY_FORMAT`` ("2004-01-01").

        Raises ParseError carrying ``text`` on malformed input.
        """
        pattern = _PATTERNS.get(fmt)
        if pattern is None:
            raise ParseError(text, f"unsupported day format {fmt!r}")
        match = pattern.match(text) if isinstance(text, str) else None
        if match is None:
            raise ParseError(text, f"expected {fmt}")

        if fmt == DAY_FORMAT:
            day_s, month_s, year_s = match.groups()
            try:
                month = DEFAULT_CONVENTION.month_index(month_s)
            except KeyError:
                raise ParseError(text, f"unknown month {month_s!r}") from None
        else:
            year_s, month_s, day_s = match.groups()
            month = int(month_s) - 1
        return cls.from_ymd(int(year_s), month, int(day_s))

    @classmethod
    def try_from_string(cls, text: str, fmt: str = DAY_FORMAT) -> Result[Day]:
        return Result.capture(lambda: cls.from_string(text, fmt))

    # ── arithmetic ───────────────────────────────────────────────────────

    def increment(self, n: int) -> Day:
        """The Day ``n`` calendar days away (``n`` may be negative)."""
        try:
            return Day(self._date + timedelta(days=int(n)))
        except OverflowError:
            raise IllegalArgumentError(
                f"{self} incremented by {n} days is outside the supported years"
            ) from None

    def inc(self) -> Day:
        return self.increment(1)

    def dec(self) -> Day:
        return self.increment(-1)

    @staticmethod
    def days_between(day1: Day, day2: Day) -> int:
        """Signed number of days from ``day1`` to ``day2``."""
        return (day2._date - day1._date).days

    # ── comparison ───────────────────────────────────────────────────────

    def compare_to(self, other: Any) -> int:
        if self._date < other._date:
            return -1
        return 1 if self._date > other._date else 0

    def is_before(self, other: Day) -> bool:
        return self._date < other._date

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Day):
            return NotImplemented
        return self._date == other._date

    def __hash__(self) -> int:
        return hash((Day, self._date))

    # ── accessors ────────────────────────────────────────────────────────

    @property
    def first_day(self) -> Day:
        return self

    @property
    def date(self) -> date:
        return self._date

    @property
    def year(self) -> int:
        return self._date.year

    @property
    def month(self) -> int:
        """Zero-based month."""
        return self._date.month - 1

    @property
    def day(self) -> int:
        return self._date.day

    @property
    def day_string(self) -> str:
        return f"{self._date.day:02d}"

    @property
    def month_string(self) -> str:
        return f"{self._date.month:02d}"

    @property
    def year_string(self) -> str:
        return f"{self._date.year:04d}"

    @property
    def medium_month_string(self) -> str:
        return DEFAULT_CONVENTION.month_abbreviations[self._date.month - 1]

    @property
    def simple_day_string(self) -> str:
        return f"{self.year_string}-{self.month_string}-{self.day_string}"

    @property
    def first_tick_of_the_day(self) -> int:
        midnight = datetime(
            self._date.year, self._date.month, self._date.day,
            tzinfo=DEFAULT_CONVENTION.timezone,
        )
        return millis_of(midnight)

    @property
    def last_tick_of_the_day(self) -> int:
        last = datetime(
            self._date.year, self._date.month, self._date.day,
            23, 59, 59, 999_000,
            tzinfo=DEFAULT_CONVENTION.timezone,
        )
        return millis_of(last)

    def __str__(self) -> str:
        return f"{self.day_string}-{self.medium_month_string}-{self.year_string}"

    def __repr__(self) -> str:
        return f"Day({str(self)!r})"
