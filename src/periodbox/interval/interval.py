from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, ClassVar, Generic, Iterator, TypeVar

from periodbox.period import Day, Month, Result, TimePeriod, Week

from ._exceptions import (
    IllegalArgumentError,
    IllegalIntervalError,
    NoMoreElementsError,
    UnsupportedOperationError,
)
from .utility import parse_day_tokens, parse_month_tokens, parse_week_label

P = TypeVar("P", bound=TimePeriod)
IntervalT = TypeVar("IntervalT", bound="Interval[Any]")


class IntervalKind(Enum):
    DAY = "Day"
    WEEK = "Week"
    MONTH = "Month"


class PeriodCursor(Generic[P]):
    """
    Forward cursor over ``[start, end]``, one period at a time.

    Every call to ``Interval.cursor()`` (or ``iter(interval)``) builds a new,
    independent cursor.  Exhaustion is signalled by NoMoreElementsError,
    which is a StopIteration, so cursors work directly in ``for`` loops.
    """

    __slots__ = ("_current", "_end", "_kind")

    def __init__(self, start: P, end: P, kind: IntervalKind) -> None:
        self._current: TimePeriod = start.dec()
        self._end: P = end
        self._kind = kind

    def has_next(self) -> bool:
        return self._current.compare_to(self._end) < 0

    def next(self) -> P:
        advanced = self._current.inc()
        if advanced.compare_to(self._end) > 0:
            raise NoMoreElementsError(
                f"Reached the end of the {self._kind.value.lower()} interval already."
            )
        self._current = advanced
        return advanced  # type: ignore[return-value]

    def remove(self) -> None:
        raise UnsupportedOperationError(
            f"remove() is not supported by the {self._kind.value.lower()} cursor."
        )

    def __iter__(self) -> PeriodCursor[P]:
        return self

    def __next__(self) -> P:
        return self.next()


class Interval(ABC, Generic[P]):
    """
    Inclusive range ``[start, end]`` over one period granularity.

    The concrete kinds are DayInterval, WeekInterval and MonthInterval,
    distinguished by their ``kind`` tag.  Construction rejects ``start > end``
    with IllegalIntervalError; ``attempt`` returns a Result instead.
    """

    kind: ClassVar[IntervalKind]

    __slots__ = ("_start", "_end")

    def __init__(self, start: P, end: P) -> None:
        if type(start) is not type(end):
            raise IllegalArgumentError(
                f"Interval bounds must be the same kind of period, "
                f"got {type(start).__name__} and {type(end).__name__}"
            )
        if start.compare_to(end) > 0:
            raise IllegalIntervalError(start, end, self.kind.value.lower())
        self._start: P = start
        self._end: P = end

    @classmethod
    def attempt(cls: type[IntervalT], start: Any, end: Any) -> Result[IntervalT]:
        return Result.capture(lambda: cls(start, end))

    @property
    def start(self) -> P:
        return self._start

    @property
    def end(self) -> P:
        return self._end

    @property
    def interval_type(self) -> str:
        return self.kind.value

    @property
    def is_daily_interval(self) -> bool:
        return self.kind is IntervalKind.DAY

    @property
    def is_weekly_interval(self) -> bool:
        return self.kind is IntervalKind.WEEK

    @property
    def is_monthly_interval(self) -> bool:
        return self.kind is IntervalKind.MONTH

    def cursor(self) -> PeriodCursor[P]:
        return PeriodCursor(self._start, self._end, self.kind)

    def __iter__(self) -> Iterator[P]:
        return self.cursor()

    def periods(self) -> list[P]:
        return list(self.cursor())

    def contains(self, period: P) -> bool:
        return self._start.compare_to(period) <= 0 <= self._end.compare_to(period)

    @abstractmethod
    def __len__(self) -> int: ...

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval) or other.kind is not self.kind:
            return NotImplemented
        return self._start == other._start and self._end == other._end

    def __hash__(self) -> int:
        return hash((self.kind, self._start, self._end))

    def __str__(self) -> str:
        return f"{self.kind.value} Interval : {self._start} ~ {self._end}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._start!r}, {self._end!r})"


class DayInterval(Interval[Day]):
    kind = IntervalKind.DAY

    __slots__ = ()

    @classmethod
    def from_strings(
        cls,
        start_year: str,
        start_month: str,
        start_day: str,
        end_year: str,
        end_month: str,
        end_day: str,
    ) -> DayInterval:
        """Months are zero-based tokens, e.g. ``("2003", "10", "03", ...)`` is 03-Nov-2003."""
        return cls(
            parse_day_tokens(start_year, start_month, start_day),
            parse_day_tokens(end_year, end_month, end_day),
        )

    @property
    def start_day(self) -> Day:
        return self._start

    @property
    def end_day(self) -> Day:
        return self._end

    def __len__(self) -> int:
        return Day.days_between(self._start, self._end) + 1


class WeekInterval(Interval[Week]):
    kind = IntervalKind.WEEK

    __slots__ = ()

    @classmethod
    def from_labels(cls, start_week: str, end_week: str) -> WeekInterval:
        return cls(parse_week_label(start_week), parse_week_label(end_week))

    @property
    def start_week(self) -> Week:
        return self._start

    @property
    def end_week(self) -> Week:
        return self._end

    def __len__(self) -> int:
        return Day.days_between(self._start.first_day, self._end.first_day) // 7 + 1


class MonthInterval(Interval[Month]):
    kind = IntervalKind.MONTH

    __slots__ = ()

    @classmethod
    def from_strings(
        cls,
        start_year: str,
        start_month: str,
        end_year: str,
        end_month: str,
    ) -> MonthInterval:
        return cls(
            parse_month_tokens(start_year, start_month),
            parse_month_tokens(end_year, end_month),
        )

    @classmethod
    def from_tstamps(cls, start: Any, end: Any) -> MonthInterval:
        return cls(Month.from_tstamp(start), Month.from_tstamp(end))

    @property
    def start_month(self) -> Month:
        return self._start

    @property
    def end_month(self) -> Month:
        return self._end

    def __len__(self) -> int:
        return (
            (self._end.year - self._start.year) * 12
            + self._end.month - self._start.month
            + 1
        )
