from __future__ import annotations

import re
from dataclasses import dataclass, replace
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Iterable, Optional, Union

import numpy as np

from periodbox.period import DEFAULT_CONVENTION, MILLIS_PER_DAY, Day, ParseError, Result
from periodbox.period._convention import BOGUS_START_TIME
from periodbox.period._exceptions import IllegalArgumentError
from periodbox.period.day import current_millis, local_datetime, millis_of

_LEXICAL = re.compile(
    r"^\s*(-?\d{4,})-(\d{2})-(\d{2})"
    r"(?:T(\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?)?"
    r"(Z|[+-]\d{2}:\d{2})?\s*$"
)


@dataclass(frozen=True, slots=True)
class Tstamp:
    """
    An XML-Schema style date or dateTime, as parsed.

    ``month`` is one-based.  Time fields are ``None`` for a plain date and
    ``offset_minutes`` is ``None`` when the lexical form carried no zone, in
    which case the value is read in the convention time zone.

    ``==`` compares the parsed fields, so ``"2007-08-01"`` and
    ``"2007-08-01T00:00:00"`` are *not* ``==`` although they denote the same
    instant; use :func:`equal` to compare instants.
    """

    year: int
    month: int
    day: int
    hour: Optional[int] = None
    minute: Optional[int] = None
    second: Optional[int] = None
    millisecond: Optional[int] = None
    offset_minutes: Optional[int] = None

    @property
    def has_time(self) -> bool:
        return self.hour is not None

    @property
    def tzinfo(self) -> tzinfo:
        if self.offset_minutes is None:
            return DEFAULT_CONVENTION.timezone
        return timezone(timedelta(minutes=self.offset_minutes))

    def wall_clock(self) -> datetime:
        """Naive datetime of the parsed fields."""
        return datetime(
            self.year, self.month, self.day,
            self.hour or 0, self.minute or 0, self.second or 0,
            (self.millisecond or 0) * 1000,
        )

    def to_datetime(self) -> datetime:
        return self.wall_clock().replace(tzinfo=self.tzinfo)

    @property
    def millis(self) -> int:
        return millis_of(self.to_datetime())

    def to_day(self) -> Day:
        return Day.from_timestamp(self.millis)

    def isoformat(self) -> str:
        text = f"{self.year:04d}-{self.month:02d}-{self.day:02d}"
        if self.has_time:
            text += f"T{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
            if self.millisecond is not None:
                text += f".{self.millisecond:03d}"
        if self.offset_minutes is not None:
            if self.offset_minutes == 0:
                text += "Z"
            else:
                sign = "+" if self.offset_minutes > 0 else "-"
                hours, minutes = divmod(abs(self.offset_minutes), 60)
                text += f"{sign}{hours:02d}:{minutes:02d}"
        return text

    def __str__(self) -> str:
        return self.isoformat()


TstampLike = Union[Tstamp, str]


# ── construction ─────────────────────────────────────────────────────────────

def _offset_minutes(zone: Optional[str]) -> Optional[int]:
    if zone is None:
        return None
    if zone == "Z":
        return 0
    sign = -1 if zone[0] == "-" else 1
    hours, minutes = zone[1:].split(":")
    return sign * (int(hours) * 60 + int(minutes))


def parse(text: str) -> Tstamp:
    """
    Parse ``yyyy-MM-dd`` or ``yyyy-MM-ddTHH:mm:ss[.SSS]``, each with an
    optional ``Z`` / ``±HH:MM`` zone.  Raises ParseError.
    """
    match = _LEXICAL.match(text) if isinstance(text, str) else None
    if match is None:
        raise ParseError(text, "not an ISO-8601 date or dateTime")

    year, month, day, hour, minute, second, fraction, zone = match.groups()
    millisecond = int((fraction + "00")[:3]) if fraction is not None else None
    tstamp = Tstamp(
        year=int(year),
        month=int(month),
        day=int(day),
        hour=int(hour) if hour is not None else None,
        minute=int(minute) if minute is not None else None,
        second=int(second) if second is not None else None,
        millisecond=millisecond,
        offset_minutes=_offset_minutes(zone),
    )
    try:
        tstamp.wall_clock()
    except ValueError as exc:
        raise ParseError(text, str(exc)) from None
    if tstamp.offset_minutes is not None and abs(tstamp.offset_minutes) > 14 * 60:
        raise ParseError(text, "zone offset out of range")
    return tstamp


def try_parse(text: str) -> Result[Tstamp]:
    return Result.capture(lambda: parse(text))


def is_valid(text: str) -> bool:
    return try_parse(text).ok


def from_millis(timestamp: int) -> Tstamp:
    """The instant ``timestamp`` (ms) expressed in the convention zone."""
    moment = local_datetime(int(timestamp))
    offset = moment.utcoffset() or timedelta(0)
    return Tstamp(
        year=moment.year,
        month=moment.month,
        day=moment.day,
        hour=moment.hour,
        minute=moment.minute,
        second=moment.second,
        millisecond=moment.microsecond // 1000,
        offset_minutes=offset // timedelta(minutes=1),
    )


def now() -> Tstamp:
    return from_millis(current_millis())


def from_day(day: Day) -> Tstamp:
    """Midnight at the start of ``day``."""
    return from_millis(day.first_tick_of_the_day)


def to_day(tstamp: Tstamp) -> Day:
    return tstamp.to_day()


def to_millis(tstamp: Tstamp) -> int:
    return tstamp.millis


def default_project_start_time() -> Tstamp:
    return Tstamp(1000, 1, 1, 0, 0, 0, 0)


def default_project_end_time() -> Tstamp:
    return Tstamp(3000, 1, 1, 23, 59, 59, 999)


def _coerce(value: TstampLike) -> Tstamp:
    if isinstance(value, Tstamp):
        return value
    try:
        return parse(value)
    except ParseError as exc:
        raise IllegalArgumentError(f"Illegal timestring {value!r}") from exc


# ── arithmetic ───────────────────────────────────────────────────────────────

def _shift(tstamp: Tstamp, delta: timedelta, keep_date_only: bool) -> Tstamp:
    try:
        wall = tstamp.wall_clock() + delta
    except OverflowError:
        raise IllegalArgumentError(
            f"{tstamp} shifted by {delta} is outside the supported years"
        ) from None
    if keep_date_only and not tstamp.has_time:
        return replace(tstamp, year=wall.year, month=wall.month, day=wall.day)
    millisecond = tstamp.millisecond
    if millisecond is not None or wall.microsecond:
        millisecond = wall.microsecond // 1000
    return replace(
        tstamp,
        year=wall.year,
        month=wall.month,
        day=wall.day,
        hour=wall.hour,
        minute=wall.minute,
        second=wall.second,
        millisecond=millisecond,
    )


def increment_days(tstamp: Tstamp, days: int) -> Tstamp:
    return _shift(tstamp, timedelta(days=days), keep_date_only=True)


def increment_hours(tstamp: Tstamp, hours: int) -> Tstamp:
    return _shift(tstamp, timedelta(hours=hours), keep_date_only=False)


def increment_minutes(tstamp: Tstamp, minutes: int) -> Tstamp:
    return _shift(tstamp, timedelta(minutes=minutes), keep_date_only=False)


def increment_seconds(tstamp: Tstamp, seconds: int) -> Tstamp:
    return _shift(tstamp, timedelta(seconds=seconds), keep_date_only=False)


def diff_millis(start: TstampLike, end: TstampLike) -> int:
    """Milliseconds from ``start`` to ``end`` (negative if end is earlier)."""
    return _coerce(end).millis - _coerce(start).millis


def days_between(start: TstampLike, end: TstampLike) -> int:
    """Whole days from ``start`` to ``end``, rounded to the nearest day."""
    return round(diff_millis(start, end) / MILLIS_PER_DAY)


# ── comparison ───────────────────────────────────────────────────────────────

def greater_than(time1: TstampLike, time2: TstampLike) -> bool:
    return _coerce(time1).millis > _coerce(time2).millis


def less_than(time1: TstampLike, time2: TstampLike) -> bool:
    return _coerce(time1).millis < _coerce(time2).millis


def equal(time1: TstampLike, time2: TstampLike) -> bool:
    """Same instant, however each value was written."""
    return _coerce(time1).millis == _coerce(time2).millis


def in_between(start: TstampLike, tstamp: TstampLike, end: TstampLike) -> bool:
    """True iff ``start <= tstamp <= end``."""
    t = _coerce(tstamp).millis
    return _coerce(start).millis <= t <= _coerce(end).millis


def sort(tstamps: Iterable[Tstamp]) -> list[Tstamp]:
    """New list, ascending by instant; ties keep their input order."""
    items = list(tstamps)
    keys = np.fromiter((t.millis for t in items), dtype=np.int64, count=len(items))
    return [items[i] for i in np.argsort(keys, kind="stable")]


def is_bogus_start_time(tstamp: Tstamp) -> bool:
    return less_than(tstamp, parse(BOGUS_START_TIME))


def is_today_or_later(tstamp: Tstamp) -> bool:
    return tstamp.to_day() >= Day.now()


def is_yesterday_or_later(tstamp: Tstamp) -> bool:
    return tstamp.to_day() >= Day.now().dec()
