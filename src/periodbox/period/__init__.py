# src/periodbox/period/__init__.py
"""
periodbox.period
~~~~~~~~~~~~~~~~

Immutable calendar periods.  A Day is a calendar date in the fixed
convention time zone (America/Los_Angeles, weeks starting on Sunday); Week
and Month are built from Days.  All three share the TimePeriod capability:
ordering, single-step ``inc()`` / ``dec()`` and ``first_day``.

Basic usage::

    from periodbox.period import Day, Week, Month

    day  = Day.from_ymd(2004, 0, 1)          # 01-Jan-2004, month is zero-based
    week = Week(day)                         # 28-Dec-2003 to 03-Jan-2004
    feb  = Month(2004, 1)                    # Feb-2004, 29 days
    Day.days_between(day, feb.last_day)      # → 59

Canonical instances::

    from periodbox.period import DayCache

    cache = DayCache()
    cache.get(ts1) is cache.get(ts2)         # same calendar day, in window

Public API
----------
Day                   Calendar day value type.
DayCache              Canonicalising Day lookup over a two-year window.
Week                  Sunday-anchored seven-day period.
Month                 Calendar month period.
TimePeriod            Abstract base of Day, Week and Month.
Convention            The fixed calendar rules; DEFAULT_CONVENTION is the instance.
Result                Success-or-error outcome used by the ``try_*`` / ``attempt`` APIs.
CalendarError         Base exception for all periodbox errors.
ParseError            Malformed day or timestamp string.
IllegalArgumentError  Argument malformed beyond interpretation (e.g. a week label).
"""

from __future__ import annotations

from periodbox.period._convention import (
    DEFAULT_CONVENTION,
    MILLIS_PER_DAY,
    Convention,
)
from periodbox.period._exceptions import CalendarError, IllegalArgumentError, ParseError
from periodbox.period._result import Result
from periodbox.period.base import TimePeriod
from periodbox.period.cache import DayCache
from periodbox.period.day import DAY_FORMAT, SIMPLE_DAY_FORMAT, Day
from periodbox.period.month import Month
from periodbox.period.week import Week

__all__ = [
    "CalendarError",
    "Convention",
    "DAY_FORMAT",
    "DEFAULT_CONVENTION",
    "Day",
    "DayCache",
    "IllegalArgumentError",
    "MILLIS_PER_DAY",
    "Month",
    "ParseError",
    "Result",
    "SIMPLE_DAY_FORMAT",
    "TimePeriod",
    "Week",
]
