# src/periodbox/interval/__init__.py
"""
periodbox.interval
~~~~~~~~~~~~~~~~~~

Inclusive, validated ranges of periods.  An Interval is one of DayInterval,
WeekInterval or MonthInterval (tagged by ``kind``); iterating it yields every
period from start to end, and every iteration starts afresh.

Basic usage::

    from periodbox.interval import DayInterval, MonthInterval

    days = DayInterval.from_strings("2003", "10", "03", "2003", "10", "10")
    [str(d) for d in days]      # 03-Nov-2003 … 10-Nov-2003, eight days
    str(MonthInterval.from_strings("2003", "6", "2004", "0"))
    # → 'Month Interval : Jul-2003 ~ Jan-2004'

Non-raising construction::

    result = DayInterval.attempt(later_day, earlier_day)
    result.ok                   # → False
    result.error                # IllegalIntervalError

Public API
----------
Interval                   Abstract base; ``kind`` is an IntervalKind.
DayInterval                Interval of Days.
WeekInterval               Interval of Weeks (parsed from week labels).
MonthInterval              Interval of Months.
IntervalKind               DAY / WEEK / MONTH tag.
PeriodCursor               Restartable forward cursor returned by ``iter()``.
IntervalUtility            Option tables, week catalogue and label parsing.
IllegalIntervalError       start > end at construction.
NoMoreElementsError        Cursor exhausted (a StopIteration).
UnsupportedOperationError  Cursor removal requested.
IllegalArgumentError       Malformed week label.
"""

from __future__ import annotations

from periodbox.interval._exceptions import (
    IllegalArgumentError,
    IllegalIntervalError,
    NoMoreElementsError,
    UnsupportedOperationError,
)
from periodbox.interval.interval import (
    DayInterval,
    Interval,
    IntervalKind,
    MonthInterval,
    PeriodCursor,
    WeekInterval,
)
from periodbox.interval.utility import (
    IntervalUtility,
    parse_day_tokens,
    parse_month_tokens,
    parse_week_label,
)

__all__ = [
    "DayInterval",
    "IllegalArgumentError",
    "IllegalIntervalError",
    "Interval",
    "IntervalKind",
    "IntervalUtility",
    "MonthInterval",
    "NoMoreElementsError",
    "PeriodCursor",
    "UnsupportedOperationError",
    "WeekInterval",
    "parse_day_tokens",
    "parse_month_tokens",
    "parse_week_label",
]
