# src/periodbox/tstamp/__init__.py
"""
periodbox.tstamp
~~~~~~~~~~~~~~~~

XML-Schema style timestamps: ``yyyy-MM-dd`` or ``yyyy-MM-ddTHH:mm:ss[.SSS]``
with an optional zone.  Values without a zone are read in the convention time
zone.  Comparison helpers accept either a Tstamp or its lexical form.

Basic usage::

    from periodbox import tstamp

    t = tstamp.parse("2007-08-01T10:30:00")
    tstamp.increment_days(t, 1)             # 2007-08-02T10:30:00
    tstamp.equal("2007-08-01", "2007-08-01T00:00:00")     # → True
    tstamp.parse("2007-08-01") == tstamp.parse("2007-08-01T00:00:00")  # → False
    tstamp.in_between("2007-01-01", t, "2007-12-31")      # → True

Public API
----------
Tstamp                      Parsed date / dateTime value (frozen).
TstampSet                   Issues unique millisecond keys.
parse / try_parse           Lexical form → Tstamp (raising / Result).
is_valid                    True if the text parses.
from_millis / to_millis     Epoch milliseconds ↔ Tstamp.
from_day / to_day           Day ↔ Tstamp (midnight).
now                         Current instant in the convention zone.
increment_days / _hours / _minutes / _seconds
diff_millis / days_between  Distances between instants.
greater_than / less_than / equal / in_between / sort
is_bogus_start_time         Before 2000-01-01.
is_today_or_later / is_yesterday_or_later
default_project_start_time / default_project_end_time
"""

from __future__ import annotations

from periodbox.tstamp.tstamp import (
    Tstamp,
    TstampLike,
    days_between,
    default_project_end_time,
    default_project_start_time,
    diff_millis,
    equal,
    from_day,
    from_millis,
    greater_than,
    in_between,
    increment_days,
    increment_hours,
    increment_minutes,
    increment_seconds,
    is_bogus_start_time,
    is_today_or_later,
    is_valid,
    is_yesterday_or_later,
    less_than,
    now,
    parse,
    sort,
    to_day,
    to_millis,
    try_parse,
)
from periodbox.tstamp.tstamp_set import TstampSet

__all__ = [
    "Tstamp",
    "TstampLike",
    "TstampSet",
    "days_between",
    "default_project_end_time",
    "default_project_start_time",
    "diff_millis",
    "equal",
    "from_day",
    "from_millis",
    "greater_than",
    "in_between",
    "increment_days",
    "increment_hours",
    "increment_minutes",
    "increment_seconds",
    "is_bogus_start_time",
    "is_today_or_later",
    "is_valid",
    "is_yesterday_or_later",
    "less_than",
    "now",
    "parse",
    "sort",
    "to_day",
    "to_millis",
    "try_parse",
]
