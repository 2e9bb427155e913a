from __future__ import annotations

import threading
from typing import Callable, Optional

from periodbox.period import (
    DAY_FORMAT,
    DEFAULT_CONVENTION,
    Day,
    DayCache,
    Month,
    ParseError,
    Week,
)
from periodbox.period._convention import WEEK_LOOKBEHIND, YEAR_OPTIONS_RANGE

from periodbox.period._exceptions import IllegalArgumentError

Diagnostics = Callable[[str], None]

# Length of a "dd-Mon-yyyy" prefix in a week label.
_DAY_LABEL_LENGTH = 11


def _silent(message: str) -> None:
    pass


def parse_day_tokens(year: str, month: str, day: str) -> Day:
    """Day from numeric tokens; ``month`` is zero-based and overflow rolls over."""
    try:
        return Day.from_ymd(int(year), int(month), int(day))
    except (TypeError, ValueError):
        raise ParseError(f"{year}-{month}-{day}", "expected numeric year/month/day") from None


def parse_month_tokens(year: str, month: str) -> Month:
    """Month from numeric tokens; ``month`` is zero-based."""
    try:
        return Month(int(year), int(month))
    except (TypeError, ValueError):
        raise ParseError(f"{year}-{month}", "expected numeric year/month") from None


def parse_week_label(label: str) -> Week:
    """
    Week from a label such as ``"28-Dec-2003 to 03-Jan-2004"``.

    Only the leading ``dd-Mon-yyyy`` is read, so a bare day string works too.
    Raises IllegalArgumentError on anything else.
    """
    try:
        return Week(Day.from_string(label[:_DAY_LABEL_LENGTH], DAY_FORMAT))
    except (ParseError, TypeError) as exc:
        raise IllegalArgumentError(
            f"Week string {label!r} is not well formatted: {exc}"
        ) from exc


class IntervalUtility:
    """
    Option tables and label parsing for period pickers.

    Year, month and day options are fixed at construction.  The week
    catalogue covers the last ``WEEK_LOOKBEHIND`` weeks up to the current
    one, most recent first, and is rebuilt when today moves past it.
    """

    def __init__(
        self,
        day_cache: Optional[DayCache] = None,
        diagnostics: Optional[Diagnostics] = None,
        today: Optional[Callable[[], Day]] = None,
    ) -> None:
        self._day_cache = day_cache
        self._diagnostics: Diagnostics = diagnostics or _silent
        if today is None:
            today = day_cache.today if day_cache is not None else Day.now
        self._today: Callable[[], Day] = today

        first_year, stop_year = YEAR_OPTIONS_RANGE
        self._year_options: dict[str, str] = {
            str(y): str(y) for y in range(first_year, stop_year)
        }
        self._month_options: dict[str, str] = {
            name: f"{i:02d}" for i, name in enumerate(DEFAULT_CONVENTION.month_names)
        }
        self._day_options: dict[str, str] = {
            f"{d:02d}": f"{d:02d}" for d in range(1, 32)
        }

        self._lock = threading.Lock()
        self._newest_week: Week = Week(self._today())
        self._week_options: dict[str, str] = {}
        self._fill_week_options(self._newest_week)

    # ── week catalogue ───────────────────────────────────────────────────

    def _fill_week_options(self, newest: Week) -> None:
        week = Week(newest.first_day.increment(-WEEK_LOOKBEHIND * 7))
        weeks: list[Week] = []
        while week <= newest:
            weeks.append(week)
            week = week.inc()
        self._week_options = {
            w.week_representation: w.week_representation for w in reversed(weeks)
        }
        self._newest_week = newest

    def _check_week_updates(self) -> None:
        today = self._today()
        if today <= self._newest_week.last_day:
            return
        with self._lock:
            if today > self._newest_week.last_day:
                self._fill_week_options(Week(today))

    def week_options(self) -> dict[str, str]:
        """Week labels, most recent first."""
        self._check_week_updates()
        return dict(self._week_options)

    # ── parsing ──────────────────────────────────────────────────────────

    def get_week(self, label: str) -> Week:
        try:
            return parse_week_label(label)
        except IllegalArgumentError as exc:
            self._diagnostics(str(exc))
            raise

    def get_day(self, year: str, month: str, day: str) -> Day:
        try:
            return parse_day_tokens(year, month, day)
        except ParseError as exc:
            self._diagnostics(str(exc))
            raise

    # ── fixed options ────────────────────────────────────────────────────

    @property
    def year_options(self) -> dict[str, str]:
        return dict(self._year_options)

    @property
    def month_options(self) -> dict[str, str]:
        return dict(self._month_options)

    @property
    def day_options(self) -> dict[str, str]:
        return dict(self._day_options)

    # ── today ────────────────────────────────────────────────────────────

    @property
    def current_year(self) -> str:
        return self._today().year_string

    @property
    def current_month(self) -> str:
        """One-based two-digit month, as in ``Day.month_string``."""
        return self._today().month_string

    @property
    def current_day(self) -> str:
        return self._today().day_string

    @property
    def current_week(self) -> str:
        self._check_week_updates()
        return self._newest_week.week_representation

    @property
    def day_cache(self) -> Optional[DayCache]:
        return self._day_cache

    def __repr__(self) -> str:
        return (
            f"IntervalUtility(weeks={len(self._week_options)}, "
            f"newest={self._newest_week.week_representation!r}, "
            f"cached={self._day_cache is not None})"
        )
