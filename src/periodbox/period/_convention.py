from __future__ import annotations

import calendar
from dataclasses import dataclass
from zoneinfo import ZoneInfo


MILLIS_PER_DAY: int = 1000 * 60 * 60 * 24

# DayCache window: 364 days either side of the startup midnight, 730 slots.
CACHE_HALF_WINDOW_DAYS: int = 364
CACHE_SLOTS: int = 730

# IntervalUtility option ranges.
YEAR_OPTIONS_RANGE: tuple[int, int] = (2000, 2020)
WEEK_LOOKBEHIND: int = 52

# Timestamps earlier than this are treated as garbage start times.
BOGUS_START_TIME: str = "2000-01-01"

MONTH_NAMES: tuple[str, ...] = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

MONTH_ABBREVIATIONS: tuple[str, ...] = tuple(name[:3] for name in MONTH_NAMES)


@dataclass(frozen=True, slots=True)
class Convention:
    """
    Calendar rules every period computation is pinned to.

    There is exactly one convention per process (``DEFAULT_CONVENTION``);
    the class exists so the rules are named in one place rather than read
    from the host machine's locale or time zone.
    """

    timezone: ZoneInfo
    first_weekday: int = calendar.SUNDAY
    month_names: tuple[str, ...] = MONTH_NAMES
    month_abbreviations: tuple[str, ...] = MONTH_ABBREVIATIONS

    def month_index(self, abbreviation: str) -> int:
        """Zero-based month index of a three-letter abbreviation (any case)."""
        wanted = abbreviation.lower()
        for i, abbr in enumerate(self.month_abbreviations):
            if abbr.lower() == wanted:
                return i
        raise KeyError(abbreviation)


DEFAULT_CONVENTION = Convention(timezone=ZoneInfo("America/Los_Angeles"))
