from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Optional

from loguru import logger

from periodbox.interval.utility import Diagnostics, IntervalUtility
from periodbox.period import DayCache

# Library code stays quiet until the application opts in.
logger.disable("periodbox")

_default: Optional["PeriodContext"] = None
_default_lock = threading.Lock()


def loguru_diagnostics(component: str = "periodbox") -> Diagnostics:
    """Diagnostics sink writing warnings through a bound loguru logger."""
    return logger.bind(component=component).warning


@dataclass(frozen=True, slots=True)
class PeriodContext:
    """
    The shared services of one process: a DayCache and the IntervalUtility
    built on top of it.
    """

    day_cache: DayCache
    intervals: IntervalUtility

    @classmethod
    def create(
        cls,
        startup_ms: int | None = None,
        diagnostics: Diagnostics | None = None,
    ) -> PeriodContext:
        day_cache = DayCache(startup_ms)
        intervals = IntervalUtility(
            day_cache=day_cache,
            diagnostics=diagnostics if diagnostics is not None else loguru_diagnostics(),
        )
        logger.debug("Created {!r}", day_cache)
        return cls(day_cache=day_cache, intervals=intervals)


def default_context() -> PeriodContext:
    """Process-wide context, built on first use."""
    global _default
    if _default is None:
        with _default_lock:
            if _default is None:
                _default = PeriodContext.create()
    return _default


def reset_default_context() -> None:
    """Drop the process-wide context; the next ``default_context()`` rebuilds it."""
    global _default
    with _default_lock:
        _default = None
