from __future__ import annotations

import threading
from datetime import datetime, timedelta
from typing import Sequence, Union

import numpy as np

from ._convention import (
    CACHE_HALF_WINDOW_DAYS,
    CACHE_SLOTS,
    DEFAULT_CONVENTION,
    MILLIS_PER_DAY,
)
from .day import Day, current_millis, local_datetime, millis_of

TimestampLike = Union[int, Sequence[int], "np.ndarray"]


def _dst_millis(moment: datetime) -> int:
    offset = moment.dst()
    return 0 if offset is None else offset // timedelta(milliseconds=1)


class DayCache:
    """
    Canonical Day instances for a fixed window around the cache's startup.

    The window holds one slot per calendar day, 364 days either side of the
    startup midnight.  A timestamp inside the window always resolves to the
    same Day object; timestamps on or outside the boundaries bypass the
    cache.  Slots are filled lazily, once, and never evicted.
    """

    _SLOTS: int = CACHE_SLOTS

    def __init__(self, startup_ms: int | None = None) -> None:
        if startup_ms is None:
            startup_ms = current_millis()

        self._startup_ms: int = int(startup_ms)
        self._startup: datetime = local_datetime(self._startup_ms)

        midnight = self._startup.replace(hour=0, minute=0, second=0, microsecond=0)
        midnight_ms = millis_of(midnight)
        self._min_boundary: int = midnight_ms - CACHE_HALF_WINDOW_DAYS * MILLIS_PER_DAY
        self._max_boundary: int = midnight_ms + CACHE_HALF_WINDOW_DAYS * MILLIS_PER_DAY
        self._startup_dst: int = _dst_millis(midnight)

        self._slots: np.ndarray = np.full(self._SLOTS, None, dtype=object)
        self._lock = threading.Lock()

    # ── slot arithmetic ──────────────────────────────────────────────────

    def in_window(self, timestamp: int) -> bool:
        return self._min_boundary < timestamp < self._max_boundary

    def _dst_offset(self, timestamp: int) -> int:
        # Correct for a query whose DST status differs from the startup instant.
        query_dst = _dst_millis(local_datetime(timestamp))
        if self._startup_dst and not query_dst:
            return -self._startup_dst
        if query_dst and not self._startup_dst:
            return query_dst
        return 0

    def slot_index(self, timestamp: int) -> int:
        offset = self._dst_offset(timestamp)
        return (timestamp + offset - self._min_boundary) // MILLIS_PER_DAY

    # ── lookups ──────────────────────────────────────────────────────────

    def get(self, timestamp: int) -> Day:
        timestamp = int(timestamp)
        if not self.in_window(timestamp):
            return Day.from_timestamp(timestamp)

        index = self.slot_index(timestamp)
        if not 0 <= index < self._SLOTS:
            # DST correction pushed the instant past the edge of the window.
            return Day.from_timestamp(timestamp)
        cached = self._slots[index]
        if cached is not None:
            return cached

        fresh = Day.from_timestamp(timestamp)
        with self._lock:
            if self._slots[index] is None:
                self._slots[index] = fresh
            return self._slots[index]

    def get_many(self, timestamps: TimestampLike) -> list[Day]:
        """Vectorised ``get``: one Day per element of ``timestamps``."""
        ts = np.atleast_1d(np.asarray(timestamps, dtype=np.int64)).ravel()
        return [self.get(int(t)) for t in ts]

    def today(self) -> Day:
        return self.get(current_millis())

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def startup(self) -> int:
        return self._startup_ms

    @property
    def min_boundary(self) -> int:
        return self._min_boundary

    @property
    def max_boundary(self) -> int:
        return self._max_boundary

    @property
    def size(self) -> int:
        return self._SLOTS

    @property
    def filled(self) -> int:
        return int(np.count_nonzero(np.not_equal(self._slots, None)))

    def __repr__(self) -> str:
        tz = DEFAULT_CONVENTION.timezone
        return (
            f"DayCache(startup={self._startup.isoformat()}, "
            f"window={Day.from_timestamp(self._min_boundary)}"
            f"..{Day.from_timestamp(self._max_boundary)}, "
            f"filled={self.filled}/{self._SLOTS}, "
            f"tz={tz.key!r})"
        )
