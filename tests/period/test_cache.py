"""
tests/period/test_cache.py

Covers:
  - Window boundaries around the startup midnight
  - get() agrees with Day.from_timestamp inside and outside the window
  - Canonical instances for the same calendar day (in window only)
  - DST-spanning lookups from a summer and a winter startup
  - Startup on a spring-forward or fall-back day
  - get_many over NumPy arrays
  - Concurrent first access fills each slot once
"""

import threading
from datetime import datetime

import numpy as np
import pytest

from periodbox.period import DEFAULT_CONVENTION, MILLIS_PER_DAY, Day, DayCache
from periodbox.period.day import millis_of

LA = DEFAULT_CONVENTION.timezone
HOUR = 60 * 60 * 1000


def la_millis(*args):
    return millis_of(datetime(*args, tzinfo=LA))


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def summer_cache():
    """Started at noon on a daylight-saving day."""
    return DayCache(la_millis(2024, 7, 1, 12))


@pytest.fixture
def winter_cache():
    """Started at noon on a standard-time day."""
    return DayCache(la_millis(2024, 1, 15, 12))


# ── Window ────────────────────────────────────────────────────────────────────

class TestWindow:

    def test_size(self, summer_cache):
        assert summer_cache.size == 730
        assert summer_cache.filled == 0

    def test_boundaries_are_364_days_from_startup_midnight(self, summer_cache):
        midnight = la_millis(2024, 7, 1)
        assert summer_cache.min_boundary == midnight - 364 * MILLIS_PER_DAY
        assert summer_cache.max_boundary == midnight + 364 * MILLIS_PER_DAY
        assert summer_cache.startup == la_millis(2024, 7, 1, 12)

    def test_boundaries_are_exclusive(self, summer_cache):
        assert not summer_cache.in_window(summer_cache.min_boundary)
        assert not summer_cache.in_window(summer_cache.max_boundary)
        assert summer_cache.in_window(summer_cache.min_boundary + 1)
        assert summer_cache.in_window(summer_cache.max_boundary - 1)

    def test_repr(self, summer_cache):
        text = repr(summer_cache)
        assert text.startswith("DayCache(")
        assert "America/Los_Angeles" in text
        assert "filled=0/730" in text


# ── Lookups ───────────────────────────────────────────────────────────────────

class TestLookups:

    @pytest.mark.parametrize("cache_name", ["summer_cache", "winter_cache"])
    def test_agrees_with_from_timestamp_every_five_hours(self, cache_name, request):
        cache = request.getfixturevalue(cache_name)
        start = cache.min_boundary - 3 * MILLIS_PER_DAY
        stop = cache.max_boundary + 3 * MILLIS_PER_DAY
        for ts in range(start, stop, 5 * HOUR):
            assert cache.get(ts) == Day.from_timestamp(ts), ts

    @pytest.mark.parametrize("cache_name", ["summer_cache", "winter_cache"])
    def test_agrees_around_dst_transitions(self, cache_name, request):
        cache = request.getfixturevalue(cache_name)
        for transition in (la_millis(2023, 11, 5), la_millis(2024, 3, 10),
                           la_millis(2024, 11, 3), la_millis(2025, 3, 9)):
            for minutes in range(-26 * 60, 26 * 60, 30):
                ts = transition + minutes * 60 * 1000
                assert cache.get(ts) == Day.from_timestamp(ts), ts

    def test_random_timestamps(self, winter_cache):
        rng = np.random.default_rng(730)
        span = winter_cache.max_boundary - winter_cache.min_boundary
        for ts in winter_cache.min_boundary + rng.integers(0, span, 500):
            assert winter_cache.get(int(ts)) == Day.from_timestamp(int(ts))

    def test_same_day_is_same_instance(self, summer_cache):
        morning = summer_cache.get(la_millis(2024, 8, 1, 0, 0, 1))
        evening = summer_cache.get(la_millis(2024, 8, 1, 23, 59, 59))
        assert morning is evening
        assert summer_cache.filled == 1

    def test_outside_window_is_not_cached(self, summer_cache):
        ts = la_millis(2020, 1, 1, 12)
        first = summer_cache.get(ts)
        second = summer_cache.get(ts)
        assert first == second
        assert first is not second
        assert summer_cache.filled == 0

    def test_get_many(self, summer_cache):
        stamps = np.array([la_millis(2024, 7, 1, h) for h in (1, 12, 23)]
                          + [la_millis(2024, 7, 2, 1)], dtype=np.int64)
        days = summer_cache.get_many(stamps)
        assert [str(d) for d in days] == ["01-Jul-2024"] * 3 + ["02-Jul-2024"]
        assert days[0] is days[1] is days[2]

    def test_get_many_scalar(self, summer_cache):
        days = summer_cache.get_many(la_millis(2024, 7, 4, 9))
        assert len(days) == 1
        assert str(days[0]) == "04-Jul-2024"

    def test_today(self):
        cache = DayCache()
        assert cache.today() == Day.now() or cache.today() == Day.now().dec()


# ── Concurrency ───────────────────────────────────────────────────────────────

class TestConcurrency:

    def test_concurrent_first_access_yields_one_instance(self, summer_cache):
        ts = la_millis(2024, 9, 9, 9)
        barrier = threading.Barrier(8)
        seen = []

        def worker():
            barrier.wait()
            seen.append(summer_cache.get(ts))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(seen) == 8
        assert all(day is seen[0] for day in seen)
        assert summer_cache.filled == 1


# ── Startup on a DST transition day ───────────────────────────────────────────

class TestTransitionDayStartup:

    @pytest.mark.parametrize("startup", [(2024, 3, 10, 12), (2024, 11, 3, 12)])
    @pytest.mark.parametrize("hour, minute", [(0, 30), (12, 30)])
    def test_following_month_agrees_with_from_timestamp(self, startup, hour, minute):
        cache = DayCache(la_millis(*startup))
        first = Day.from_ymd(startup[0], startup[1] - 1, startup[2])
        for n in range(1, 32):
            day = first.increment(n)
            ts = la_millis(day.year, day.month + 1, day.day, hour, minute)
            assert cache.get(ts) == Day.from_timestamp(ts), str(day)

    @pytest.mark.parametrize("startup, later", [
        ((2024, 3, 10, 12), (2024, 4, 2)),
        ((2024, 11, 3, 12), (2024, 12, 2)),
    ])
    def test_early_lookup_does_not_poison_slot(self, startup, later):
        cache = DayCache(la_millis(*startup))
        early = la_millis(*later, 0, 30)
        noon = early + 12 * HOUR
        assert cache.get(early) is cache.get(noon)
        assert cache.get(noon) == Day.from_timestamp(noon)
