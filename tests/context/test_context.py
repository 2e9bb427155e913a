"""
tests/context/test_context.py

Covers:
  - PeriodContext.create wiring (shared DayCache, injected diagnostics)
  - default_context built once, also under concurrent first access
  - reset_default_context
  - loguru diagnostics, disabled until the application enables periodbox
"""

import threading
from datetime import datetime

import pytest
from loguru import logger

from periodbox.context import (
    PeriodContext,
    default_context,
    loguru_diagnostics,
    reset_default_context,
)
from periodbox.interval import IllegalArgumentError
from periodbox.period import DEFAULT_CONVENTION
from periodbox.period.day import millis_of


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture(autouse=True)
def fresh_default():
    reset_default_context()
    yield
    reset_default_context()


@pytest.fixture
def captured():
    """Collect loguru messages with ``periodbox`` enabled for the test."""
    records = []
    sink_id = logger.add(lambda message: records.append(message.record), level="WARNING")
    logger.enable("periodbox")
    yield records
    logger.disable("periodbox")
    logger.remove(sink_id)


# ── Construction ──────────────────────────────────────────────────────────────

class TestCreate:

    def test_utility_shares_the_cache(self):
        startup = millis_of(datetime(2024, 7, 1, 12, tzinfo=DEFAULT_CONVENTION.timezone))
        ctx = PeriodContext.create(startup_ms=startup)
        assert ctx.day_cache.startup == startup
        assert ctx.intervals.day_cache is ctx.day_cache

    def test_injected_diagnostics(self):
        messages = []
        ctx = PeriodContext.create(diagnostics=messages.append)
        with pytest.raises(IllegalArgumentError):
            ctx.intervals.get_week("not a week")
        assert len(messages) == 1

    def test_frozen(self):
        ctx = PeriodContext.create()
        with pytest.raises(AttributeError):
            ctx.day_cache = None


# ── Default context ───────────────────────────────────────────────────────────

class TestDefaultContext:

    def test_same_instance(self):
        assert default_context() is default_context()

    def test_concurrent_first_access(self):
        barrier = threading.Barrier(8)
        seen = []

        def worker():
            barrier.wait()
            seen.append(default_context())

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(seen) == 8
        assert all(ctx is seen[0] for ctx in seen)

    def test_reset_rebuilds(self):
        first = default_context()
        reset_default_context()
        assert default_context() is not first


# ── Diagnostics ───────────────────────────────────────────────────────────────

class TestDiagnostics:

    def test_bad_label_is_logged_when_enabled(self, captured):
        with pytest.raises(IllegalArgumentError):
            default_context().intervals.get_week("week 52")
        assert len(captured) == 1
        assert captured[0]["extra"]["component"] == "periodbox"
        assert captured[0]["level"].name == "WARNING"
        assert "week 52" in captured[0]["message"]

    def test_silent_while_disabled(self):
        records = []
        sink_id = logger.add(lambda message: records.append(message), level="WARNING")
        try:
            with pytest.raises(IllegalArgumentError):
                default_context().intervals.get_week("week 52")
        finally:
            logger.remove(sink_id)
        assert records == []

    def test_custom_component(self, captured):
        loguru_diagnostics("calendar-ui")("hello")
        # Called from the test module, which is outside the periodbox namespace.
        assert captured[-1]["extra"]["component"] == "calendar-ui"
