"""
tests/interval/test_utility.py

Covers:
  - Fixed year / month / day option tables
  - Week catalogue: 53 labels, newest first, rebuilt when today moves on
  - current_* accessors against an injected clock
  - get_week / get_day parsing and the diagnostics sink
  - Token and label helpers
"""

import threading

import pytest

from periodbox.interval import (
    IllegalArgumentError,
    IntervalUtility,
    parse_day_tokens,
    parse_month_tokens,
    parse_week_label,
)
from periodbox.period import Day, DayCache, Month, ParseError, Week


# ── Fixtures ──────────────────────────────────────────────────────────────────

class Clock:
    """Settable ``today`` source."""

    def __init__(self, day):
        self.day = day

    def __call__(self):
        return self.day


@pytest.fixture
def clock():
    return Clock(Day.from_ymd(2004, 0, 1))


@pytest.fixture
def messages():
    return []


@pytest.fixture
def utility(clock, messages):
    return IntervalUtility(diagnostics=messages.append, today=clock)


# ── Option tables ─────────────────────────────────────────────────────────────

class TestOptions:

    def test_year_options(self, utility):
        years = utility.year_options
        assert list(years) == [str(y) for y in range(2000, 2020)]
        assert years["2004"] == "2004"

    def test_month_options_are_zero_based(self, utility):
        months = utility.month_options
        assert len(months) == 12
        assert months["January"] == "00"
        assert months["December"] == "11"

    def test_day_options(self, utility):
        days = utility.day_options
        assert list(days) == [f"{d:02d}" for d in range(1, 32)]

    def test_options_are_copies(self, utility):
        utility.year_options.clear()
        assert len(utility.year_options) == 20


# ── Week catalogue ────────────────────────────────────────────────────────────

class TestWeekCatalogue:

    def test_53_weeks_newest_first(self, utility):
        labels = list(utility.week_options())
        assert len(labels) == 53
        assert labels[0] == "28-Dec-2003 to 03-Jan-2004"
        assert labels[-1] == Week(Day.from_ymd(2004, 0, 1).increment(-52 * 7)).week_representation
        weeks = [parse_week_label(label) for label in labels]
        assert weeks == sorted(weeks, reverse=True)

    def test_labels_map_to_themselves(self, utility):
        assert all(k == v for k, v in utility.week_options().items())

    def test_current_week_is_newest(self, utility):
        assert utility.current_week == "28-Dec-2003 to 03-Jan-2004"

    def test_same_week_does_not_rebuild(self, utility, clock):
        before = utility.week_options()
        clock.day = Day.from_ymd(2004, 0, 3)
        assert utility.week_options() == before

    def test_rebuilds_when_today_moves_past_newest_week(self, utility, clock):
        clock.day = Day.from_ymd(2004, 0, 20)
        labels = list(utility.week_options())
        assert len(labels) == 53
        assert labels[0] == "18-Jan-2004 to 24-Jan-2004"
        assert utility.current_week == labels[0]

    def test_concurrent_rebuild(self, utility, clock):
        clock.day = Day.from_ymd(2004, 5, 1)
        barrier = threading.Barrier(6)
        results = []

        def worker():
            barrier.wait()
            results.append(list(utility.week_options()))

        threads = [threading.Thread(target=worker) for _ in range(6)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert all(r == results[0] for r in results)
        assert results[0][0] == Week(clock.day).week_representation


# ── Today ─────────────────────────────────────────────────────────────────────

class TestToday:

    def test_current_fields(self, utility):
        assert utility.current_year == "2004"
        assert utility.current_month == "01"
        assert utility.current_day == "01"

    def test_today_from_day_cache(self):
        cache = DayCache()
        utility = IntervalUtility(day_cache=cache)
        assert utility.day_cache is cache
        assert parse_week_label(utility.current_week).contains(cache.today()) or \
            parse_week_label(utility.current_week).contains(cache.today().dec())

    def test_repr(self, utility):
        assert "weeks=53" in repr(utility)


# ── Parsing ───────────────────────────────────────────────────────────────────

class TestParsing:

    def test_get_week(self, utility):
        week = utility.get_week("28-Dec-2003 to 03-Jan-2004")
        assert week == Week(Day.from_ymd(2004, 0, 1))

    def test_get_week_bad_label_reports_and_raises(self, utility, messages):
        with pytest.raises(IllegalArgumentError):
            utility.get_week("week 52")
        assert len(messages) == 1
        assert "week 52" in messages[0]

    def test_get_day(self, utility):
        assert utility.get_day("2003", "10", "03") == Day.from_ymd(2003, 10, 3)

    def test_get_day_rolls_over(self, utility, messages):
        assert utility.get_day("2003", "1", "30") == Day.from_ymd(2003, 2, 2)
        assert messages == []

    def test_get_day_non_numeric(self, utility, messages):
        with pytest.raises(ParseError):
            utility.get_day("2003", "Nov", "03")
        assert len(messages) == 1

    def test_default_diagnostics_are_silent(self, clock):
        utility = IntervalUtility(today=clock)
        with pytest.raises(IllegalArgumentError):
            utility.get_week("")


# ── Helpers ───────────────────────────────────────────────────────────────────

class TestHelpers:

    def test_parse_day_tokens(self):
        assert parse_day_tokens("2004", "0", "1") == Day.from_ymd(2004, 0, 1)

    def test_parse_month_tokens(self):
        assert parse_month_tokens("2004", "12") == Month(2005, 0)

    def test_parse_week_label_uses_leading_day(self):
        assert parse_week_label("01-Jan-2004 and then some") == Week(Day.from_ymd(2004, 0, 1))

    @pytest.mark.parametrize("label", ["", "2004-01-01", "01-Foo-2004 to 07-Foo-2004"])
    def test_parse_week_label_rejects(self, label):
        with pytest.raises(IllegalArgumentError):
            parse_week_label(label)
