"""
Tests for utils/srs.py — pure Python, no DB, no terminal.
"""
from datetime import date, timedelta

import pytest

from utils.srs import (
    INTERVALS, LONG_INTERVAL, MIN_LEVEL,
    format_interval, interval_for,
    schedule, schedule_both,
)

TODAY = date(2024, 3, 15)


# ── Interval table ────────────────────────────────────────────

class TestIntervalTable:
    @pytest.mark.parametrize('level,days', [(1, 1), (2, 4), (3, 10), (4, 25), (5, 50)])
    def test_known_levels(self, level, days):
        assert interval_for(level) == days

    def test_past_table_is_long_interval(self):
        assert interval_for(6) == LONG_INTERVAL
        assert interval_for(42) == 1000

    def test_out_of_range_low_is_long_interval(self):
        assert interval_for(0) == LONG_INTERVAL

    def test_monotonic_for_table_levels(self):
        days = [interval_for(level) for level in range(1, 6)]
        assert days == sorted(days)

    def test_table_covers_one_to_five(self):
        assert sorted(INTERVALS) == [1, 2, 3, 4, 5]


# ── Correct answers ───────────────────────────────────────────

class TestCorrect:
    def test_level_1_goes_to_2_in_4_days(self):
        r = schedule(1, True, TODAY)
        assert r['level'] == 2
        assert r['next'] == TODAY + timedelta(days=4)
        assert r['scheduled_days'] == 4

    def test_level_4_goes_to_5_in_50_days(self):
        r = schedule(4, True, TODAY)
        assert r['level'] == 5
        assert r['next'] == TODAY + timedelta(days=50)

    def test_level_5_graduates_to_long_interval(self):
        r = schedule(5, True, TODAY)
        assert r['level'] == 6
        assert r['scheduled_days'] == LONG_INTERVAL

    def test_no_upper_clamp(self):
        r = schedule(99, True, TODAY)
        assert r['level'] == 100
        assert r['next'] == TODAY + timedelta(days=1000)


# ── Incorrect answers ─────────────────────────────────────────

class TestIncorrect:
    def test_level_3_drops_to_2_in_4_days(self):
        r = schedule(3, False, TODAY)
        assert r['level'] == 2
        assert r['next'] == TODAY + timedelta(days=4)

    def test_level_1_stays_at_1(self):
        r = schedule(1, False, TODAY)
        assert r['level'] == 1
        assert r['next'] == TODAY + timedelta(days=1)

    def test_level_7_drops_to_long_interval_level(self):
        r = schedule(7, False, TODAY)
        assert r['level'] == 6
        assert r['scheduled_days'] == LONG_INTERVAL

    @pytest.mark.parametrize('level', range(1, 12))
    def test_never_below_min_level(self, level):
        assert schedule(level, False, TODAY)['level'] >= MIN_LEVEL


class TestScheduleBoth:
    def test_keys_are_outcomes(self):
        results = schedule_both(2, TODAY)
        assert set(results) == {True, False}

    def test_matches_schedule(self):
        results = schedule_both(3, TODAY)
        assert results[True] == schedule(3, True, TODAY)
        assert results[False] == schedule(3, False, TODAY)

    def test_correct_never_sooner_than_incorrect(self):
        for level in range(1, 8):
            results = schedule_both(level, TODAY)
            assert results[True]['next'] >= results[False]['next']

    def test_pure(self):
        assert schedule(2, True, TODAY) == schedule(2, True, TODAY)


# ── Labels ────────────────────────────────────────────────────

class TestFormatInterval:
    def test_days(self):
        assert format_interval(1) == '1d'
        assert format_interval(25) == '25d'

    def test_months(self):
        assert format_interval(50) == '2mo'

    def test_years(self):
        assert format_interval(1000) == '2.7y'
