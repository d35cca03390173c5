"""Tests for streak calculations and calendar windows."""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from habitgrid.services.habits import (
    completed_days,
    completion_ratio,
    compute_streaks,
    days_between,
    month_window,
    shift_month,
)

TODAY = date(2024, 1, 10)


class TestStreaks:
    """Streaks count days on which the goal was reached."""

    def test_no_entries_returns_zero(self, counter_factory):
        assert compute_streaks(counter_factory(), today=TODAY) == (0, 0)

    def test_consecutive_days_ending_today(self, toggle_factory):
        habit = toggle_factory(stats={TODAY - timedelta(days=i): True for i in range(7)})

        assert compute_streaks(habit, today=TODAY) == (7, 7)

    def test_missing_today_breaks_current(self, toggle_factory):
        habit = toggle_factory(stats={TODAY - timedelta(days=i): True for i in range(1, 4)})

        assert compute_streaks(habit, today=TODAY) == (0, 3)

    def test_untoggled_day_breaks_streak(self, toggle_factory):
        habit = toggle_factory(
            stats={TODAY: True, TODAY - timedelta(days=1): False, TODAY - timedelta(days=2): True}
        )

        assert compute_streaks(habit, today=TODAY) == (1, 1)

    def test_counter_below_goal_breaks_streak(self, counter_factory):
        habit = counter_factory(
            goal=2,
            stats={
                date(2024, 1, 1): 2,
                date(2024, 1, 2): 3,
                date(2024, 1, 3): 1,
                date(2024, 1, 4): 2,
            },
        )

        assert compute_streaks(habit, today=date(2024, 1, 4)) == (1, 2)

    def test_multiple_streaks_returns_longest(self, toggle_factory):
        stats = {}
        for start, length in ((date(2024, 1, 1), 3), (date(2024, 1, 10), 7), (date(2024, 1, 20), 4)):
            for i in range(length):
                stats[start + timedelta(days=i)] = True
        habit = toggle_factory(stats=stats)

        assert compute_streaks(habit, today=date(2024, 1, 23)) == (4, 7)


class TestWindows:
    @pytest.mark.parametrize(
        ("today", "offset", "expected"),
        [
            (date(2024, 1, 15), 0, (date(2024, 1, 1), date(2024, 1, 31))),
            (date(2024, 1, 15), 1, (date(2023, 12, 1), date(2023, 12, 31))),
            (date(2024, 3, 31), 1, (date(2024, 2, 1), date(2024, 2, 29))),
            (date(2024, 3, 31), 14, (date(2023, 1, 1), date(2023, 1, 31))),
        ],
    )
    def test_month_window(self, today, offset, expected):
        assert month_window(today, offset) == expected

    def test_negative_offset_rejected(self):
        with pytest.raises(ValueError):
            month_window(TODAY, -1)

    def test_shift_month_forward(self):
        assert shift_month(date(2024, 11, 30), 3) == date(2025, 2, 1)

    def test_days_between(self):
        assert days_between(date(2024, 2, 28), date(2024, 3, 1)) == [
            date(2024, 2, 28),
            date(2024, 2, 29),
            date(2024, 3, 1),
        ]
        assert days_between(date(2024, 3, 1), date(2024, 2, 1)) == []

    def test_completion(self, counter_factory):
        habit = counter_factory(goal=1, stats={date(2024, 2, 1): 1, date(2024, 2, 2): 0})

        assert completed_days(habit, date(2024, 2, 1), date(2024, 2, 4)) == 1
        assert completion_ratio(habit, date(2024, 2, 1), date(2024, 2, 4)) == 0.25
        assert completion_ratio(habit, date(2024, 2, 4), date(2024, 2, 1)) == 0.0
