"""Habit service helpers for streaks and calendar windows."""

from __future__ import annotations

import calendar
from datetime import date, timedelta

from ..models.habit import Habit


def compute_streaks(habit: Habit, *, today: date | None = None) -> tuple[int, int]:
    """Return (current_streak, longest_streak) counted in days the goal was reached."""

    today = today or date.today()
    done = {day for day in habit.stats if habit.reached_goal(day)}

    # Current streak: walk backwards from today until a gap.
    current = 0
    cursor = today
    while cursor in done:
        current += 1
        cursor -= timedelta(days=1)

    # Longest streak: sweep through sorted days, counting consecutive runs.
    longest = 0
    run = 0
    last_day: date | None = None
    for day in sorted(done):
        if last_day is not None and day == last_day + timedelta(days=1):
            run += 1
        else:
            run = 1
        longest = max(longest, run)
        last_day = day

    return current, longest


def shift_month(value: date, months: int) -> date:
    """Return the first day of the month ``months`` away from ``value``."""

    index = value.year * 12 + (value.month - 1) + months
    return date(index // 12, index % 12 + 1, 1)


def month_window(today: date, offset: int = 0) -> tuple[date, date]:
    """Return the first and last day of the month ``offset`` months before ``today``."""

    if offset < 0:
        raise ValueError("Month offset cannot be negative")
    first = shift_month(today, -offset)
    last_day = calendar.monthrange(first.year, first.month)[1]
    return first, first.replace(day=last_day)


def days_between(start: date, end: date) -> list[date]:
    """Inclusive list of days from ``start`` to ``end``."""

    if end < start:
        return []
    return [start + timedelta(days=i) for i in range((end - start).days + 1)]


def completed_days(habit: Habit, start: date, end: date) -> int:
    """Count days in the inclusive range on which the goal was reached."""

    return sum(1 for day in habit.stats if start <= day <= end and habit.reached_goal(day))


def completion_ratio(habit: Habit, start: date, end: date) -> float:
    """Fraction of days in the inclusive range on which the goal was reached."""

    total = len(days_between(start, end))
    if total == 0:
        return 0.0
    return completed_days(habit, start, end) / total


__all__ = [
    "completed_days",
    "completion_ratio",
    "compute_streaks",
    "days_between",
    "month_window",
    "shift_month",
]
