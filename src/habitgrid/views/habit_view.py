"""Text rendering and key handling for a single habit.

A habit occupies a 25x8 cell box:

* row 0: name plus how much is left today (or ``done``)
* row 1: the month or year being shown
* rows 2-7: the body for the current view mode

Keys: ``n``/``enter`` track today, ``p``/``backspace`` untrack today,
``[`` and ``]`` step one month back or forward, ``v`` cycles the view mode.
"""

from __future__ import annotations

import calendar
from datetime import date

from ..logging_config import get_logger
from ..models.enums import Direction, EventResult, TrackEvent, ViewMode
from ..models.habit import Habit
from ..models.mark import DEFAULT_GLYPHS, MARK_WIDTH, Glyphs
from ..services.habits import completed_days, days_between, month_window
from .surface import Size, Surface

logger = get_logger(__name__)

WIDTH = 25
HEIGHT = 8
BODY_TOP = 2
UNTRACKED = "·"

_TRACK_KEYS = {
    "n": TrackEvent.INCREMENT,
    "enter": TrackEvent.INCREMENT,
    "p": TrackEvent.DECREMENT,
    "backspace": TrackEvent.DECREMENT,
}
_NAV_KEYS = {"[": 1, "]": -1}
_CYCLE_VIEW_KEY = "v"


def draw(habit: Habit, surface: Surface, *, glyphs: Glyphs = DEFAULT_GLYPHS, today: date | None = None) -> None:
    today = today or date.today()
    first, last = month_window(today, habit.view_month_offset)

    surface.print_at(0, 0, _title(habit, today))
    if habit.view_mode is ViewMode.YEAR:
        surface.print_at(0, 1, str(first.year))
        _draw_year(habit, surface, first.year)
    else:
        surface.print_at(0, 1, f"{calendar.month_name[first.month]} {first.year}")
        if habit.view_mode is ViewMode.MONTH:
            _draw_weeks(habit, surface, first, last)
        else:
            _draw_days(habit, surface, first, last, glyphs)


def on_event(habit: Habit, event: str, *, today: date | None = None) -> EventResult:
    if event in _TRACK_KEYS:
        day = today or date.today()
        habit.modify(day, _TRACK_KEYS[event])
        logger.debug("Tracked habit", extra={"habit": habit.name, "day": day.isoformat(), "key": event})
        return EventResult.CONSUMED
    if event in _NAV_KEYS:
        habit.shift_view_month_offset(_NAV_KEYS[event])
        return EventResult.CONSUMED
    if event == _CYCLE_VIEW_KEY:
        habit.set_view_mode(habit.view_mode.next())
        return EventResult.CONSUMED
    return EventResult.IGNORED


def required_size(habit: Habit, constraints: Size) -> Size:
    return Size(min(WIDTH, constraints.width), min(HEIGHT, constraints.height))


def take_focus(habit: Habit, direction: Direction) -> bool:
    return True


def _title(habit: Habit, today: date) -> str:
    status = "done" if habit.reached_goal(today) else f"{habit.remaining(today)} left"
    room = max(WIDTH - len(status) - 1, 0)
    name = habit.name if len(habit.name) <= room else habit.name[: max(room - 1, 0)] + "…"
    return f"{name.ljust(room)} {status}"


def _draw_days(habit: Habit, surface: Surface, first: date, last: date, glyphs: Glyphs) -> None:
    # Monday-first calendar grid, one 3-cell column per weekday.
    lead = first.weekday()
    for day in days_between(first, last):
        slot = lead + day.day - 1
        text = habit.format_value(day, glyphs) or UNTRACKED
        surface.print_at((slot % 7) * MARK_WIDTH, BODY_TOP + slot // 7, f"{text[:MARK_WIDTH]:^{MARK_WIDTH}}")


def _draw_weeks(habit: Habit, surface: Surface, first: date, last: date) -> None:
    days = days_between(first, last)
    lead = first.weekday()
    weeks: list[list[date]] = []
    for day in days:
        index = (lead + day.day - 1) // 7
        if index == len(weeks):
            weeks.append([])
        weeks[index].append(day)
    for row, week in enumerate(weeks):
        done = completed_days(habit, week[0], week[-1])
        surface.print_at(0, BODY_TOP + row, f"week {row + 1}  {done}/{len(week)}")


def _draw_year(habit: Habit, surface: Surface, year: int) -> None:
    for month in range(1, 13):
        start, end = month_window(date(year, month, 1))
        done = completed_days(habit, start, end)
        row, col = divmod(month - 1, 3)
        surface.print_at(col * 8, BODY_TOP + row, f"{calendar.month_abbr[month]} {done:>2}")


__all__ = ["HEIGHT", "WIDTH", "draw", "on_event", "required_size", "take_focus"]
