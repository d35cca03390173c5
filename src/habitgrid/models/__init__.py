"""Habit models and SQLModel table exports."""

from .enums import Direction, EventResult, TrackEvent, ViewMode
from .habit import Counter, Habit, HabitKind, Toggle, habit_from_record, habit_to_record
from .mark import DEFAULT_GLYPHS, Glyphs, Mark, format_mark
from .tables import HabitRow, HabitStatRow

__all__ = [
    "Counter",
    "DEFAULT_GLYPHS",
    "Direction",
    "EventResult",
    "Glyphs",
    "Habit",
    "HabitKind",
    "HabitRow",
    "HabitStatRow",
    "Mark",
    "Toggle",
    "TrackEvent",
    "ViewMode",
    "format_mark",
    "habit_from_record",
    "habit_to_record",
]
