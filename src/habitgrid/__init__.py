"""habitgrid: daily habit tracking with counters and toggles."""

from __future__ import annotations

from .config import BaseConfig, DevConfig
from .errors import HabitError, InvalidHabitRecord, UnknownHabitKind
from .models import Counter, Habit, Toggle, TrackEvent, ViewMode

__all__ = [
    "BaseConfig",
    "Counter",
    "DevConfig",
    "Habit",
    "HabitError",
    "InvalidHabitRecord",
    "Toggle",
    "TrackEvent",
    "UnknownHabitKind",
    "ViewMode",
]
