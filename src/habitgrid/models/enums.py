"""Small value enums shared by the habit models and views."""

from __future__ import annotations

from enum import Enum


class TrackEvent(Enum):
    """A single user-issued change to a habit's value on a date."""

    INCREMENT = "increment"
    DECREMENT = "decrement"


class ViewMode(Enum):
    """Display granularity a habit is currently shown at."""

    DAY = "day"
    MONTH = "month"
    YEAR = "year"

    def next(self) -> "ViewMode":
        """Return the following mode, wrapping from YEAR back to DAY."""

        members = list(ViewMode)
        return members[(members.index(self) + 1) % len(members)]


class EventResult(Enum):
    """Whether an input event was handled by the receiving habit."""

    CONSUMED = "consumed"
    IGNORED = "ignored"


class Direction(Enum):
    """Direction focus arrives from when moving between habits."""

    FORWARD = "forward"
    BACKWARD = "backward"


__all__ = ["Direction", "EventResult", "TrackEvent", "ViewMode"]
