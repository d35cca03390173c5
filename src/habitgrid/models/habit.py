"""Habit kinds and their tagged record format.

Every habit stores one progress value per calendar date and a goal of the
same type. Two kinds exist:

* ``Counter``: unsigned integer progress toward a numeric goal.
* ``Toggle``: a done/not-done flag whose goal is always "done".

Habits are serialised as plain dicts carrying a ``"type"`` tag so that a single
list can hold both kinds and be rebuilt without the caller knowing which is
which. View state (mode and month offset) belongs to the running session and
is never part of a record.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, ClassVar, Generic, Mapping, Optional, TypeVar

from ..errors import InvalidHabitRecord, UnknownHabitKind
from .enums import Direction, EventResult, TrackEvent, ViewMode
from .mark import DEFAULT_GLYPHS, Glyphs, Mark

if TYPE_CHECKING:  # pragma: no cover
    from ..views.surface import Size, Surface

V = TypeVar("V")


class HabitKind(Enum):
    """Closed set of habit kinds; the value is the record's type tag."""

    COUNT = "Count"
    BIT = "Bit"


class Habit(ABC, Generic[V]):
    """Common behaviour of every habit kind."""

    kind: ClassVar[HabitKind]

    def __init__(self, name: str):
        self._name = name
        self._stats: dict[date, V] = {}
        # Session-only state, never written to a record.
        self._view_mode = ViewMode.DAY
        self._view_month_offset = 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, goal={self.goal}, entries={len(self._stats)})"

    # -- naming -------------------------------------------------------------

    @property
    def name(self) -> str:
        return self._name

    def set_name(self, name: str) -> None:
        self._name = name

    # -- goal ---------------------------------------------------------------

    @property
    @abstractmethod
    def goal(self) -> int:
        """Numeric projection of the goal."""

    @abstractmethod
    def set_goal(self, value: V) -> None:
        """Replace the goal."""

    # -- per-date storage ---------------------------------------------------

    @property
    def stats(self) -> Mapping[date, V]:
        """Read-only view of the date -> value history."""

        return MappingProxyType(self._stats)

    def get_by_date(self, day: date) -> Optional[V]:
        return self._stats.get(day)

    def insert_entry(self, day: date, value: V) -> None:
        """Set the value for ``day``, overwriting any existing entry."""

        self._stats[_check_date(day)] = self._coerce(value)

    @abstractmethod
    def _coerce(self, value: Any) -> V:
        """Validate ``value`` for this kind and return it in storage form."""

    @abstractmethod
    def reached_goal(self, day: date) -> bool:
        ...

    @abstractmethod
    def remaining(self, day: date) -> int:
        ...

    @abstractmethod
    def modify(self, day: date, event: TrackEvent) -> None:
        """Apply a user-issued change for ``day``."""

    @abstractmethod
    def format_value(self, day: date, glyphs: Glyphs = DEFAULT_GLYPHS) -> Optional[str]:
        """Short text for the value stored on ``day``, or None when untracked."""

    # -- view state ---------------------------------------------------------

    @property
    def view_mode(self) -> ViewMode:
        return self._view_mode

    def set_view_mode(self, mode: ViewMode) -> None:
        self._view_mode = ViewMode(mode)

    @property
    def view_month_offset(self) -> int:
        return self._view_month_offset

    def set_view_month_offset(self, offset: int) -> None:
        if isinstance(offset, bool) or not isinstance(offset, int):
            raise TypeError("Month offset must be an integer")
        if offset < 0:
            raise ValueError("Month offset cannot be negative")
        self._view_month_offset = offset

    def shift_view_month_offset(self, delta: int) -> int:
        """Move the month offset by ``delta``, stopping at zero."""

        self._view_month_offset = max(0, self._view_month_offset + delta)
        return self._view_month_offset

    def reset_view(self) -> None:
        self._view_mode = ViewMode.DAY
        self._view_month_offset = 0

    # -- rendering and input ------------------------------------------------

    def draw(self, surface: "Surface", *, glyphs: Glyphs = DEFAULT_GLYPHS, today: date | None = None) -> None:
        from ..views import habit_view

        habit_view.draw(self, surface, glyphs=glyphs, today=today)

    def on_event(self, event: str, *, today: date | None = None) -> EventResult:
        from ..views import habit_view

        return habit_view.on_event(self, event, today=today)

    def required_size(self, constraints: "Size") -> "Size":
        from ..views import habit_view

        return habit_view.required_size(self, constraints)

    def take_focus(self, direction: Direction) -> bool:
        from ..views import habit_view

        return habit_view.take_focus(self, direction)

    # -- records ------------------------------------------------------------

    def to_record(self) -> dict[str, Any]:
        """Return the JSON-ready tagged record for this habit."""

        return {
            "type": self.kind.value,
            "name": self._name,
            "stats": {day.isoformat(): value for day, value in sorted(self._stats.items())},
            "goal": self._goal_record(),
        }

    @abstractmethod
    def _goal_record(self) -> Any:
        ...

    @classmethod
    @abstractmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Habit":
        """Build a habit of this kind from its record (tag already checked)."""


class Counter(Habit[int]):
    """Habit measured as a count toward a numeric daily goal."""

    kind = HabitKind.COUNT

    def __init__(self, name: str, goal: int):
        super().__init__(name)
        self._goal = _check_count(goal, "goal")

    @property
    def goal(self) -> int:
        return self._goal

    def set_goal(self, value: int) -> None:
        self._goal = _check_count(value, "goal")

    def _coerce(self, value: Any) -> int:
        return _check_count(value, "value")

    def reached_goal(self, day: date) -> bool:
        value = self._stats.get(day)
        return value is not None and value >= self._goal

    def remaining(self, day: date) -> int:
        value = self._stats.get(day)
        if value is None:
            return self._goal
        return max(self._goal - value, 0)

    def modify(self, day: date, event: TrackEvent) -> None:
        if not isinstance(event, TrackEvent):
            raise TypeError(f"Unsupported track event: {event!r}")
        value = self._stats.get(day)
        if value is None:
            # First touch always records one unit, whichever way it was pressed.
            self.insert_entry(day, 1)
        elif event is TrackEvent.INCREMENT:
            self._stats[day] = value + 1
        else:
            self._stats[day] = max(value - 1, 0)

    def format_value(self, day: date, glyphs: Glyphs = DEFAULT_GLYPHS) -> Optional[str]:
        value = self._stats.get(day)
        return None if value is None else str(value)

    def _goal_record(self) -> int:
        return self._goal

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Counter":
        name = _record_name(record)
        stats = _record_stats(record)
        try:
            habit = cls(name, record["goal"])
            for day, value in stats.items():
                habit.insert_entry(day, value)
        except KeyError as exc:
            raise InvalidHabitRecord(f"Counter record missing field {exc}") from exc
        except (TypeError, ValueError) as exc:
            raise InvalidHabitRecord(f"Counter record {name!r} is malformed: {exc}") from exc
        return habit


class Toggle(Habit[bool]):
    """Habit that is either done or not done on a day."""

    kind = HabitKind.BIT

    def __init__(self, name: str):
        super().__init__(name)
        self._goal_mark = Mark(True)

    @property
    def goal(self) -> int:
        return 1

    def set_goal(self, value: bool) -> None:
        # Accepted for interface parity; a toggle is always aiming for "done".
        self._goal_mark = Mark(self._coerce(value))

    def _coerce(self, value: Any) -> bool:
        if isinstance(value, Mark):
            return value.value
        if not isinstance(value, bool):
            raise TypeError(f"Toggle values must be bool, got {type(value).__name__}")
        return value

    def reached_goal(self, day: date) -> bool:
        return self._stats.get(day) is True

    def remaining(self, day: date) -> int:
        return 0 if self._stats.get(day) is True else 1

    def modify(self, day: date, event: TrackEvent) -> None:
        if not isinstance(event, TrackEvent):
            raise TypeError(f"Unsupported track event: {event!r}")
        value = self._stats.get(day)
        self.insert_entry(day, True if value is None else not value)

    def format_value(self, day: date, glyphs: Glyphs = DEFAULT_GLYPHS) -> Optional[str]:
        value = self._stats.get(day)
        return None if value is None else Mark(value).format(glyphs).strip()

    def _goal_record(self) -> bool:
        return True

    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "Toggle":
        name = _record_name(record)
        stats = _record_stats(record)
        habit = cls(name)
        try:
            habit.set_goal(record["goal"])
            for day, value in stats.items():
                habit.insert_entry(day, value)
        except KeyError as exc:
            raise InvalidHabitRecord(f"Toggle record missing field {exc}") from exc
        except (TypeError, ValueError) as exc:
            raise InvalidHabitRecord(f"Toggle record {name!r} is malformed: {exc}") from exc
        return habit


_HABIT_CLASSES: dict[HabitKind, type[Habit]] = {
    HabitKind.COUNT: Counter,
    HabitKind.BIT: Toggle,
}


def habit_kind(tag: Any) -> HabitKind:
    """Resolve a record's type tag, raising UnknownHabitKind for strangers."""

    try:
        return HabitKind(tag)
    except ValueError as exc:
        raise UnknownHabitKind(tag) from exc


def habit_from_record(record: Mapping[str, Any]) -> Habit:
    """Rebuild the concrete habit a tagged record describes."""

    if not isinstance(record, Mapping):
        raise InvalidHabitRecord(f"Habit record must be an object, got {type(record).__name__}")
    if "type" not in record:
        raise InvalidHabitRecord("Habit record has no 'type' tag")
    kind = habit_kind(record["type"])
    return _HABIT_CLASSES[kind].from_record(record)


def habit_to_record(habit: Habit) -> dict[str, Any]:
    return habit.to_record()


def _check_count(value: Any, label: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Counter {label} must be an integer, got {type(value).__name__}")
    if value < 0:
        raise ValueError(f"Counter {label} cannot be negative")
    return value


def _check_date(day: Any) -> date:
    # datetime is a date subclass but carries a time of day.
    if not isinstance(day, date) or hasattr(day, "hour"):
        raise TypeError(f"Habit entries are keyed by date, got {type(day).__name__}")
    return day


def _record_name(record: Mapping[str, Any]) -> str:
    name = record.get("name")
    if not isinstance(name, str):
        raise InvalidHabitRecord("Habit record needs a string 'name'")
    return name


def _record_stats(record: Mapping[str, Any]) -> dict[date, Any]:
    raw = record.get("stats", {})
    if not isinstance(raw, Mapping):
        raise InvalidHabitRecord("Habit 'stats' must be an object of date -> value")
    stats: dict[date, Any] = {}
    for key, value in raw.items():
        if isinstance(key, date):
            stats[key] = value
            continue
        try:
            stats[date.fromisoformat(key)] = value
        except (TypeError, ValueError) as exc:
            raise InvalidHabitRecord(f"Bad date key in stats: {key!r}") from exc
    return stats


__all__ = [
    "Counter",
    "Habit",
    "HabitKind",
    "Toggle",
    "habit_from_record",
    "habit_kind",
    "habit_to_record",
]
