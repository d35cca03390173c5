"""Ordered, focusable collection of habits."""

from __future__ import annotations

from datetime import date
from typing import Iterator

from ..domain.repositories.habit import HabitRepository
from ..errors import HabitNotFound
from ..logging_config import get_logger
from ..models.enums import Direction, EventResult
from ..models.habit import Habit

logger = get_logger(__name__)


class HabitRegistry:
    """Owns the habit list and routes input to the focused habit.

    Names are not required to be unique; lookups by name return the first
    match in collection order.
    """

    def __init__(self, habits: list[Habit] | None = None):
        self._habits: list[Habit] = list(habits or [])
        self._focus = 0

    def __len__(self) -> int:
        return len(self._habits)

    def __iter__(self) -> Iterator[Habit]:
        return iter(self._habits)

    def __getitem__(self, index: int) -> Habit:
        return self._habits[index]

    @classmethod
    def load(cls, repository: HabitRepository) -> "HabitRegistry":
        return cls(repository.load_all())

    def save(self, repository: HabitRepository) -> None:
        repository.save_all(self._habits)

    def names(self) -> list[str]:
        return [habit.name for habit in self._habits]

    def add(self, habit: Habit) -> Habit:
        self._habits.append(habit)
        logger.info("Added habit", extra={"habit": habit.name, "kind": habit.kind.value})
        return habit

    def get(self, name: str) -> Habit:
        for habit in self._habits:
            if habit.name == name:
                return habit
        raise HabitNotFound(name)

    def remove(self, name: str) -> Habit:
        habit = self.get(name)
        index = next(i for i, h in enumerate(self._habits) if h is habit)
        del self._habits[index]
        if index < self._focus:
            self._focus -= 1
        if self._focus >= len(self._habits):
            self._focus = max(len(self._habits) - 1, 0)
        logger.info("Removed habit", extra={"habit": name})
        return habit

    # -- focus and dispatch -------------------------------------------------

    @property
    def focused(self) -> Habit | None:
        if not self._habits:
            return None
        return self._habits[self._focus]

    @property
    def focus_index(self) -> int:
        return self._focus

    def focus_next(self) -> Habit | None:
        return self._move_focus(1, Direction.FORWARD)

    def focus_prev(self) -> Habit | None:
        return self._move_focus(-1, Direction.BACKWARD)

    def _move_focus(self, step: int, direction: Direction) -> Habit | None:
        if not self._habits:
            return None
        count = len(self._habits)
        for attempt in range(1, count + 1):
            candidate = (self._focus + step * attempt) % count
            if self._habits[candidate].take_focus(direction):
                self._focus = candidate
                break
        return self.focused

    def dispatch(self, event: str, *, today: date | None = None) -> EventResult:
        """Hand one input event to the focused habit."""

        habit = self.focused
        if habit is None:
            return EventResult.IGNORED
        return habit.on_event(event, today=today)

    def remaining_today(self, today: date | None = None) -> dict[str, int]:
        today = today or date.today()
        return {habit.name: habit.remaining(today) for habit in self._habits}


__all__ = ["HabitRegistry"]
