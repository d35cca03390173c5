"""Habit repository protocol."""

from __future__ import annotations

from typing import Iterable, Protocol

from ...models.habit import Habit


class HabitRepository(Protocol):
    """Stores and restores an ordered collection of habits."""

    def load_all(self) -> list[Habit]:
        """Return every stored habit in collection order."""
        ...

    def save_all(self, habits: Iterable[Habit]) -> None:
        """Replace the stored collection with ``habits``."""
        ...

    def count(self) -> int:
        """Number of stored habits."""
        ...
