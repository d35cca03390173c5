"""SQLModel implementation of the habit repository."""

from __future__ import annotations

from datetime import date
from typing import Any, Iterable

from sqlalchemy import delete, func
from sqlmodel import select

from ...logging_config import get_logger
from ...models.habit import Habit, HabitKind, habit_from_record, habit_kind
from ...models.tables import HabitRow, HabitStatRow
from ..database import SessionFactory

logger = get_logger(__name__)


class SQLModelHabitRepository:
    """Keeps the habit collection in the ``habit`` and ``habit_stat`` tables."""

    def __init__(self, session_factory: SessionFactory):
        """Initialize with a session factory."""
        self.session_factory = session_factory

    def load_all(self) -> list[Habit]:
        """Rebuild every stored habit in collection order.

        The whole load fails with UnknownHabitKind if any row carries a tag
        this version does not recognise.
        """
        with self.session_factory() as session:
            rows = list(session.exec(select(HabitRow).order_by(HabitRow.position)).all())
            stats: dict[int, dict[date, int]] = {row.id: {} for row in rows}
            for stat in session.exec(select(HabitStatRow)).all():
                stats.setdefault(stat.habit_id, {})[stat.occurred_on] = stat.value

        habits = [_row_to_habit(row, stats.get(row.id, {})) for row in rows]
        logger.info("Loaded habits", extra={"count": len(habits)})
        return habits

    def save_all(self, habits: Iterable[Habit]) -> None:
        """Replace the stored collection, keeping the given order."""
        habits = list(habits)
        with self.session_factory() as session:
            session.execute(delete(HabitStatRow))
            session.execute(delete(HabitRow))
            for position, habit in enumerate(habits):
                row = HabitRow(
                    position=position,
                    kind=habit.kind.value,
                    name=habit.name,
                    goal=habit.goal,
                )
                session.add(row)
                session.flush()
                for day, value in habit.stats.items():
                    session.add(HabitStatRow(habit_id=row.id, occurred_on=day, value=int(value)))
            session.commit()
        logger.info("Saved habits", extra={"count": len(habits)})

    def count(self) -> int:
        """Number of stored habits."""
        with self.session_factory() as session:
            return session.exec(select(func.count()).select_from(HabitRow)).one()


def _row_to_habit(row: HabitRow, stats: dict[date, int]) -> Habit:
    kind = habit_kind(row.kind)
    record: dict[str, Any] = {"type": kind.value, "name": row.name}
    if kind is HabitKind.BIT:
        record["goal"] = True
        record["stats"] = {day: bool(value) for day, value in stats.items()}
    else:
        record["goal"] = row.goal
        record["stats"] = dict(stats)
    return habit_from_record(record)
