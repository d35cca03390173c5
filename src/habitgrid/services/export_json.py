"""JSON export/import of a habit collection.

The document is a JSON array of tagged habit records, for example::

    [
      {"type": "Count", "name": "Pushups", "stats": {"2024-01-01": 16}, "goal": 20},
      {"type": "Bit", "name": "Meditate", "stats": {"2024-02-01": true}, "goal": true}
    ]
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable

from ..errors import HabitError, InvalidHabitRecord
from ..logging_config import get_logger
from ..models.habit import Habit, habit_from_record

logger = get_logger(__name__)


def dumps_habits(habits: Iterable[Habit], *, indent: int | None = 2) -> str:
    """Serialise habits, in order, to a JSON document."""

    return json.dumps([habit.to_record() for habit in habits], ensure_ascii=False, indent=indent)


def loads_habits(document: str) -> list[Habit]:
    """Rebuild habits from a JSON document.

    Raises UnknownHabitKind or InvalidHabitRecord if any record cannot be
    rebuilt; nothing is returned in that case.
    """

    try:
        records = json.loads(document)
    except json.JSONDecodeError as exc:
        raise InvalidHabitRecord(f"Habit document is not valid JSON: {exc}") from exc
    if not isinstance(records, list):
        raise InvalidHabitRecord("Habit document must be a JSON array")
    return [habit_from_record(record) for record in records]


def export_habits(*, habits: Iterable[Habit], output_path: Path) -> Path:
    """Write habits to ``output_path`` and return the path written."""

    habits = list(habits)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(dumps_habits(habits) + "\n", encoding="utf-8")
    logger.info("Exported habits", extra={"path": str(output_path), "count": len(habits)})
    return output_path


def import_habits(path: Path) -> list[Habit]:
    """Read habits previously written by :func:`export_habits`."""

    try:
        habits = loads_habits(path.read_text(encoding="utf-8"))
    except HabitError:
        logger.warning("Rejected habit import", extra={"path": str(path)}, exc_info=True)
        raise
    logger.info("Imported habits", extra={"path": str(path), "count": len(habits)})
    return habits


__all__ = ["dumps_habits", "export_habits", "import_habits", "loads_habits"]
