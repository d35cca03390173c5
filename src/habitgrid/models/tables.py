"""Habit storage tables."""

from __future__ import annotations

from datetime import date
from typing import ClassVar, Optional

from sqlalchemy.orm import relationship
from sqlmodel import Field, Relationship, SQLModel


class HabitRow(SQLModel, table=True):
    """One stored habit; ``kind`` holds the record's type tag."""

    __tablename__: ClassVar[str] = "habit"

    id: Optional[int] = Field(default=None, primary_key=True)
    position: int = Field(nullable=False, index=True)
    kind: str = Field(nullable=False, max_length=16)
    name: str = Field(nullable=False, max_length=255)
    goal: int = Field(default=1, nullable=False)

    stats: list["HabitStatRow"] = Relationship(
        back_populates="habit",
        sa_relationship=relationship(
            "HabitStatRow", back_populates="habit", cascade="all, delete-orphan"
        ),
    )


class HabitStatRow(SQLModel, table=True):
    """Progress recorded for a habit on a calendar day.

    Toggles store 0 or 1.
    """

    __tablename__: ClassVar[str] = "habit_stat"

    habit_id: int = Field(foreign_key="habit.id", primary_key=True)
    occurred_on: date = Field(primary_key=True, index=True)
    value: int = Field(default=1, nullable=False)

    habit: "HabitRow" = Relationship(
        back_populates="stats",
        sa_relationship=relationship("HabitRow", back_populates="stats"),
    )
