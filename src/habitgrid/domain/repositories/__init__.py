"""Repository protocols (interfaces) for the domain layer."""

from .habit import HabitRepository

__all__ = ["HabitRepository"]
