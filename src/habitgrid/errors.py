"""Exceptions raised by habitgrid."""

from __future__ import annotations

from typing import Any


class HabitError(ValueError):
    """Base class for habit decoding and lookup failures."""


class UnknownHabitKind(HabitError):
    """A stored record names a habit kind this version does not know."""

    def __init__(self, tag: Any):
        self.tag = tag
        super().__init__(f"Unknown habit kind: {tag!r}")


class InvalidHabitRecord(HabitError):
    """A stored record has a known kind but malformed fields."""


class HabitNotFound(HabitError):
    """No habit with the requested name exists in the registry."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No habit named {name!r}")


__all__ = ["HabitError", "HabitNotFound", "InvalidHabitRecord", "UnknownHabitKind"]
