"""Drawing surfaces habits render into."""

from __future__ import annotations

from typing import NamedTuple, Protocol


class Size(NamedTuple):
    """Width and height in character cells."""

    width: int
    height: int


class Surface(Protocol):
    """Anything a habit can print text onto."""

    @property
    def size(self) -> Size:  # pragma: no cover - interface
        ...

    def print_at(self, x: int, y: int, text: str) -> None:  # pragma: no cover - interface
        ...


class TextCanvas:
    """In-memory character grid used by the CLI and tests.

    Text printed past the right or bottom edge is clipped.
    """

    def __init__(self, width: int, height: int):
        if width < 0 or height < 0:
            raise ValueError("Canvas dimensions must be non-negative")
        self._size = Size(width, height)
        self._rows: list[list[str]] = [[" "] * width for _ in range(height)]

    @property
    def size(self) -> Size:
        return self._size

    def print_at(self, x: int, y: int, text: str) -> None:
        if not 0 <= y < self._size.height:
            return
        row = self._rows[y]
        for offset, char in enumerate(text):
            col = x + offset
            if col >= self._size.width:
                break
            if col >= 0:
                row[col] = char

    def lines(self) -> list[str]:
        """Return the canvas rows with trailing blanks stripped."""

        return ["".join(row).rstrip() for row in self._rows]

    def render(self) -> str:
        return "\n".join(self.lines()).rstrip("\n")


__all__ = ["Size", "Surface", "TextCanvas"]
