"""Display wrapper for boolean habit values."""

from __future__ import annotations

from dataclasses import dataclass

MARK_WIDTH = 3


@dataclass(frozen=True, slots=True)
class Glyphs:
    """The two symbols used to show a toggle's state."""

    true_chr: str = "✓"
    false_chr: str = "✗"


DEFAULT_GLYPHS = Glyphs()


@dataclass(frozen=True, slots=True)
class Mark:
    """A plain boolean that knows how to present itself.

    Comparisons and storage always go through ``value``; the glyphs only
    matter when formatting.
    """

    value: bool

    def __bool__(self) -> bool:
        return self.value

    def format(self, glyphs: Glyphs = DEFAULT_GLYPHS) -> str:
        """Return the glyph for this value centred in a fixed-width field."""

        symbol = glyphs.true_chr if self.value else glyphs.false_chr
        return f"{symbol:^{MARK_WIDTH}}"


def format_mark(value: bool, glyphs: Glyphs = DEFAULT_GLYPHS) -> str:
    """Shortcut for ``Mark(value).format(glyphs)``."""

    return Mark(bool(value)).format(glyphs)


__all__ = ["DEFAULT_GLYPHS", "Glyphs", "MARK_WIDTH", "Mark", "format_mark"]
