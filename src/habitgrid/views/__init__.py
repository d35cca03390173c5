"""Text views habits render into."""

from .surface import Size, Surface, TextCanvas

__all__ = ["Size", "Surface", "TextCanvas"]
