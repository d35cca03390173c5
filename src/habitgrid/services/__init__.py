"""Service module exports."""

from . import export_json, habits, registry

__all__ = ["export_json", "habits", "registry"]
