"""Command line interface for habitgrid."""

from __future__ import annotations

import functools
from datetime import date, datetime
from pathlib import Path
from typing import Callable

import click

from .config import BaseConfig, DevConfig
from .devtools import dev_log
from .errors import HabitError
from .infra.database import bootstrap_database
from .infra.repositories.habit import SQLModelHabitRepository
from .logging_config import setup_logging
from .models.enums import TrackEvent, ViewMode
from .models.habit import Counter, Toggle
from .services.export_json import export_habits, import_habits
from .services.habits import compute_streaks
from .services.registry import HabitRegistry
from .views import habit_view
from .views.surface import TextCanvas

DATE_TYPE = click.DateTime(formats=["%Y-%m-%d"])


class AppState:
    """Config plus the repository backing the current invocation."""

    def __init__(self, config: BaseConfig):
        self.config = config
        _, session_factory = bootstrap_database(config)
        self.repository = SQLModelHabitRepository(session_factory)

    def registry(self) -> HabitRegistry:
        return HabitRegistry.load(self.repository)


def _as_date(value: datetime | None) -> date:
    return value.date() if value is not None else date.today()


def _handle_errors(func: Callable) -> Callable:
    """Turn habit errors into clean CLI failures."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except HabitError as exc:
            state = click.get_current_context().find_object(AppState)
            dev_log(state.config if state else None, "Command failed", exc=exc)
            raise click.ClickException(str(exc)) from exc

    return wrapper


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Track daily habits from the terminal."""

    if ctx.obj is None:
        config = DevConfig()
        setup_logging(config)
        ctx.obj = AppState(config)


@cli.command("add-counter")
@click.argument("name")
@click.argument("goal", type=click.IntRange(min=0))
@click.pass_obj
@_handle_errors
def add_counter(state: AppState, name: str, goal: int) -> None:
    """Add a habit counted toward a daily GOAL."""

    registry = state.registry()
    registry.add(Counter(name, goal))
    registry.save(state.repository)
    click.echo(f"Added counter {name!r} (goal {goal})")


@cli.command("add-toggle")
@click.argument("name")
@click.pass_obj
@_handle_errors
def add_toggle(state: AppState, name: str) -> None:
    """Add a done/not-done habit."""

    registry = state.registry()
    registry.add(Toggle(name))
    registry.save(state.repository)
    click.echo(f"Added toggle {name!r}")


@cli.command()
@click.argument("name")
@click.option("--date", "day", type=DATE_TYPE, default=None, help="Day to track (default today).")
@click.option("--decrement", is_flag=True, default=False, help="Step the value down instead of up.")
@click.pass_obj
@_handle_errors
def track(state: AppState, name: str, day: datetime | None, decrement: bool) -> None:
    """Record progress on NAME."""

    registry = state.registry()
    habit = registry.get(name)
    target = _as_date(day)
    habit.modify(target, TrackEvent.DECREMENT if decrement else TrackEvent.INCREMENT)
    registry.save(state.repository)
    click.echo(f"{habit.name}: {habit.format_value(target, state.config.glyphs())} ({habit.remaining(target)} left)")


@cli.command()
@click.argument("name")
@click.option(
    "--view",
    type=click.Choice([mode.value for mode in ViewMode]),
    default=ViewMode.DAY.value,
    show_default=True,
)
@click.option("--offset", type=click.IntRange(min=0), default=0, help="Months back from today.")
@click.option("--date", "day", type=DATE_TYPE, default=None, help="Treat this day as today.")
@click.pass_obj
@_handle_errors
def show(state: AppState, name: str, view: str, offset: int, day: datetime | None) -> None:
    """Draw NAME's history."""

    habit = state.registry().get(name)
    habit.set_view_mode(ViewMode(view))
    habit.set_view_month_offset(offset)
    canvas = TextCanvas(habit_view.WIDTH, habit_view.HEIGHT)
    habit.draw(canvas, glyphs=state.config.glyphs(), today=_as_date(day))
    click.echo(canvas.render())


@cli.command("list")
@click.pass_obj
@_handle_errors
def list_habits(state: AppState) -> None:
    """List habits with today's progress."""

    registry = state.registry()
    if not len(registry):
        click.echo("No habits yet.")
        return
    today = date.today()
    for habit in registry:
        current, longest = compute_streaks(habit, today=today)
        click.echo(
            f"{habit.name:<20} {habit.kind.value:<5} goal {habit.goal:>3}  "
            f"left {habit.remaining(today):>3}  streak {current}/{longest}"
        )


@cli.command()
@click.argument("name")
@click.pass_obj
@_handle_errors
def remove(state: AppState, name: str) -> None:
    """Delete NAME and its history."""

    registry = state.registry()
    registry.remove(name)
    registry.save(state.repository)
    click.echo(f"Removed {name!r}")


@cli.command("export")
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path), required=False)
@click.pass_obj
@_handle_errors
def export_cmd(state: AppState, path: Path | None) -> None:
    """Write all habits to a JSON file."""

    written = export_habits(habits=state.registry(), output_path=path or state.config.EXPORT_FILE)
    click.echo(f"Export written: {written}")


@cli.command("import")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--append", is_flag=True, default=False, help="Keep existing habits.")
@click.pass_obj
@_handle_errors
def import_cmd(state: AppState, path: Path, append: bool) -> None:
    """Load habits from a JSON file, replacing the current ones."""

    imported = import_habits(path)
    registry = state.registry() if append else HabitRegistry()
    for habit in imported:
        registry.add(habit)
    registry.save(state.repository)
    click.echo(f"Imported {len(imported)} habit(s)")


def main() -> None:  # pragma: no cover - console entry point
    cli()


__all__ = ["cli", "main"]
