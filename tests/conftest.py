"""Pytest configuration and shared fixtures for habitgrid tests.

Provides an isolated SQLite database per test plus factories for the two
habit kinds, so repositories and services can be exercised without touching
the real data directory.
"""

from __future__ import annotations

import logging
import tempfile
from datetime import date
from pathlib import Path

import pytest
from sqlmodel import Session, SQLModel, create_engine

# Import all models to ensure they're registered with SQLModel metadata
from habitgrid.models import Counter, HabitRow, HabitStatRow, Toggle  # noqa: F401
from habitgrid.infra.database import create_session_factory

# =============================================================================
# Environment
# =============================================================================


@pytest.fixture(autouse=True)
def isolated_data_dir(tmp_path, monkeypatch):
    """Point every config created during a test at a throwaway directory."""

    monkeypatch.setenv("HABITGRID_DATA_DIR", str(tmp_path / "data"))
    for name in ("HABITGRID_DATABASE_URL", "HABITGRID_TRUE_CHR", "HABITGRID_FALSE_CHR", "HABITGRID_EXPORT_FILE"):
        monkeypatch.delenv(name, raising=False)
    yield tmp_path / "data"
    logger = logging.getLogger("habitgrid")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(scope="function")
def db_engine():
    """Create an isolated SQLite database file for each test.

    Yields:
        Engine: SQLModel engine with all tables created
    """
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    engine = create_engine(f"sqlite:///{db_path}", echo=False)
    SQLModel.metadata.create_all(engine)

    yield engine

    engine.dispose()
    db_path.unlink(missing_ok=True)


@pytest.fixture(scope="function")
def db_session(db_engine):
    """A raw session for arranging rows directly."""
    session = Session(db_engine, expire_on_commit=False)
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


@pytest.fixture(scope="function")
def session_factory(db_engine):
    """Session factory matching what repositories receive in the app."""
    return create_session_factory(db_engine)


# =============================================================================
# Habit Factories
# =============================================================================


@pytest.fixture
def counter_factory():
    """Factory for counters with optional pre-filled history.

    Returns:
        Callable: Function that builds Counter instances
    """

    def _create_counter(
        name: str = "Pushups",
        goal: int = 20,
        stats: dict[date, int] | None = None,
    ) -> Counter:
        habit = Counter(name, goal)
        for day, value in (stats or {}).items():
            habit.insert_entry(day, value)
        return habit

    return _create_counter


@pytest.fixture
def toggle_factory():
    """Factory for toggles with optional pre-filled history."""

    def _create_toggle(name: str = "Meditate", stats: dict[date, bool] | None = None) -> Toggle:
        habit = Toggle(name)
        for day, value in (stats or {}).items():
            habit.insert_entry(day, value)
        return habit

    return _create_toggle
