"""Application configuration objects and helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from sqlalchemy.pool import StaticPool

from .models.mark import Glyphs

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "habitgrid"
    DB_FILENAME = "habitgrid.db"
    EXPORT_FILENAME = "habit_record.json"
    DEFAULT_TRUE_CHR = "✓"
    DEFAULT_FALSE_CHR = "✗"

    def __init__(self) -> None:
        self.DATA_DIR = self._resolve_data_dir()
        self.DEV_MODE = _env_bool("HABITGRID_DEV_MODE", default=True)
        self.DATABASE_URL = os.getenv("HABITGRID_DATABASE_URL", self._build_sqlite_url())
        self.TRUE_CHR = os.getenv("HABITGRID_TRUE_CHR", self.DEFAULT_TRUE_CHR)
        self.FALSE_CHR = os.getenv("HABITGRID_FALSE_CHR", self.DEFAULT_FALSE_CHR)
        export = os.getenv("HABITGRID_EXPORT_FILE")
        self.EXPORT_FILE = (
            Path(export).expanduser() if export else self.DATA_DIR / self.EXPORT_FILENAME
        )
        if len(self.TRUE_CHR) != 1 or len(self.FALSE_CHR) != 1:
            raise ValueError("HABITGRID_TRUE_CHR and HABITGRID_FALSE_CHR must be single characters.")

    def _resolve_data_dir(self) -> Path:
        """Return the directory where the database, exports and logs live."""

        data_root = os.getenv("HABITGRID_DATA_DIR", "instance")
        path = Path(data_root).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    def _build_sqlite_url(self) -> str:
        """Construct the default SQLite URL inside the data directory."""

        return f"sqlite:///{self.DATA_DIR / self.DB_FILENAME}"

    def sqlalchemy_engine_options(self) -> dict[str, Any]:
        """Expose engine kwargs for SQLModel to consume."""

        if not self.DATABASE_URL.startswith("sqlite"):
            return {}
        engine_options: dict[str, Any] = {"connect_args": {"check_same_thread": False}}
        if self.DATABASE_URL in {"sqlite://", "sqlite:///:memory:"}:
            # In-memory databases must live on a single shared connection.
            engine_options["poolclass"] = StaticPool
        return engine_options

    def glyphs(self) -> Glyphs:
        """Return the configured true/false display glyphs."""

        return Glyphs(true_chr=self.TRUE_CHR, false_chr=self.FALSE_CHR)


class DevConfig(BaseConfig):
    """Development configuration using local SQLite."""

    DEBUG = True
    TESTING = False


class TestConfig(BaseConfig):
    """Configuration for tests; uses an in-memory SQLite database."""

    __test__ = False  # keep pytest from collecting this class

    DEBUG = False
    TESTING = True

    def __init__(self) -> None:
        super().__init__()
        self.DATABASE_URL = "sqlite://"
        self.DEV_MODE = False
