"""Tests for environment-driven configuration."""

from __future__ import annotations

import pytest
from sqlalchemy.pool import StaticPool

from habitgrid.config import BaseConfig, TestConfig
from habitgrid.models import Glyphs


def test_defaults(isolated_data_dir):
    config = BaseConfig()

    assert config.DATA_DIR == isolated_data_dir.resolve()
    assert config.DATA_DIR.is_dir()
    assert config.DATABASE_URL == f"sqlite:///{config.DATA_DIR / 'habitgrid.db'}"
    assert config.EXPORT_FILE == config.DATA_DIR / "habit_record.json"
    assert config.glyphs() == Glyphs("✓", "✗")


def test_glyphs_from_environment(monkeypatch):
    monkeypatch.setenv("HABITGRID_TRUE_CHR", "#")
    monkeypatch.setenv("HABITGRID_FALSE_CHR", ".")

    assert BaseConfig().glyphs() == Glyphs(true_chr="#", false_chr=".")


def test_multi_character_glyph_rejected(monkeypatch):
    monkeypatch.setenv("HABITGRID_TRUE_CHR", "yes")

    with pytest.raises(ValueError):
        BaseConfig()


@pytest.mark.parametrize(("raw", "expected"), [("0", False), ("false", False), ("on", True), ("YES", True)])
def test_dev_mode_flag(monkeypatch, raw, expected):
    monkeypatch.setenv("HABITGRID_DEV_MODE", raw)

    assert BaseConfig().DEV_MODE is expected


def test_database_url_override(monkeypatch):
    monkeypatch.setenv("HABITGRID_DATABASE_URL", "postgresql://localhost/habits")

    config = BaseConfig()

    assert config.DATABASE_URL == "postgresql://localhost/habits"
    assert config.sqlalchemy_engine_options() == {}


def test_test_config_uses_shared_memory_database():
    config = TestConfig()

    assert config.DATABASE_URL == "sqlite://"
    assert config.DEV_MODE is False
    assert config.sqlalchemy_engine_options()["poolclass"] is StaticPool
