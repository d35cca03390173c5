"""Tests for the SQLModel habit repository."""

from __future__ import annotations

from datetime import date

import pytest
from sqlmodel import select

from habitgrid.errors import UnknownHabitKind
from habitgrid.infra.repositories.habit import SQLModelHabitRepository
from habitgrid.models import Counter, HabitRow, HabitStatRow, Toggle, TrackEvent, ViewMode


@pytest.fixture
def repo(session_factory):
    return SQLModelHabitRepository(session_factory)


def test_empty_database(repo):
    assert repo.load_all() == []
    assert repo.count() == 0


def test_round_trip_mixed_collection(repo, counter_factory, toggle_factory):
    counter = counter_factory(stats={date(2024, 1, 1): 16, date(2024, 1, 2): 0})
    toggle = toggle_factory(stats={date(2024, 2, 1): True})
    toggle.modify(date(2024, 2, 2), TrackEvent.INCREMENT)
    toggle.modify(date(2024, 2, 2), TrackEvent.INCREMENT)
    counter.set_view_mode(ViewMode.YEAR)
    toggle.set_view_month_offset(9)

    repo.save_all([toggle, counter])
    loaded = repo.load_all()

    assert [type(h) for h in loaded] == [Toggle, Counter]
    restored_toggle, restored_counter = loaded
    assert dict(restored_counter.stats) == {date(2024, 1, 1): 16, date(2024, 1, 2): 0}
    assert restored_counter.goal == 20
    assert restored_toggle.get_by_date(date(2024, 2, 1)) is True
    assert restored_toggle.get_by_date(date(2024, 2, 2)) is False
    assert restored_toggle.goal == 1
    for habit in loaded:
        assert habit.view_mode is ViewMode.DAY
        assert habit.view_month_offset == 0


def test_save_replaces_previous_collection(repo, counter_factory):
    repo.save_all([counter_factory(name="Old", stats={date(2024, 1, 1): 1})])

    repo.save_all([counter_factory(name="New")])

    assert [h.name for h in repo.load_all()] == ["New"]
    assert repo.count() == 1


def test_rows_carry_type_tag(repo, db_session, counter_factory, toggle_factory):
    repo.save_all([counter_factory(), toggle_factory(stats={date(2024, 2, 1): True})])

    rows = db_session.exec(select(HabitRow).order_by(HabitRow.position)).all()
    stats = db_session.exec(select(HabitStatRow)).all()

    assert [(row.kind, row.position) for row in rows] == [("Count", 0), ("Bit", 1)]
    assert [(stat.occurred_on, stat.value) for stat in stats] == [(date(2024, 2, 1), 1)]


def test_unknown_kind_fails_load(repo, db_session):
    db_session.add(HabitRow(position=0, kind="Count", name="Fine", goal=3))
    db_session.add(HabitRow(position=1, kind="Stopwatch", name="Run", goal=30))
    db_session.commit()

    with pytest.raises(UnknownHabitKind) as excinfo:
        repo.load_all()

    assert excinfo.value.tag == "Stopwatch"


def test_names_need_not_be_unique(repo):
    repo.save_all([Counter("Same", 1), Toggle("Same")])

    assert [type(h) for h in repo.load_all()] == [Counter, Toggle]
