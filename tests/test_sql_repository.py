"""
Smoke tests for the SQL snapshot backend against a temporary SQLite database.
"""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Garante que o pacote nullspire seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from nullspire.core import config as core_config
from nullspire.db import models
from nullspire.db import session as db_session
from nullspire.domain.characters import Character, StoreState
from nullspire.repositories.base import PersistenceError
from nullspire.repositories.sql_repository import SQLSnapshotStore
from nullspire.services.character_service import CharacterService


@pytest.fixture()
def temp_db(tmp_path, monkeypatch):
    """Configura um SQLite temporário e garante teardown completo para não deixar o arquivo bloqueado no Windows."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    # limpa caches para forçar re-leitura de envs
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]

    yield db_file

    engine = db_session.get_engine()
    try:
        models.Base.metadata.drop_all(bind=engine)
    except Exception:
        pass
    try:
        engine.dispose()
    except Exception:
        pass
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]
    core_config.get_settings.cache_clear()


def test_empty_database_loads_initial_state(temp_db):
    store = SQLSnapshotStore()
    assert store.load() == StoreState()


def test_round_trip_and_overwrite(temp_db):
    store = SQLSnapshotStore()
    state = StoreState(
        pending=[Character(2, "Orin", "12", "Order", "Smith")],
        approved=[Character(1, "Zara", 5, "Guild", "Mage")],
        next_id=3,
    )
    store.save(state)
    assert store.load() == state

    state.approved.append(state.pending.pop())
    state.next_id = 5
    store.save(state)

    reloaded = SQLSnapshotStore().load()
    assert reloaded == state
    with db_session.get_session() as session:
        assert session.query(models.Snapshot).count() == 1


def test_service_writes_through_to_sql(temp_db):
    svc = CharacterService(SQLSnapshotStore())
    svc.submit("Zara", 5, "Guild", "Mage")
    svc.approve(1)

    restored = CharacterService(SQLSnapshotStore())
    assert [c.name for c in restored.list_approved("zar")] == ["Zara"]
    assert restored.snapshot().next_id == 2


def test_unusable_database_falls_back_and_reports_save_failure(tmp_path, monkeypatch):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{blocker}/sub/db.sqlite")
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]
    try:
        store = SQLSnapshotStore()
        assert store.load() == StoreState()
        with pytest.raises(PersistenceError):
            store.save(StoreState(next_id=2))
    finally:
        db_session.get_engine.cache_clear()
        db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]
        core_config.get_settings.cache_clear()


def test_missing_database_url_falls_back(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]
    try:
        store = SQLSnapshotStore()
        assert store.load() == StoreState()
        with pytest.raises(PersistenceError):
            store.save(StoreState())
    finally:
        db_session.get_engine.cache_clear()
        db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]
        core_config.get_settings.cache_clear()
