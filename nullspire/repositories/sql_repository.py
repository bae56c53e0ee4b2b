"""Snapshot persistence backed by SQLAlchemy (one row holds the whole state)."""
from __future__ import annotations

import logging
from datetime import datetime, timezone

from nullspire.db.create_tables import create_all
from nullspire.db.models import SNAPSHOT_ROW_ID, Snapshot
from nullspire.db.session import get_session
from nullspire.domain.characters import StoreState

from .base import PersistenceError

logger = logging.getLogger(__name__)


class SQLSnapshotStore:
    """
    Load/save the store state as a single row, replaced in one transaction.

    An unreachable or misconfigured database never blocks startup: table
    creation is retried on the next save, load falls back to the empty state
    and every write failure surfaces as PersistenceError.
    """

    def __init__(self, *, create_tables: bool = True) -> None:
        self._tables_ready = not create_tables
        if create_tables:
            self._ensure_tables()

    def _ensure_tables(self) -> bool:
        if self._tables_ready:
            return True
        try:
            create_all()
        except Exception as exc:  # pylint: disable=broad-except
            logger.warning("Snapshot table unavailable: %s", exc)
            return False
        self._tables_ready = True
        return True

    def load(self) -> StoreState:
        if not self._tables_ready:
            return StoreState()
        try:
            with get_session() as session:
                row = session.get(Snapshot, SNAPSHOT_ROW_ID)
                if row is None:
                    return StoreState()
                return StoreState.from_snapshot(
                    {"pending": row.pending, "approved": row.approved, "nextId": row.next_id}
                )
        except Exception as exc:  # pylint: disable=broad-except
            logger.warning("Ignoring unreadable SQL snapshot: %s", exc)
            return StoreState()

    def save(self, state: StoreState) -> None:
        if not self._ensure_tables():
            raise PersistenceError("Snapshot table unavailable")
        now = datetime.now(timezone.utc)
        try:
            data = state.to_snapshot()
            with get_session() as session:
                try:
                    row = session.get(Snapshot, SNAPSHOT_ROW_ID)
                    if row is None:
                        row = Snapshot(id=SNAPSHOT_ROW_ID)
                        session.add(row)
                    row.pending = data["pending"]
                    row.approved = data["approved"]
                    row.next_id = data["nextId"]
                    row.updated_at = now
                    session.commit()
                except Exception:
                    session.rollback()
                    raise
        except Exception as exc:  # pylint: disable=broad-except
            raise PersistenceError(f"Failed to write SQL snapshot: {exc}") from exc
