"""
Character moderation use cases (submit, review, search, edit).

The service owns the pending/approved collections and the id counter. Every
mutation is written through to the snapshot store before the call returns;
a failed write is logged and the in-memory change stands.
"""

from __future__ import annotations

import copy
import logging
import threading
from typing import Any

from nullspire.domain.characters import EDITABLE_FIELDS, Character, StoreState, find_index
from nullspire.repositories.base import PersistenceError, SnapshotStore

logger = logging.getLogger(__name__)


class CharacterError(Exception):
    """Base exception for the moderation workflow."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(CharacterError):
    """Raised when a submission misses a field or an edit names an unknown field."""


class NotFoundError(CharacterError):
    """Raised when an id is not in the expected collection, or a search matches nothing."""


class CharacterService:
    """Record store for submitted characters."""

    def __init__(self, store: SnapshotStore, state: StoreState | None = None) -> None:
        self._store = store
        self._state = state if state is not None else store.load()
        self._lock = threading.Lock()

    # -------------------------- public --------------------------
    def submit(self, name: Any, level: Any, organization: Any, profession: Any) -> Character:
        if not name or not level or not organization or not profession:
            raise ValidationError("Missing fields")
        with self._lock:
            record = Character(
                id=self._state.next_id,
                name=name,
                level=level,
                organization=organization,
                profession=profession,
            )
            self._state.next_id += 1
            self._state.pending.append(record)
            self._persist()
            logger.info("Character %s submitted for review", record.id)
            return copy.copy(record)

    def list_approved(self, name_query: str | None = "") -> list[Character]:
        # Zero matches is reported as not-found, not as an empty list.
        query = (name_query or "").lower()
        with self._lock:
            matches = [
                copy.copy(c)
                for c in self._state.approved
                if isinstance(c.name, str) and query in c.name.lower()
            ]
        if not matches:
            raise NotFoundError("Character not found.")
        return matches

    # -------------------------- admin --------------------------
    def list_pending(self) -> list[Character]:
        with self._lock:
            return [copy.copy(c) for c in self._state.pending]

    def list_approved_all(self) -> list[Character]:
        with self._lock:
            return [copy.copy(c) for c in self._state.approved]

    def approve(self, char_id: Any) -> Character:
        with self._lock:
            idx = find_index(self._state.pending, char_id)
            if idx == -1:
                raise NotFoundError("Pending character not found")
            record = self._state.pending.pop(idx)
            self._state.approved.append(record)
            self._persist()
            logger.info("Character %s approved", record.id)
            return copy.copy(record)

    def reject(self, char_id: Any) -> None:
        with self._lock:
            idx = find_index(self._state.pending, char_id)
            if idx == -1:
                raise NotFoundError("Pending character not found")
            record = self._state.pending.pop(idx)
            self._persist()
            logger.info("Character %s rejected", record.id)

    def delete_approved(self, char_id: Any) -> None:
        with self._lock:
            idx = find_index(self._state.approved, char_id)
            if idx == -1:
                raise NotFoundError("Character not found")
            record = self._state.approved.pop(idx)
            self._persist()
            logger.info("Character %s deleted", record.id)

    def edit_approved(self, char_id: Any, field: Any, value: Any) -> Character:
        with self._lock:
            idx = find_index(self._state.approved, char_id)
            if idx == -1:
                raise NotFoundError("Character not found")
            if field not in EDITABLE_FIELDS:
                raise ValidationError("Invalid field")
            record = self._state.approved[idx]
            setattr(record, field, value)
            self._persist()
            logger.info("Character %s field %s updated", record.id, field)
            return copy.copy(record)

    # -------------------------- helpers --------------------------
    def snapshot(self) -> StoreState:
        """Deep copy of the current state (pending, approved, next id)."""
        with self._lock:
            return copy.deepcopy(self._state)

    def _persist(self) -> None:
        try:
            self._store.save(self._state)
        except PersistenceError as exc:
            logger.warning("Snapshot save failed, keeping in-memory change: %s", exc)
