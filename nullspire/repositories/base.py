"""Interface shared by the snapshot persistence adapters."""

from __future__ import annotations

from typing import Protocol

from nullspire.domain.characters import StoreState


class PersistenceError(Exception):
    """Raised when a snapshot cannot be written (or read back) durably."""


class SnapshotStore(Protocol):
    def load(self) -> StoreState:
        """Return the stored state, or an empty state when absent/malformed."""
        ...

    def save(self, state: StoreState) -> None:
        """Replace the stored snapshot. Raises PersistenceError on failure."""
        ...
