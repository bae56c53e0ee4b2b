"""
JSON-file persistence adapter.

The whole store state lives in one file. Writes go to a temporary file in the
same directory which then replaces the target, so readers only ever see the
old or the new complete snapshot.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

from nullspire.domain.characters import StoreState

from .base import PersistenceError

logger = logging.getLogger(__name__)


class JsonSnapshotStore:
    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    def load(self) -> StoreState:
        if not self.path.exists():
            return StoreState()
        try:
            with self.path.open("r", encoding="utf-8") as f:
                return StoreState.from_snapshot(json.load(f))
        except (OSError, ValueError, KeyError, TypeError, OverflowError, RecursionError) as exc:
            logger.warning("Ignoring unreadable snapshot %s: %s", self.path, exc)
            return StoreState()

    def save(self, state: StoreState) -> None:
        tmp_name = None
        try:
            payload = json.dumps(state.to_snapshot(), ensure_ascii=False, indent=2)
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.path)
            tmp_name = None
        except (OSError, TypeError, ValueError, RecursionError) as exc:
            raise PersistenceError(f"Failed to write snapshot {self.path}: {exc}") from exc
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    pass
