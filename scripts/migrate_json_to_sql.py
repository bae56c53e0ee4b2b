"""One-off migration script: JSON snapshot (characters.json) -> SQL backend."""
from __future__ import annotations

import argparse
import json
from pathlib import Path
import sys

# Garantir que o pacote nullspire seja importavel quando rodado diretamente
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from nullspire.core.config import get_settings
from nullspire.domain.characters import StoreState
from nullspire.repositories.sql_repository import SQLSnapshotStore


def _load_json(path: Path) -> StoreState:
    if not path.exists():
        raise SystemExit(f"File not found: {path}")
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)
    try:
        return StoreState.from_snapshot(data)
    except (KeyError, TypeError, ValueError) as exc:
        raise SystemExit(f"Malformed snapshot {path}: {exc}") from exc


def migrate(source: Path) -> StoreState:
    state = _load_json(source)
    SQLSnapshotStore().save(state)
    return state


def main() -> None:
    ap = argparse.ArgumentParser(description="Copy the JSON snapshot into DATABASE_URL")
    ap.add_argument("--source", help="JSON snapshot path (default: DATA_FILE)")
    args = ap.parse_args()

    source = Path(args.source) if args.source else get_settings().data_file
    state = migrate(source)
    print("JSON snapshot migrated to SQL successfully.")
    print(f"  Pending: {len(state.pending)}")
    print(f"  Approved: {len(state.approved)}")
    print(f"  Next id: {state.next_id}")


if __name__ == "__main__":
    main()
