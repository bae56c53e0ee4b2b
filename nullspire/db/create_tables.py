"""Create the character snapshot table (python -m nullspire.db.create_tables)."""
from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError

from .session import Base, get_engine
from . import models  # noqa: F401  # ensure models are imported for metadata


def create_all() -> None:
    Base.metadata.create_all(bind=get_engine(), tables=[models.Snapshot.__table__])


if __name__ == "__main__":
    try:
        create_all()
        print(f"Table {models.Snapshot.__tablename__} ready.")
    except (SQLAlchemyError, RuntimeError) as exc:
        raise SystemExit(f"Failed to create tables: {exc}") from exc
