"""SQLAlchemy model mirroring the JSON snapshot file."""
from __future__ import annotations

from sqlalchemy import Column, DateTime, Integer, JSON, func

from .session import Base

SNAPSHOT_ROW_ID = 1


class Snapshot(Base):
    __tablename__ = "character_snapshots"

    id = Column(Integer, primary_key=True)
    pending = Column(JSON, nullable=False, default=list)
    approved = Column(JSON, nullable=False, default=list)
    next_id = Column(Integer, nullable=False, default=1)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)
