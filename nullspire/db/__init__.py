"""SQL snapshot backend helpers (engine, session, table creation)."""

from .session import Base, get_engine, get_session
from .create_tables import create_all

__all__ = ["Base", "get_engine", "get_session", "create_all"]
