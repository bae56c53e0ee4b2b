"""
Configuration helpers for the Nullspire backend.

Routers/services read the typed Settings object instead of fetching
os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

DEFAULT_DATA_FILE = Path(__file__).resolve().parents[2] / "data" / "characters.json"
DEFAULT_CORS_ORIGINS = (
    "https://nullspire-frontend-pi.vercel.app",
    "https://nullspire-frontend-ktmwv3kmz-dustinofbowes-projects.vercel.app",
)


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    admin_password: str
    admin_password_hash: str
    storage_backend: str
    data_file: Path
    database_url: str
    cors_origins: tuple[str, ...]
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _list(value: str | None, default: tuple[str, ...]) -> tuple[str, ...]:
        if value is None:
            return default
        return tuple(item.strip().rstrip("/") for item in value.split(",") if item.strip())

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        admin_password=os.getenv("ADMIN_PASSWORD", "ChatGPT123"),
        admin_password_hash=(os.getenv("ADMIN_PASSWORD_HASH") or "").strip(),
        storage_backend=(os.getenv("STORAGE_BACKEND") or "json").strip().lower(),
        data_file=Path(os.getenv("DATA_FILE") or DEFAULT_DATA_FILE),
        database_url=(os.getenv("DATABASE_URL") or "").strip(),
        cors_origins=_list(os.getenv("CORS_ORIGINS"), DEFAULT_CORS_ORIGINS),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
