"""
Configuration helpers for the Series API.

Settings are read from environment variables once and cached, so routers and
services do not fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    database_path: str
    host: str
    port: int
    log_level: str
    log_file: str | None


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str | None, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        database_path=os.getenv("SERIES_DB_PATH") or "database.json",
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int(os.getenv("PORT", "3333"), 3333),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        log_file=os.getenv("LOG_FILE") or None,
    )
