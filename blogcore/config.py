"""Runtime settings sourced from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


DEFAULT_DATABASE_URL = "sqlite+pysqlite:///:memory:"


@dataclass(frozen=True)
class Settings:
    database_url: str
    sql_echo: bool
    log_level: str


def _normalize_bool(value: str | None, default: bool = False) -> bool:
    """Return normalized boolean from environment-style value."""
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"", "0", "false", "no", "off"}:
        return False
    if normalized in {"1", "true", "yes", "on"}:
        return True
    return default


@lru_cache(maxsize=None)
def get_settings() -> Settings:
    """Return the cached settings read from the environment."""
    return Settings(
        database_url=os.getenv("BLOG_DATABASE_URL") or DEFAULT_DATABASE_URL,
        sql_echo=_normalize_bool(os.getenv("BLOG_SQL_ECHO"), default=False),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )


def refresh_settings_cache() -> None:
    """Invalidate cached settings (useful for tests)."""
    get_settings.cache_clear()
