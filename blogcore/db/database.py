"""
Database engine and session management.

Builds the SQLAlchemy engine from environment configuration and exposes the
FastAPI session dependency. In-memory SQLite URLs use a StaticPool so every
session shares the same connection and therefore the same schema.
"""
import logging

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from blogcore.config import get_settings

logger = logging.getLogger(__name__)


def _engine_kwargs(url: str) -> dict:
    if not url.startswith("sqlite"):
        return {}
    kwargs = {"connect_args": {"check_same_thread": False}}
    if ":memory:" in url:
        kwargs["poolclass"] = StaticPool
    return kwargs


def build_engine(url: str | None = None, echo: bool | None = None):
    """Create an engine for ``url`` (defaults to the configured database)."""
    settings = get_settings()
    url = url or settings.database_url
    echo = settings.sql_echo if echo is None else echo
    return create_engine(url, echo=echo, **_engine_kwargs(url))


engine = build_engine()

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind=None) -> None:
    """Create all blog tables on ``bind`` (defaults to the module engine)."""
    from blogcore.db import models  # local import to avoid circular import at module load

    target = bind or engine
    models.Base.metadata.create_all(bind=target)
    logger.info("schema_ready: url=%s", target.url.render_as_string(hide_password=True))


def get_db():
    """Dependency to get a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
