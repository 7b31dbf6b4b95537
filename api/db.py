"""
Database setup for the QuickCart API.

Builds the SQLAlchemy engine and session factory from the configured URI
(SQLite by default) and provides the `get_db` request dependency plus a
`session_scope` helper for scripts.
"""
from __future__ import annotations

from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker, declarative_base

from .config import settings


def _engine_args(uri: str) -> dict[str, object]:
    if not uri.startswith("sqlite"):
        return {}
    # File-backed SQLite needs its directory to exist
    if uri.startswith("sqlite:///"):
        db_file = uri[len("sqlite:///"):]
        if db_file and not db_file.startswith(":memory:"):
            Path(db_file).parent.mkdir(parents=True, exist_ok=True)
    # Sessions are used from FastAPI's threadpool
    return {"check_same_thread": False}


engine = create_engine(settings.sql_database_uri, connect_args=_engine_args(settings.sql_database_uri))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def init_db() -> None:
    """Create any missing tables."""
    Base.metadata.create_all(bind=engine)


def get_db() -> Iterator[Session]:
    """FastAPI dependency that yields a session and always closes it."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def session_scope() -> Iterator[Session]:
    """Commit on success, roll back on error."""
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
