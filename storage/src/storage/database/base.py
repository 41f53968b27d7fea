"""Engine and session management."""

from contextlib import contextmanager
from typing import Iterator

from loguru import logger
from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

_engine: Engine = None
_session_factory: sessionmaker = None


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def init_db(database_url: str, create_tables: bool = True) -> Engine:
    """Create the engine and session factory; optionally create missing tables."""
    global _engine, _session_factory
    kwargs = {}
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            from sqlalchemy.pool import StaticPool
            kwargs["poolclass"] = StaticPool
    _engine = create_engine(database_url, **kwargs)
    if database_url.startswith("sqlite"):
        event.listen(_engine, "connect", _enable_sqlite_foreign_keys)
    _session_factory = sessionmaker(bind=_engine, expire_on_commit=False)
    if create_tables:
        # Entities register themselves on Base.metadata when imported.
        from storage.entity import Base
        Base.metadata.create_all(_engine)
    logger.info("Database initialized url={}", _engine.url.render_as_string(hide_password=True))
    return _engine


def get_engine() -> Engine:
    if _engine is None:
        raise RuntimeError("Database not initialized; call init_db() first")
    return _engine


@contextmanager
def get_db() -> Iterator[Session]:
    """Session scope: commits when the block exits cleanly, rolls back otherwise."""
    if _session_factory is None:
        raise RuntimeError("Database not initialized; call init_db() first")
    session = _session_factory()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def is_initialized() -> bool:
    return _session_factory is not None


def close_db() -> None:
    global _engine, _session_factory
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _session_factory = None
