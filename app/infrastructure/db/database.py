"""
Database configuration and session management.
The engine and session factory are built once at startup and handed to
request dependencies; nothing here is created at import time.
"""

from typing import Generator, Optional
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import NullPool, StaticPool


# Create declarative base
Base = declarative_base()


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Create the SQLAlchemy engine.
    In-memory SQLite shares one connection so every session sees the same data.
    """
    if database_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if ":memory:" in database_url or database_url == "sqlite://":
            kwargs["poolclass"] = StaticPool
        return create_engine(database_url, echo=echo, **kwargs)

    return create_engine(database_url, poolclass=NullPool, echo=echo)


def create_session_factory(engine: Engine) -> sessionmaker:
    """Create the session factory bound to an engine."""
    return sessionmaker(
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
        bind=engine,
    )


def create_all_tables(engine: Engine) -> None:
    """Create every table known to the metadata."""
    from app.infrastructure.db import models  # noqa: F401

    Base.metadata.create_all(bind=engine)


def drop_all_tables(engine: Engine) -> None:
    """Drop every table known to the metadata."""
    from app.infrastructure.db import models  # noqa: F401

    Base.metadata.drop_all(bind=engine)


def session_scope(session_factory: sessionmaker) -> Generator[Session, None, None]:
    """
    Request-scoped unit of work.
    Commits when the caller finishes normally, rolls back on error.
    """
    db: Optional[Session] = session_factory()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
