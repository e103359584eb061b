"""Database configuration and session management."""

from collections.abc import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from jobmatch.config import settings
from jobmatch.errors import StoreNotConfiguredError


class Base(DeclarativeBase):
    """SQLAlchemy declarative base."""

    pass


# Create engine lazily so the API runs without a database
_engine = None
_SessionLocal = None


def get_engine():
    """Get or create database engine."""
    global _engine
    if _engine is None:
        if not settings.database_url:
            raise StoreNotConfiguredError()
        kwargs = {"pool_pre_ping": True, "pool_recycle": 300}
        if settings.database_url.startswith("sqlite"):
            # Sessions are opened in FastAPI's threadpool
            kwargs["connect_args"] = {"check_same_thread": False}
        _engine = create_engine(settings.database_url, **kwargs)
    return _engine


def get_session_factory():
    """Get or create session factory."""
    global _SessionLocal
    if _SessionLocal is None:
        _SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=get_engine())
    return _SessionLocal


def reset_engine():
    """Drop the cached engine (after settings.database_url changes)."""
    global _engine, _SessionLocal
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _SessionLocal = None


def get_db() -> Generator[Session, None, None]:
    """FastAPI dependency for database sessions."""
    db = get_session_factory()()
    try:
        yield db
    finally:
        db.close()


def init_db():
    """Initialize database tables."""
    from jobmatch.db import tables  # noqa: F401

    Base.metadata.create_all(bind=get_engine())
