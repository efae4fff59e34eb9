"""
Database Configuration Module

SQLAlchemy 2.0 setup for the database-backed record store.

Session Management Pattern
==========================
The "session per request" pattern is used:
1. Request arrives -> create a new session
2. The record stores use that session for the whole request
3. Close the session when the request ends

create_engine() does not connect until the first query, so importing
this module is harmless when the in-memory record store is active.
"""

from collections.abc import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from library_graph.config import get_settings

settings = get_settings()


# =============================================================================
# Database Engine
# =============================================================================
# SQLite does not accept the connection pool sizing options, so they are
# only passed for server databases.

engine_options: dict = {
    "pool_pre_ping": True,
    "echo": settings.debug,
}
if settings.is_sqlite:
    engine_options["connect_args"] = {"check_same_thread": False}
else:
    engine_options["pool_size"] = settings.db_pool_size
    engine_options["max_overflow"] = settings.db_max_overflow

engine = create_engine(settings.database_url, **engine_options)


# =============================================================================
# Session Factory
# =============================================================================
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)


# =============================================================================
# Base Model Class
# =============================================================================
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Alembic uses Base.metadata to discover tables for migrations.
    """
    pass


# =============================================================================
# Dependency Injection
# =============================================================================
def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI.

    Yields a new session and closes it when the request ends, even if
    the request failed.

    Yields:
        SQLAlchemy Session instance
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# =============================================================================
# Utility Functions
# =============================================================================
def create_tables() -> None:
    """
    Create all database tables.

    Used at startup for the database record store and by the seed script.
    Use Alembic migrations for schema changes on long-lived databases.
    """
    # Register models with Base.metadata before creating tables
    import library_graph.models  # noqa: F401

    Base.metadata.create_all(bind=engine)


def drop_tables() -> None:
    """
    Drop all database tables.

    DANGER: This deletes all data! Only use in development and tests.
    """
    import library_graph.models  # noqa: F401

    Base.metadata.drop_all(bind=engine)
