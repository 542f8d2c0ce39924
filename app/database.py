"""
Database Configuration Module

This module sets up SQLAlchemy 2.0 for the Books API.

Session Management Pattern
==========================
The engine and session factory live on a Database handle that the application
factory builds from settings and stores on app.state. Nothing here is created
at import time.

We use the "session per request" pattern:
1. Request arrives → open a session from the handle
2. Repository operations run in that session, each write commits on its own
3. Close the session when the request ends

This is implemented using FastAPI's dependency injection (get_db).
"""

import logging
from collections.abc import Generator, Iterator
from contextlib import contextmanager
from typing import Any

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.config import Settings

logger = logging.getLogger(__name__)


# =============================================================================
# Base Model Class
# =============================================================================
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

        class Book(Base):
            __tablename__ = "books"
            ...
    """
    pass


# =============================================================================
# Database Handle
# =============================================================================
class Database:
    """
    Owns the SQLAlchemy engine and session factory for one application.

    Key engine parameters (set by from_settings):
    - pool_size / max_overflow: connection pool sizing (server databases only)
    - pool_pre_ping: test connection health before using
    - echo: log all SQL statements (debug mode)

    Example:
        database = Database.from_settings(settings)
        with database.session() as db:
            db.execute(...)
        database.dispose()
    """

    def __init__(self, url: str, *, echo: bool = False, **engine_kwargs: Any) -> None:
        self.url = url
        self.engine = create_engine(url, echo=echo, **engine_kwargs)
        self._session_factory = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=self.engine,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        """
        Build a Database handle from application settings.

        SQLite URLs get a single shared connection for in-memory databases
        (otherwise each connection would see its own empty database) and
        no pool sizing arguments, which SQLite pools reject.
        """
        url = settings.database_url_resolved
        parsed = make_url(url)

        if parsed.get_backend_name() == "sqlite":
            engine_kwargs: dict[str, Any] = {
                "connect_args": {"check_same_thread": False},
            }
            if parsed.database in (None, "", ":memory:"):
                engine_kwargs["poolclass"] = StaticPool
        else:
            engine_kwargs = {
                "pool_size": settings.db_pool_size,
                "max_overflow": settings.db_max_overflow,
                "pool_pre_ping": True,
            }

        return cls(url, echo=settings.debug, **engine_kwargs)

    @contextmanager
    def session(self) -> Iterator[Session]:
        """
        Open a session and close it when the block exits.

        The finally block ensures cleanup happens even if an exception occurs.
        """
        db = self._session_factory()
        try:
            yield db
        finally:
            db.close()

    def create_tables(self) -> None:
        """
        Create all missing tables.

        This is not a migration tool: existing tables are left untouched.
        """
        Base.metadata.create_all(bind=self.engine)

    def drop_tables(self) -> None:
        """Drop all tables. Only meant for tests."""
        Base.metadata.drop_all(bind=self.engine)

    def ping(self) -> bool:
        """Return True if the database answers a trivial query."""
        try:
            with self.engine.connect() as connection:
                connection.execute(text("SELECT 1"))
        except SQLAlchemyError as e:
            logger.warning(f"Database ping failed: {e}")
            return False
        return True

    def dispose(self) -> None:
        """Close every pooled connection."""
        self.engine.dispose()


# =============================================================================
# Dependency Injection
# =============================================================================
def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI.

    Code before yield opens a session from the Database handle on app.state,
    code after yield closes it once the request is done.

    Yields:
        SQLAlchemy Session instance
    """
    database: Database = request.app.state.database
    with database.session() as db:
        yield db
