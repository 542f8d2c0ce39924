"""
pytest Fixtures for Books API Tests

This file contains shared fixtures used across all test files.

For database tests, every test function gets its own in-memory SQLite
database, built through Database.from_settings() exactly like the app builds
its own. Tables are created fresh and thrown away afterwards, so tests never
see each other's rows and ids always start at 1.
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app
# app.main builds a module-level app from get_settings() at import time
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["DEBUG"] = "false"

from collections.abc import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from app.config import Settings
from app.database import Database
from app.main import create_app
from app.models import Book


# =============================================================================
# DATABASE FIXTURES
# =============================================================================
@pytest.fixture
def settings() -> Settings:
    """Settings pointing at an in-memory SQLite database."""
    return Settings(database_url="sqlite://", debug=False, _env_file=None)


@pytest.fixture
def database(settings: Settings) -> Generator[Database, None, None]:
    """
    Create a fresh database with all tables.

    StaticPool (chosen by from_settings for in-memory SQLite) keeps a single
    connection alive, so the app and the fixtures see the same data.
    """
    database = Database.from_settings(settings)
    database.create_tables()

    yield database

    database.drop_tables()
    database.dispose()


@pytest.fixture
def db_session(database: Database) -> Generator[Session, None, None]:
    """A session on the test database for direct setup and assertions."""
    with database.session() as session:
        yield session


# =============================================================================
# APPLICATION FIXTURES
# =============================================================================
@pytest.fixture
def app(settings: Settings, database: Database) -> FastAPI:
    """Application wired to the test database."""
    return create_app(settings, database=database)


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """
    Create a test client.

    Entering the context runs the lifespan (table creation), leaving it
    runs shutdown. Overrides set by a test are removed afterwards.
    """
    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================
@pytest.fixture
def sample_book(db_session: Session) -> Book:
    """Create a sample book for testing."""
    book = Book(title="1984", author="George Orwell")
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book


@pytest.fixture
def multiple_books(db_session: Session) -> list[Book]:
    """Create five books (ids 1-5) for pagination testing."""
    books = [Book(title=f"Book {i}", author="Author") for i in range(1, 6)]
    db_session.add_all(books)
    db_session.commit()
    for book in books:
        db_session.refresh(book)

    return books
