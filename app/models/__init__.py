"""
SQLAlchemy Models Package

This package contains the database models for the Books API.

Import all models here to:
1. Make them available as: from app.models import Book
2. Register their tables on Base.metadata before create_tables() runs
"""

from app.models.book import Book

__all__ = [
    "Book",
]
