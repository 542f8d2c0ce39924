"""
Repositories Package

Persistence adapters. Each repository wraps a SQLAlchemy Session and turns
database outcomes into domain exceptions (NotFoundError, StorageError).
"""

from app.repositories.books import BookRepository

__all__ = ["BookRepository"]
