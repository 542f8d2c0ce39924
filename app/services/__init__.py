"""
Services Package

This package contains business logic services that are:
- Separate from HTTP handling (routers)
- Separate from SQL (repositories)
- Easier to test in isolation

Current services:
- books.py: Book validation and pagination rules
"""

from app.services.books import BookService

__all__ = ["BookService"]
