"""
Book Service

Business rules for books, sitting between the router and the repository:
- title and author must be non-empty before anything is written
- page / per_page are normalized and turned into offset / limit

The service holds no state of its own and never retries. Errors raised by
the repository (NotFoundError, StorageError) pass through untouched.
"""

import logging

from app.exceptions import ValidationError
from app.models import Book
from app.repositories import BookRepository

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 10


def validate_book(book: Book) -> None:
    """
    Check the title and author invariant.

    Title is checked first, so a book missing both reports the title.

    Raises:
        ValidationError: If title or author is empty
    """
    if not book.title:
        raise ValidationError("title")
    if not book.author:
        raise ValidationError("author")


def page_to_offset(page: int, per_page: int) -> tuple[int, int]:
    """
    Convert 1-based page numbers into (offset, limit).

    Page 1 → skip 0 items, page 2 → skip per_page items, and so on.
    page < 1 is treated as the first page; per_page <= 0 falls back to
    DEFAULT_PER_PAGE. There is no upper bound on per_page here.
    """
    if page < 1:
        page = DEFAULT_PAGE
    if per_page <= 0:
        per_page = DEFAULT_PER_PAGE
    return (page - 1) * per_page, per_page


class BookService:
    """Use cases for the book resource."""

    def __init__(self, repository: BookRepository) -> None:
        self.repository = repository

    def create_book(self, book: Book) -> None:
        validate_book(book)
        self.repository.create(book)
        logger.info(f"Created book '{book.title}' by {book.author}")

    def get_book(self, book_id: int) -> Book:
        return self.repository.get_by_id(book_id)

    def get_books(self, page: int, per_page: int) -> list[Book]:
        offset, limit = page_to_offset(page, per_page)
        return self.repository.list(offset, limit)

    def update_book(self, book: Book) -> None:
        validate_book(book)
        self.repository.update(book)
        logger.info(f"Updated book {book.id}")

    def delete_book(self, book_id: int) -> None:
        self.repository.delete(book_id)
        logger.info(f"Deleted book {book_id}")
