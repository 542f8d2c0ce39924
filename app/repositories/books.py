"""
Book Repository

SQL access for the books table.

Not-found is detected two ways depending on the statement:
- SELECT of a single row: the result is empty (NoResultFound)
- UPDATE / DELETE: the affected-row count is zero

Both end up as NotFoundError.for_book(), so callers only need one branch.
Every other SQLAlchemy failure is wrapped in StorageError, with the original
exception chained for logging.
"""

import logging

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import NoResultFound, SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.sql.expression import Executable

from app.exceptions import NotFoundError, StorageError
from app.models import Book

logger = logging.getLogger(__name__)

# Writes go through the Core table so the result always carries a rowcount
books_table = Book.__table__


class BookRepository:
    """
    Repository for Book rows.

    Each write commits on its own; there are no transactions spanning
    several operations. Nothing here validates title or author.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    def create(self, book: Book) -> None:
        """
        Insert a new book.

        The generated id is not written back to the book instance.

        Raises:
            StorageError: If the insert fails
        """
        stmt = insert(books_table).values(title=book.title, author=book.author)
        self._write(stmt, "create book")

    def get_by_id(self, book_id: int) -> Book:
        """
        Fetch one book by primary key.

        Raises:
            NotFoundError: If no row has this id
            StorageError: If the query fails
        """
        stmt = select(Book).where(Book.id == book_id)
        try:
            return self.db.execute(stmt).scalar_one()
        except NoResultFound:
            raise NotFoundError.for_book(book_id) from None
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageError(f"Failed to get book {book_id}") from e

    def list(self, offset: int, limit: int) -> list[Book]:
        """
        Fetch a page of books ordered by ascending id.

        All or nothing: if any row fails to load, no rows are returned.

        Args:
            offset: Number of rows to skip
            limit: Maximum number of rows to return

        Returns:
            List of books, empty when the page is past the end

        Raises:
            StorageError: If the query or any row fetch fails
        """
        stmt = select(Book).order_by(Book.id.asc()).offset(offset).limit(limit)
        try:
            return list(self.db.execute(stmt).scalars().all())
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageError(
                f"Failed to list books (offset={offset}, limit={limit})"
            ) from e

    def update(self, book: Book) -> None:
        """
        Replace title and author of the row matching book.id.

        Raises:
            NotFoundError: If no row was updated
            StorageError: If the update fails
        """
        stmt = (
            update(books_table)
            .where(books_table.c.id == book.id)
            .values(title=book.title, author=book.author)
        )
        if self._write(stmt, f"update book {book.id}") == 0:
            raise NotFoundError.for_book(book.id)

    def delete(self, book_id: int) -> None:
        """
        Delete the row matching book_id.

        Raises:
            NotFoundError: If no row was deleted
            StorageError: If the delete fails
        """
        stmt = delete(books_table).where(books_table.c.id == book_id)
        if self._write(stmt, f"delete book {book_id}") == 0:
            raise NotFoundError.for_book(book_id)

    def _write(self, stmt: Executable, action: str) -> int:
        """Execute and commit a single write statement, returning affected rows."""
        try:
            result = self.db.execute(stmt)
            rowcount = result.rowcount
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageError(f"Failed to {action}") from e

        logger.debug(f"{action}: {rowcount} row(s) affected")
        return rowcount
