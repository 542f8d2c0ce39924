"""
Book Model

The only table of the Books API.

SQLAlchemy 2.0 Features Used:
- mapped_column(): New way to define columns with full type support
- Mapped[]: Type hint wrapper for SQLAlchemy columns
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Book(Base):
    """
    Book model representing books in the library.

    Table: books

    Fields:
    - id: Assigned by the database on insert, never changed afterwards
    - title: Book title (required)
    - author: Author name (required)

    Example:
        book = Book(title="1984", author="George Orwell")
    """

    __tablename__ = "books"

    # primary_key=True creates an auto-incrementing primary key
    id: Mapped[int] = mapped_column(primary_key=True)

    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Book title"
    )

    author: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Author name"
    )

    def __repr__(self) -> str:
        return f"Book(id={self.id}, title='{self.title}', author='{self.author}')"
