"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.
FastAPI's Depends() function manages their lifecycle.

The book endpoints are wired as a chain:

    get_db (session per request)
      → get_book_repository (BookRepository over that session)
        → get_book_service (BookService over that repository)

Tests swap any link through app.dependency_overrides.
"""

from typing import Annotated

from fastapi import Depends, Path, Query
from sqlalchemy.orm import Session

from app.database import get_db
from app.repositories import BookRepository
from app.services import BookService

# =============================================================================
# Type Aliases with Annotated
# =============================================================================
# Instead of writing:
#   def get_books(db: Session = Depends(get_db)):
#
# You can write:
#   def get_books(db: DbSession):

DbSession = Annotated[Session, Depends(get_db)]

# Ids and row offsets are stored as signed 64-bit integers (BIGINT)
MAX_DB_INT = 2**63 - 1
MAX_PER_PAGE = 100
MAX_PAGE = MAX_DB_INT // MAX_PER_PAGE

BookId = Annotated[
    int,
    Path(ge=-MAX_DB_INT - 1, le=MAX_DB_INT, description="Book ID"),
]


# =============================================================================
# Book Layers
# =============================================================================
def get_book_repository(db: DbSession) -> BookRepository:
    """Repository bound to the request's database session."""
    return BookRepository(db)


def get_book_service(
    repository: Annotated[BookRepository, Depends(get_book_repository)],
) -> BookService:
    """Service bound to the request's repository."""
    return BookService(repository)


BookServiceDep = Annotated[BookService, Depends(get_book_service)]


# =============================================================================
# Pagination Parameters
# =============================================================================
class PaginationParams:
    """
    Query parameters for the book listing.

    - page: Which page to return (1-indexed)
    - per_page: How many items per page (1 to 100)

    Out-of-range values are rejected here, before the service is called.
    Converting them to offset/limit is the service's job.
    """

    def __init__(
        self,
        page: int = Query(
            default=1,
            ge=1,
            le=MAX_PAGE,  # keeps the row offset within BIGINT
            description="Page number (1-indexed)",
            examples=[1, 2, 3],
        ),
        per_page: int = Query(
            default=10,
            ge=1,
            le=MAX_PER_PAGE,  # Limit to prevent abuse
            description="Number of items per page (max 100)",
            examples=[10, 25, 50],
        ),
    ) -> None:
        self.page = page
        self.per_page = per_page


Pagination = Annotated[PaginationParams, Depends()]
