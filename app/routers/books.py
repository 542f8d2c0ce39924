"""
Books Router

CRUD endpoints for books.

Routes only bind request data and call BookService. Failures are raised as
domain exceptions and turned into the error envelope by the handlers
registered in app.main, so none of these functions builds an error response.
"""

from fastapi import APIRouter, status

from app.dependencies import BookId, BookServiceDep, Pagination
from app.models import Book
from app.schemas import BookCreate, BookResponse, BookUpdate, ErrorResponse

# =============================================================================
# Router Configuration
# =============================================================================
router = APIRouter(
    prefix="/books",
    tags=["Books"],
    responses={
        400: {"model": ErrorResponse, "description": "Invalid request"},
        500: {"model": ErrorResponse, "description": "Unexpected error"},
    },
)

NOT_FOUND_RESPONSE = {404: {"model": ErrorResponse, "description": "Book not found"}}


# =============================================================================
# CRUD Endpoints
# =============================================================================
@router.post(
    "",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Create a new book",
    description="Create a book from a title and an author.",
)
def create_book(book_data: BookCreate, service: BookServiceDep) -> None:
    """
    Create a new book.

    Returns 204 No Content; the new id is not echoed back.
    """
    service.create_book(Book(title=book_data.title, author=book_data.author))


@router.get(
    "",
    response_model=list[BookResponse],
    summary="List books",
    description="Get a page of books ordered by id.",
)
def list_books(service: BookServiceDep, pagination: Pagination) -> list[BookResponse]:
    """
    List books with pagination.

    Examples:
        GET /books
        GET /books?page=2&per_page=20

    Returns:
        JSON array of books, empty when the page is past the end
    """
    books = service.get_books(pagination.page, pagination.per_page)
    return [BookResponse.model_validate(book) for book in books]


@router.get(
    "/{book_id}",
    response_model=BookResponse,
    responses=NOT_FOUND_RESPONSE,
    summary="Get a book by ID",
)
def get_book(book_id: BookId, service: BookServiceDep) -> BookResponse:
    """Get a single book by its ID."""
    return BookResponse.model_validate(service.get_book(book_id))


@router.put(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=NOT_FOUND_RESPONSE,
    summary="Update a book",
    description="Replace the title and author of an existing book.",
)
def update_book(book_id: BookId, book_data: BookUpdate, service: BookServiceDep) -> None:
    """Update an existing book. The id in the path is never changed."""
    service.update_book(
        Book(id=book_id, title=book_data.title, author=book_data.author)
    )


@router.delete(
    "/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses=NOT_FOUND_RESPONSE,
    summary="Delete a book",
    description="Permanently delete a book from the database.",
)
def delete_book(book_id: BookId, service: BookServiceDep) -> None:
    """
    Delete a book.

    Deleting the same id twice returns 404 the second time.
    """
    service.delete_book(book_id)
