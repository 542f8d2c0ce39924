"""
Domain Exceptions

Raised by the repository and service layers, translated into HTTP responses
by the exception handlers registered in app.main.

Hierarchy:
- DomainError
  - ValidationError: caller input breaks a book invariant (field-identified)
  - NotFoundError: the referenced book does not exist
  - StorageError: any other persistence fault (opaque to API clients)

Routers never catch these; the handlers in create_app() map them to the
{"code": ..., "message": ...} error envelope.
"""


class DomainError(Exception):
    """Base class for all domain exceptions."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(DomainError):
    """Raised when a required book field is missing or empty."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"{field} is required")


class NotFoundError(DomainError):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity: str, identifier: object) -> None:
        self.entity = entity
        self.identifier = identifier
        super().__init__(f"{entity} with id {identifier} not found")

    @classmethod
    def for_book(cls, book_id: int) -> "NotFoundError":
        """Single constructor for both empty-select and zero-rows-affected cases."""
        return cls("Book", book_id)


class StorageError(DomainError):
    """Raised when the database fails for any reason other than a missing row."""
