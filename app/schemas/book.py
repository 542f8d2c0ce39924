"""
Book Pydantic Schemas

Request bodies only check that title and author are present strings.
Emptiness is a business rule enforced by BookService, so an empty string
passes binding and is rejected one layer down with a field-specific message.

Length limits apply to request bodies only; responses return whatever the
database holds.
"""

from pydantic import BaseModel, ConfigDict, Field


class BookBase(BaseModel):
    """Base schema with shared book fields."""

    title: str = Field(
        ...,
        description="Book title",
        examples=["The Great Gatsby", "1984"],
    )

    author: str = Field(
        ...,
        description="Author name",
        examples=["F. Scott Fitzgerald", "George Orwell"],
    )


class BookIn(BookBase):
    """Request fields, limited to the column size of the books table."""

    title: str = Field(
        ...,
        max_length=255,
        description="Book title",
        examples=["The Great Gatsby", "1984"],
    )

    author: str = Field(
        ...,
        max_length=255,
        description="Author name",
        examples=["F. Scott Fitzgerald", "George Orwell"],
    )


class BookCreate(BookIn):
    """
    Schema for creating a new book.

    Example request body:
    {
        "title": "1984",
        "author": "George Orwell"
    }
    """


class BookUpdate(BookIn):
    """
    Schema for replacing a book's title and author.

    Both fields are required (PUT semantics). The id comes from the path.
    """


class BookResponse(BookBase):
    """Schema for book responses."""

    id: int = Field(..., description="Unique identifier")

    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "title": "1984",
                "author": "George Orwell",
            }
        },
    )
