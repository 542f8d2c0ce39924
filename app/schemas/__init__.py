"""
Pydantic Schemas Package

This package contains Pydantic models for request/response validation.

Schema Naming Convention:
- XxxBase: Shared fields between create/update
- XxxCreate: Fields required when creating a new record
- XxxUpdate: Fields accepted when updating a record
- XxxResponse: Fields returned in API responses
"""

from app.schemas.book import (
    BookCreate,
    BookResponse,
    BookUpdate,
)
from app.schemas.error import ErrorCode, ErrorResponse

__all__ = [
    # Book schemas
    "BookCreate",
    "BookUpdate",
    "BookResponse",
    # Error envelope
    "ErrorCode",
    "ErrorResponse",
]
