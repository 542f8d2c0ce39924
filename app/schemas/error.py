"""
Error Envelope Schema

Every failed request returns the same JSON shape:

    {"code": "NOT_FOUND", "message": "Book not found"}
"""

from enum import Enum

from pydantic import BaseModel, Field


class ErrorCode(str, Enum):
    """Machine-readable error codes used in the envelope."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class ErrorResponse(BaseModel):
    """Schema for error responses."""

    code: ErrorCode = Field(..., description="Error code", examples=["NOT_FOUND"])
    message: str = Field(..., description="Error message", examples=["Book not found"])
