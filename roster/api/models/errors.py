"""Error response models for consistent API error handling."""

from enum import Enum

from pydantic import BaseModel


class ErrorCode(str, Enum):
    """Standardized error codes for API responses."""

    INVALID_REQUEST = "INVALID_REQUEST"
    """Request validation failed (malformed JSON, missing fields, etc.)."""

    INVALID_UPLOAD = "INVALID_UPLOAD"
    """Upload missing, header mismatch, or a malformed row."""

    STUDENT_NOT_FOUND = "STUDENT_NOT_FOUND"
    """The specified student id does not exist."""

    STORAGE_UNAVAILABLE = "STORAGE_UNAVAILABLE"
    """The key-value store could not be reached or rejected a command."""

    INTERNAL_ERROR = "INTERNAL_ERROR"
    """An unexpected internal error occurred."""


class ErrorDetail(BaseModel):
    """Field-level error information for validation failures."""

    field: str | None = None
    message: str


class ErrorBody(BaseModel):
    """Error body content for API error responses."""

    code: ErrorCode
    message: str
    details: list[ErrorDetail] | None = None

    line: int | None = None
    """Line of the upload row that failed, for import errors."""

    rows_committed: int | None = None
    """Rows written before an import failed."""


class ErrorResponse(BaseModel):
    """Standard error response format for all API errors.

    Example:
        {
            "error": {
                "code": "STUDENT_NOT_FOUND",
                "message": "Student 42 not found"
            }
        }
    """

    error: ErrorBody
