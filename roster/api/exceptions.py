"""API exception hierarchy for consistent error handling.

All API exceptions inherit from RosterAPIError, which provides
status_code and error_code attributes used by the global exception
handler to generate consistent error responses.
"""

from roster.api.models.errors import ErrorCode, ErrorDetail


class RosterAPIError(Exception):
    """Base exception for all API errors.

    Subclasses set status_code and error_code to define the HTTP response.
    """

    status_code: int = 500
    error_code: ErrorCode = ErrorCode.INTERNAL_ERROR

    def __init__(self, message: str, details: list[ErrorDetail] | None = None) -> None:
        self.message = message
        self.details = details
        super().__init__(message)


class InvalidRequestError(RosterAPIError):
    """Raised when a request body fails validation."""

    status_code = 400
    error_code = ErrorCode.INVALID_REQUEST


class InvalidUploadError(RosterAPIError):
    """Raised when an upload is missing or its content is malformed."""

    status_code = 400
    error_code = ErrorCode.INVALID_UPLOAD

    def __init__(
        self,
        message: str,
        line: int | None = None,
        rows_committed: int | None = None,
    ) -> None:
        super().__init__(message)
        self.line = line
        self.rows_committed = rows_committed


class StudentNotFoundError(RosterAPIError):
    """Raised when a student id doesn't exist."""

    status_code = 404
    error_code = ErrorCode.STUDENT_NOT_FOUND


class StorageUnavailableError(RosterAPIError):
    """Raised when the key-value store fails."""

    status_code = 500
    error_code = ErrorCode.STORAGE_UNAVAILABLE

    def __init__(self, message: str, rows_committed: int | None = None) -> None:
        super().__init__(message)
        self.rows_committed = rows_committed
