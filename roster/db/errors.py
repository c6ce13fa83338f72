"""Store error hierarchy.

Store implementations wrap backend-specific errors in one of these
classes so callers never see a raw Redis exception.
"""


class StoreError(Exception):
    """Base exception for all store errors."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.cause = cause


class StorageUnavailable(StoreError):
    """Raised when the key-value store is unreachable or a command fails.

    Examples:
        - Redis server down or refusing connections
        - Socket timeout
        - Transaction aborted by the server
    """

    pass


class NotFoundError(StoreError):
    """Raised when an operation targets a record that does not exist.

    Plain lookups return None instead; this is for operations such as
    updates that require the record to be present.
    """

    pass


class ValidationError(StoreError):
    """Raised on invalid record data.

    Examples:
        - Empty identifier
        - Required field missing or empty
        - Upload header does not match the expected schema
    """

    def __init__(
        self,
        message: str,
        fields: list[str] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, cause=cause)
        self.fields = fields or []
