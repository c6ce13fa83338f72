"""Bulk import result models."""

from enum import Enum

from pydantic import BaseModel


class ImportErrorCode(str, Enum):
    """Why an import stopped."""

    INVALID_FORMAT = "INVALID_FORMAT"
    """Header mismatch or a document the CSV parser cannot read."""

    INVALID_ROW = "INVALID_ROW"
    """A data row is missing a value or has too many."""

    STORAGE_UNAVAILABLE = "STORAGE_UNAVAILABLE"
    """The store failed while committing rows."""


class ImportReport(BaseModel):
    """Aggregate outcome of one import run."""

    succeeded: bool = True
    rows_read: int = 0
    """Data rows consumed from the document, header excluded."""

    rows_committed: int = 0
    """Rows written to the store. Non-zero on failure in partial-commit mode."""

    error_code: ImportErrorCode | None = None
    message: str | None = None
    line: int | None = None
    """1-based line of the row that stopped the import, if any."""

    def fail(self, code: ImportErrorCode, message: str) -> "ImportReport":
        """Mark the report failed and return it."""
        self.succeeded = False
        self.error_code = code
        self.message = message
        return self
