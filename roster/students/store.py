"""StudentStore abstract interface."""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from typing import Any

from roster.students.models import StudentRecord


class StudentStore(ABC):
    """Abstract interface for student record storage.

    Each record is one hash of the seven student fields addressed by a
    caller-supplied identifier. Implementations raise the errors from
    roster.db.errors: ValidationError before any write, NotFoundError for
    updates of absent records, StorageUnavailable when the backend fails.
    """

    @abstractmethod
    async def create_or_replace_fields(
        self, student_id: str, fields: Mapping[str, Any]
    ) -> None:
        """Write all seven fields of a record in one operation.

        Existing fields of the same record are overwritten.
        """
        pass

    @abstractmethod
    async def create_many(
        self, records: Sequence[tuple[str, Mapping[str, Any]]]
    ) -> int:
        """Write several full records in one transaction, returning the count.

        Every record is validated before anything is written.
        """
        pass

    @abstractmethod
    async def get(self, student_id: str) -> dict[str, str] | None:
        """Get a record's fields, or None when its key holds no fields."""
        pass

    @abstractmethod
    async def get_all(self, search: str | None = None) -> list[StudentRecord]:
        """List all records, optionally filtered by name/course substring."""
        pass

    @abstractmethod
    async def update_fields(
        self, student_id: str, partial_fields: Mapping[str, Any]
    ) -> dict[str, str]:
        """Merge the given fields into an existing record.

        Returns:
            The fields that were written
        """
        pass

    @abstractmethod
    async def delete(self, student_id: str) -> bool:
        """Delete a record. Returns False if it did not exist."""
        pass

    @abstractmethod
    async def ping(self) -> bool:
        """Check that the backend is reachable."""
        pass
