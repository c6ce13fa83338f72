"""In-memory implementation of StudentStore."""

from collections.abc import Mapping, Sequence
from typing import Any

from roster.db.errors import NotFoundError
from roster.students.models import StudentRecord
from roster.students.store import StudentStore
from roster.students.validation import (
    select_update_fields,
    validate_identifier,
    validate_student,
)


class InMemoryStudentStore(StudentStore):
    """In-memory implementation of StudentStore for testing and development.

    Uses a dict of field dicts, mirroring one Redis hash per record.
    Not suitable for production use.
    """

    def __init__(self) -> None:
        """Initialize empty storage."""
        self._records: dict[str, dict[str, str]] = {}

    async def create_or_replace_fields(
        self, student_id: str, fields: Mapping[str, Any]
    ) -> None:
        student_id, values = validate_student(student_id, fields)
        self._records.setdefault(student_id, {}).update(values)

    async def create_many(
        self, records: Sequence[tuple[str, Mapping[str, Any]]]
    ) -> int:
        validated = [validate_student(student_id, fields) for student_id, fields in records]
        for student_id, values in validated:
            self._records.setdefault(student_id, {}).update(values)
        return len(validated)

    async def get(self, student_id: str) -> dict[str, str] | None:
        fields = self._records.get(student_id)
        return dict(fields) if fields else None

    async def get_all(self, search: str | None = None) -> list[StudentRecord]:
        records = [
            StudentRecord(id=student_id, fields=dict(fields))
            for student_id, fields in sorted(self._records.items())
            if fields
        ]
        return [record for record in records if record.matches(search)]

    async def update_fields(
        self, student_id: str, partial_fields: Mapping[str, Any]
    ) -> dict[str, str]:
        updates = select_update_fields(partial_fields)
        student_id = validate_identifier(student_id)
        if await self.get(student_id) is None:
            raise NotFoundError(f"Student {student_id} not found")
        self._records[student_id].update(updates)
        return updates

    async def delete(self, student_id: str) -> bool:
        return self._records.pop(student_id, None) is not None

    async def ping(self) -> bool:
        return True
