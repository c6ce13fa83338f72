"""Student records: field layout, validation and storage."""

from roster.students.models import STUDENT_FIELDS, UPLOAD_HEADER, StudentRecord
from roster.students.store import StudentStore

__all__ = [
    "STUDENT_FIELDS",
    "UPLOAD_HEADER",
    "StudentRecord",
    "StudentStore",
]
