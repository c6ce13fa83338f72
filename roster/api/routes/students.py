"""Student record endpoints."""

from fastapi import APIRouter, Query

from roster.api.dependencies import StudentStoreDep
from roster.api.exceptions import (
    InvalidRequestError,
    StorageUnavailableError,
    StudentNotFoundError,
)
from roster.api.models.errors import ErrorDetail
from roster.api.models.students import MessageResponse, StudentCreate, StudentUpdate
from roster.db.errors import NotFoundError, StorageUnavailable, ValidationError
from roster.observability.logging import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="/students")


def _invalid(error: ValidationError) -> InvalidRequestError:
    details = [ErrorDetail(field=name, message="Field is required") for name in error.fields]
    return InvalidRequestError(error.message, details=details or None)


@router.post("", response_model=MessageResponse, status_code=201)
async def create_student(
    request: StudentCreate,
    store: StudentStoreDep,
) -> MessageResponse:
    """Create a student, or overwrite every field of an existing one."""
    logger.info("create_student_request", student_id=request.id)

    try:
        await store.create_or_replace_fields(request.id, request.stored_fields())
    except ValidationError as e:
        raise _invalid(e) from e
    except StorageUnavailable as e:
        raise StorageUnavailableError("Failed to save student") from e

    return MessageResponse(message="Student saved successfully")


@router.get("", response_model=list[dict[str, str]])
async def list_students(
    store: StudentStoreDep,
    search: str | None = Query(
        default=None,
        description="Case-insensitive substring matched against name and course",
    ),
) -> list[dict[str, str]]:
    """List all students, optionally filtered by name or course."""
    logger.debug("list_students_request", search=search)

    try:
        records = await store.get_all(search=search)
    except StorageUnavailable as e:
        raise StorageUnavailableError("Failed to fetch students") from e

    return [record.to_response() for record in records]


@router.get("/{student_id}", response_model=dict[str, str])
async def get_student(
    student_id: str,
    store: StudentStoreDep,
) -> dict[str, str]:
    """Get one student's fields.

    Raises:
        StudentNotFoundError: If no field exists under the student's key
    """
    try:
        fields = await store.get(student_id)
    except StorageUnavailable as e:
        raise StorageUnavailableError("Failed to fetch student") from e

    if fields is None:
        raise StudentNotFoundError(f"Student {student_id} not found")
    return fields


@router.put("/{student_id}", response_model=MessageResponse)
async def update_student(
    student_id: str,
    request: StudentUpdate,
    store: StudentStoreDep,
) -> MessageResponse:
    """Merge the supplied fields into an existing student.

    Fields left out of the body keep their stored values.
    """
    logger.info("update_student_request", student_id=student_id)

    try:
        await store.update_fields(student_id, request.model_dump(exclude_none=True))
    except ValidationError as e:
        raise _invalid(e) from e
    except NotFoundError as e:
        raise StudentNotFoundError(f"Student {student_id} not found") from e
    except StorageUnavailable as e:
        raise StorageUnavailableError("Failed to update student") from e

    return MessageResponse(message="Student updated successfully")


@router.delete("/{student_id}", response_model=MessageResponse)
async def delete_student(
    student_id: str,
    store: StudentStoreDep,
) -> MessageResponse:
    """Delete a student. Deleting an unknown id succeeds."""
    logger.info("delete_student_request", student_id=student_id)

    try:
        await store.delete(student_id)
    except StorageUnavailable as e:
        raise StorageUnavailableError("Failed to delete student") from e

    return MessageResponse(message="Student deleted successfully")
