"""Validation helpers shared by the API, the stores and the importer."""

from collections.abc import Mapping, Sequence
from typing import Any

from roster.db.errors import ValidationError
from roster.students.models import STUDENT_FIELDS, UPLOAD_HEADER


def as_text(value: Any) -> str:
    """Render a submitted value as stored text.

    Numbers are kept as their text form, never coerced further. None
    becomes the empty string so it fails the non-empty checks.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)


def is_blank(text: str) -> bool:
    """Empty or whitespace-only values count as missing."""
    return not text.strip()


def validate_identifier(student_id: Any) -> str:
    """Return the identifier as text, or raise if it is empty."""
    text = as_text(student_id)
    if is_blank(text):
        raise ValidationError("Student id is required", fields=["id"])
    return text


def validate_student(student_id: Any, fields: Mapping[str, Any]) -> tuple[str, dict[str, str]]:
    """Check a full record and normalize it for storage.

    Returns:
        The identifier and a mapping holding exactly the seven student fields

    Raises:
        ValidationError: If the identifier or any field is missing or empty
    """
    identifier = as_text(student_id)
    values = {name: as_text(fields.get(name)) for name in STUDENT_FIELDS}

    missing = [name for name, value in values.items() if is_blank(value)]
    if is_blank(identifier):
        missing.insert(0, "id")
    if missing:
        raise ValidationError(
            f"All fields are required, missing: {', '.join(missing)}",
            fields=missing,
        )
    return identifier, values


def select_update_fields(partial: Mapping[str, Any]) -> dict[str, str]:
    """Pick the recognized, non-empty fields out of an update payload.

    Unknown keys and blank values are ignored.

    Raises:
        ValidationError: If nothing is left to write
    """
    updates = {
        name: as_text(partial[name])
        for name in STUDENT_FIELDS
        if name in partial and not is_blank(as_text(partial[name]))
    }
    if not updates:
        raise ValidationError("At least one field is required to update")
    return updates


def validate_header(header: Sequence[str]) -> None:
    """Compare an upload header positionally against the expected schema.

    Raises:
        ValidationError: On any renamed, reordered, missing or extra column
    """
    if tuple(header) != UPLOAD_HEADER:
        raise ValidationError(
            "Invalid CSV format: header must be " + ",".join(UPLOAD_HEADER),
            fields=[
                expected
                for index, expected in enumerate(UPLOAD_HEADER)
                if index >= len(header) or header[index] != expected
            ],
        )


def validate_row(row: Sequence[str], line: int) -> tuple[str, dict[str, str]]:
    """Check one upload data row and split it into identifier and fields.

    Args:
        row: Raw cell values in header order
        line: 1-based line number of the row, used in the error message

    Raises:
        ValidationError: If the row is too short, too long, or has an empty cell
    """
    if len(row) > len(UPLOAD_HEADER):
        raise ValidationError(
            f"Invalid CSV format: line {line} has {len(row)} values, "
            f"expected {len(UPLOAD_HEADER)}"
        )
    values = dict(zip(UPLOAD_HEADER, row))
    try:
        return validate_student(values.get("id"), values)
    except ValidationError as e:
        raise ValidationError(
            f"Invalid CSV format: line {line} is missing {', '.join(e.fields)}",
            fields=e.fields,
        ) from e
