"""Student record models and field layout."""

from pydantic import BaseModel, Field

STUDENT_FIELDS: tuple[str, ...] = (
    "name",
    "course",
    "age",
    "address",
    "email",
    "phone",
    "gender",
)
"""Hash field names of a stored student, in canonical order."""

UPLOAD_HEADER: tuple[str, ...] = ("id", *STUDENT_FIELDS)
"""Exact header row expected at the top of an uploaded CSV document."""

SEARCH_FIELDS: tuple[str, ...] = ("name", "course")
"""Fields matched by the collection search filter."""


class StudentRecord(BaseModel):
    """A stored student: its identifier plus whatever fields its hash holds.

    Fields are kept as a plain mapping because a record being updated
    concurrently can briefly hold fewer than seven fields.
    """

    id: str
    fields: dict[str, str] = Field(default_factory=dict)

    def to_response(self) -> dict[str, str]:
        """Flatten into the `{id, name, course, ...}` shape the API returns."""
        return {"id": self.id, **self.fields}

    def matches(self, search: str | None) -> bool:
        """Case-insensitive substring match on name or course.

        A record without the field never matches on it.
        """
        if not search:
            return True
        needle = search.lower()
        return any(
            needle in self.fields[name].lower()
            for name in SEARCH_FIELDS
            if name in self.fields
        )
