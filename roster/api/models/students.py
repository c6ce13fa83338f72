"""Request and response models for student endpoints."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from roster.students.validation import as_text


class _StudentFieldsModel(BaseModel):
    """Shared handling of the seven student fields.

    Numbers (e.g. `"age": 20`) are accepted and kept as text.
    """

    model_config = ConfigDict(extra="ignore")

    @field_validator("*", mode="before")
    @classmethod
    def numbers_as_text(cls, v: Any) -> Any:
        if isinstance(v, int | float):
            return as_text(v)
        return v


class StudentCreate(_StudentFieldsModel):
    """Body of POST /students. Every value is required and non-empty."""

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    course: str = Field(..., min_length=1)
    age: str = Field(..., min_length=1)
    address: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    phone: str = Field(..., min_length=1)
    gender: str = Field(..., min_length=1)

    def stored_fields(self) -> dict[str, str]:
        """The stored fields, without the identifier."""
        return self.model_dump(exclude={"id"})


class StudentUpdate(_StudentFieldsModel):
    """Body of PUT /students/{id}. Any subset of fields, at least one non-empty."""

    name: str | None = None
    course: str | None = None
    age: str | None = None
    address: str | None = None
    email: str | None = None
    phone: str | None = None
    gender: str | None = None


class MessageResponse(BaseModel):
    """Plain acknowledgement for write operations."""

    message: str


class ImportResponse(MessageResponse):
    """Acknowledgement for a successful CSV upload."""

    rows_imported: int
