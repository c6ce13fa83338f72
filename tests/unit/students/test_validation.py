"""Tests for shared student validation helpers."""

import pytest

from roster.db.errors import ValidationError
from roster.students.models import UPLOAD_HEADER
from roster.students.validation import (
    as_text,
    select_update_fields,
    validate_header,
    validate_identifier,
    validate_row,
    validate_student,
)


class TestAsText:
    """Tests for as_text."""

    def test_strings_unchanged(self) -> None:
        assert as_text("20") == "20"

    def test_numbers_become_text(self) -> None:
        assert as_text(20) == "20"
        assert as_text(20.5) == "20.5"

    def test_none_is_empty(self) -> None:
        assert as_text(None) == ""


class TestValidateIdentifier:
    """Tests for validate_identifier."""

    def test_accepts_non_empty(self) -> None:
        assert validate_identifier("abc") == "abc"

    def test_rejects_empty(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_identifier("")
        assert exc_info.value.fields == ["id"]


class TestValidateStudent:
    """Tests for validate_student."""

    def test_returns_exactly_seven_fields(self, student_fields) -> None:
        student_id, values = validate_student("1", {**student_fields, "extra": "x"})
        assert student_id == "1"
        assert values == student_fields

    def test_missing_field_listed(self, student_fields) -> None:
        del student_fields["email"]
        with pytest.raises(ValidationError) as exc_info:
            validate_student("1", student_fields)
        assert exc_info.value.fields == ["email"]
        assert "email" in exc_info.value.message

    def test_empty_values_count_as_missing(self, student_fields) -> None:
        student_fields["name"] = ""
        with pytest.raises(ValidationError) as exc_info:
            validate_student("", student_fields)
        assert exc_info.value.fields == ["id", "name"]

    def test_whitespace_values_count_as_missing(self, student_fields) -> None:
        student_fields["phone"] = "   "
        with pytest.raises(ValidationError) as exc_info:
            validate_student(" ", student_fields)
        assert exc_info.value.fields == ["id", "phone"]

    def test_numeric_age_kept_as_text(self, student_fields) -> None:
        student_fields["age"] = 21
        _, values = validate_student("1", student_fields)
        assert values["age"] == "21"


class TestSelectUpdateFields:
    """Tests for select_update_fields."""

    def test_keeps_known_non_empty_fields(self) -> None:
        updates = select_update_fields({"name": "Bo", "course": "", "color": "red"})
        assert updates == {"name": "Bo"}

    def test_rejects_empty_update(self) -> None:
        with pytest.raises(ValidationError, match="At least one field"):
            select_update_fields({"course": "", "unknown": "x"})

    def test_whitespace_values_ignored(self) -> None:
        assert select_update_fields({"name": "  ", "course": "Math"}) == {"course": "Math"}


class TestValidateHeader:
    """Tests for validate_header."""

    def test_exact_header_passes(self) -> None:
        validate_header(list(UPLOAD_HEADER))

    def test_reordered_header_fails(self) -> None:
        header = ["id", "course", "name", "age", "address", "email", "phone", "gender"]
        with pytest.raises(ValidationError) as exc_info:
            validate_header(header)
        assert exc_info.value.fields == ["name", "course"]

    def test_missing_column_fails(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_header(list(UPLOAD_HEADER[:-1]))
        assert exc_info.value.fields == ["gender"]

    def test_extra_column_fails(self) -> None:
        with pytest.raises(ValidationError):
            validate_header([*UPLOAD_HEADER, "notes"])


class TestValidateRow:
    """Tests for validate_row."""

    def test_valid_row(self) -> None:
        student_id, fields = validate_row(
            ["1", "Ana", "CS", "20", "X", "a@x.com", "555", "F"], line=2
        )
        assert student_id == "1"
        assert fields["gender"] == "F"

    def test_short_row_reports_missing_fields(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_row(["1", "Ana", "CS", "20", "X"], line=3)
        assert exc_info.value.fields == ["email", "phone", "gender"]
        assert "line 3" in exc_info.value.message

    def test_long_row_rejected(self) -> None:
        with pytest.raises(ValidationError, match="9 values"):
            validate_row(["1", "Ana", "CS", "20", "X", "a@x.com", "555", "F", "?"], line=4)

    def test_row_of_empty_cells_rejected(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            validate_row([""] * 8, line=5)
        assert exc_info.value.fields == list(UPLOAD_HEADER)
        assert "line 5" in exc_info.value.message
