"""Unit tests for teacher payload validators."""

import pytest

from teacherapp.exceptions import FieldError, ValidationError
from teacherapp.schemas.teacher import TeacherInsert, TeacherUpdate
from teacherapp.validators import (
    TeacherInsertValidator,
    TeacherUpdateValidator,
    raise_for_errors,
)


@pytest.fixture
def insert_validator() -> TeacherInsertValidator:
    return TeacherInsertValidator()


@pytest.fixture
def update_validator() -> TeacherUpdateValidator:
    return TeacherUpdateValidator()


class TestTeacherInsertValidator:
    """Rules for new teachers."""

    @pytest.mark.parametrize("length", [3, 10, 50])
    def test_valid_lengths_pass(self, insert_validator, length):
        """Names of 3 to 50 non-blank characters produce no errors."""
        dto = TeacherInsert(firstname="a" * length, lastname="b" * length)

        assert insert_validator.validate(dto) == []

    def test_short_firstname_reports_size(self, insert_validator):
        """A two-letter firstname is rejected for size only."""
        dto = TeacherInsert(firstname="Al", lastname="Smith")

        assert insert_validator.validate(dto) == [FieldError("firstname", "size")]

    def test_empty_values_report_empty_and_size(self, insert_validator):
        """Empty names break both rules and every violation is reported."""
        dto = TeacherInsert(firstname="", lastname="")

        assert insert_validator.validate(dto) == [
            FieldError("firstname", "empty"),
            FieldError("firstname", "size"),
            FieldError("lastname", "empty"),
            FieldError("lastname", "size"),
        ]

    def test_whitespace_counts_toward_length(self, insert_validator):
        """Three spaces are blank but long enough, so only 'empty' is reported."""
        dto = TeacherInsert(firstname="   ", lastname="Smith")

        assert insert_validator.validate(dto) == [FieldError("firstname", "empty")]

    def test_short_whitespace_reports_both(self, insert_validator):
        """Two spaces are blank and too short."""
        dto = TeacherInsert(firstname="Anna", lastname="  ")

        assert insert_validator.validate(dto) == [
            FieldError("lastname", "empty"),
            FieldError("lastname", "size"),
        ]

    def test_firstname_over_50_rejected(self, insert_validator):
        """Firstname is capped at 50 characters on insert."""
        dto = TeacherInsert(firstname="a" * 51, lastname="Smith")

        assert insert_validator.validate(dto) == [FieldError("firstname", "size")]

    def test_lastname_over_50_rejected(self, insert_validator):
        """Lastname is capped at 50 characters."""
        dto = TeacherInsert(firstname="Anna", lastname="b" * 51)

        assert insert_validator.validate(dto) == [FieldError("lastname", "size")]


class TestTeacherUpdateValidator:
    """Rules for replacing a teacher's names."""

    def test_firstname_up_to_255_allowed(self, update_validator):
        """Firstname may be longer on update than on insert."""
        dto = TeacherUpdate(id=1, firstname="a" * 255, lastname="Smith")

        assert update_validator.validate(dto) == []

    def test_firstname_over_255_rejected(self, update_validator):
        dto = TeacherUpdate(id=1, firstname="a" * 256, lastname="Smith")

        assert update_validator.validate(dto) == [FieldError("firstname", "size")]

    def test_lastname_still_capped_at_50(self, update_validator):
        dto = TeacherUpdate(id=1, firstname="Anna", lastname="b" * 51)

        assert update_validator.validate(dto) == [FieldError("lastname", "size")]

    def test_blank_names_rejected(self, update_validator):
        dto = TeacherUpdate(id=1, firstname="\t\t\t", lastname="Smith")

        assert update_validator.validate(dto) == [FieldError("firstname", "empty")]


class TestRaiseForErrors:
    """raise_for_errors turns violations into a single ValidationError."""

    def test_valid_payload_passes(self, insert_validator):
        dto = TeacherInsert(firstname="Anna", lastname="Smith")

        raise_for_errors(insert_validator, dto)

    def test_invalid_payload_raises_with_all_errors(self, insert_validator):
        dto = TeacherInsert(firstname="Al", lastname="")

        with pytest.raises(ValidationError) as exc_info:
            raise_for_errors(insert_validator, dto)

        assert exc_info.value.errors == [
            FieldError("firstname", "size"),
            FieldError("lastname", "empty"),
            FieldError("lastname", "size"),
        ]
        assert "firstname:size" in str(exc_info.value)


def test_update_missing_names_report_empty_and_size(update_validator):
    """Absent names on update break both rules."""
    dto = TeacherUpdate(id=1)

    assert update_validator.validate(dto) == [
        FieldError("firstname", "empty"),
        FieldError("firstname", "size"),
        FieldError("lastname", "empty"),
        FieldError("lastname", "size"),
    ]
