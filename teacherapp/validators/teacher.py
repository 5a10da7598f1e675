"""Field rules for teacher insert and update payloads."""

from typing import Optional, Protocol, TypeVar

from teacherapp.exceptions import FieldError, ValidationError
from teacherapp.schemas.teacher import TeacherInsert, TeacherUpdate

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)

NAME_MIN_LENGTH = 3


class Validator(Protocol[T_contra]):
    """Checks a payload and reports every rejected field."""

    def validate(self, dto: T_contra) -> list[FieldError]: ...


def raise_for_errors(validator: Validator[T], dto: T) -> None:
    """Raise ValidationError listing every violation found in ``dto``."""
    errors = validator.validate(dto)
    if errors:
        raise ValidationError(errors)


class _NameRules:
    """Blankness and length rules shared by insert and update payloads.

    Lengths are measured on the raw value, so surrounding whitespace counts.
    A blank value is reported as ``empty`` and, if also too short, ``size``.
    A missing value breaks both rules.
    """

    firstname_max_length: int
    lastname_max_length: int = 50

    def validate(self, dto: TeacherInsert | TeacherUpdate) -> list[FieldError]:
        errors: list[FieldError] = []
        errors += self._check("firstname", dto.firstname, self.firstname_max_length)
        errors += self._check("lastname", dto.lastname, self.lastname_max_length)
        return errors

    @staticmethod
    def _check(field: str, value: Optional[str], max_length: int) -> list[FieldError]:
        if value is None:
            return [FieldError(field, "empty"), FieldError(field, "size")]

        errors = []
        if not value.strip():
            errors.append(FieldError(field, "empty"))
        if not NAME_MIN_LENGTH <= len(value) <= max_length:
            errors.append(FieldError(field, "size"))
        return errors


class TeacherInsertValidator(_NameRules):
    """Rules for a new teacher."""

    firstname_max_length = 50


class TeacherUpdateValidator(_NameRules):
    """Rules for replacing a teacher's names.

    Firstname allows up to 255 characters here, unlike on insert.
    """

    firstname_max_length = 255
