"""Payload validators."""

from teacherapp.validators.teacher import (
    TeacherInsertValidator,
    TeacherUpdateValidator,
    Validator,
    raise_for_errors,
)

__all__ = [
    "TeacherInsertValidator",
    "TeacherUpdateValidator",
    "Validator",
    "raise_for_errors",
]
