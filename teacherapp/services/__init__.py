"""Business logic services package."""

from teacherapp.services.teacher_service import TeacherService

__all__ = ["TeacherService"]
