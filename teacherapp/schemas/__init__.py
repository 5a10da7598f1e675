"""Pydantic schemas for API request/response models."""

from teacherapp.schemas.teacher import TeacherInsert, TeacherReadOnly, TeacherUpdate

__all__ = ["TeacherInsert", "TeacherReadOnly", "TeacherUpdate"]
