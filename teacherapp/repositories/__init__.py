"""Persistence layer: one repository per model."""

from teacherapp.repositories.base import BaseRepository
from teacherapp.repositories.teacher_repository import TeacherRepository

__all__ = ["BaseRepository", "TeacherRepository"]
