"""Data models package."""

from teacherapp.models.base import BaseModel
from teacherapp.models.teacher import Teacher

__all__ = ["BaseModel", "Teacher"]
