"""Dependency injection functions for FastAPI routes.

Each service is exposed through a descriptor that builds one dependency
function per service class and hands it a request-scoped database session.
"""

from typing import Any, Type, TypeVar

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from teacherapp.services.teacher_service import TeacherService
from teacherapp.utils.db import get_db_session

T = TypeVar("T")


class ServiceDependency:
    """Descriptor that creates a dependency injection function for a service.

    The function is cached so the same object is returned on every access,
    which keeps ``app.dependency_overrides`` keyed on it working.
    """

    def __init__(self, service_class: Type[T]) -> None:
        self.service_class = service_class
        self._cached_func: Any = None

    def __get__(self, instance: Any, owner: type) -> Any:
        if self._cached_func is None:

            def dependency_func(db: AsyncSession = Depends(get_db_session)) -> Any:
                """Get service instance for dependency injection."""
                return self.service_class(db)

            self._cached_func = dependency_func
        return self._cached_func


class ServiceDependencies:
    """Container for all service dependency injection functions."""

    teacher = ServiceDependency(TeacherService)


dependencies = ServiceDependencies()
