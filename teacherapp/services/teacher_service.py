"""Teacher service providing the business rules for Teacher operations.

The service sits between the API and TeacherRepository: it converts request
schemas to Teacher entities, turns missing rows into RecordNotFoundError and
refuses inserts that come back without a generated id.
"""

import logging
from typing import List

from sqlalchemy.ext.asyncio import AsyncSession

from teacherapp.exceptions import (
    InsertError,
    NoMatchingRecordsError,
    RecordNotFoundError,
)
from teacherapp.models.teacher import Teacher
from teacherapp.repositories.teacher_repository import TeacherRepository
from teacherapp.schemas.teacher import TeacherInsert, TeacherUpdate

logger = logging.getLogger(__name__)


class TeacherService:
    """Service for managing Teacher entities.

    Operations:
    - insert(dto): Create new teacher
    - update(dto): Replace firstname/lastname of an existing teacher
    - delete(id): Delete teacher, returning its last state
    - get_by_lastname_prefix(prefix): Teachers whose lastname starts with prefix
    - get_by_id(id): Get teacher or raise error

    Usage:
        service = TeacherService(db_session)
        dto = TeacherInsert(firstname="Anna", lastname="Papadaki")
        teacher = await service.insert(dto)

    Attributes:
        repository: Store for Teacher rows bound to the session
    """

    def __init__(self, db: AsyncSession) -> None:
        self.repository = TeacherRepository(db)

    async def insert(self, dto: TeacherInsert) -> Teacher:
        """Create a teacher from ``dto``.

        Raises:
            InsertError: If the store returned the teacher without an id.
            DatabaseConnectionError: If database operation fails.
        """
        teacher = await self.repository.save(self._from_insert(dto))
        if teacher.id is None:
            logger.info("Insert error", extra={"lastname": dto.lastname})
            raise InsertError("Teacher was saved without a generated id")
        return teacher

    async def update(self, dto: TeacherUpdate) -> Teacher:
        """Replace firstname and lastname of the teacher with ``dto.id``.

        Raises:
            RecordNotFoundError: If no teacher has ``dto.id``.
            DatabaseConnectionError: If database operation fails.
        """
        teacher = await self._get_or_fail(dto.id, "Update error")
        teacher.firstname = dto.firstname
        teacher.lastname = dto.lastname
        return await self.repository.save(teacher)

    async def delete(self, teacher_id: int) -> Teacher:
        """Delete a teacher and return it as it was before deletion.

        Raises:
            RecordNotFoundError: If no teacher has ``teacher_id``, including
                when the row disappears between lookup and delete.
            DatabaseConnectionError: If database operation fails.
        """
        teacher = await self._get_or_fail(teacher_id, "Delete error")
        if not await self.repository.delete_by_id(teacher_id):
            logger.info("Delete error: row vanished", extra={"id": teacher_id})
            raise RecordNotFoundError(Teacher.__name__, teacher_id)
        return teacher

    async def get_by_lastname_prefix(self, prefix: str) -> List[Teacher]:
        """Get teachers whose lastname starts with ``prefix``, ordered by id.

        Raises:
            NoMatchingRecordsError: If ``prefix`` is empty or nothing matches.
            DatabaseConnectionError: If database operation fails.
        """
        teachers: List[Teacher] = []
        if prefix:
            teachers = await self.repository.find_by_lastname_prefix(prefix)
        if not teachers:
            logger.info("Get teachers by lastname error", extra={"prefix": prefix})
            raise NoMatchingRecordsError(Teacher.__name__)
        return teachers

    async def get_by_id(self, teacher_id: int) -> Teacher:
        """Get teacher by ID.

        Raises:
            RecordNotFoundError: If no teacher has ``teacher_id``.
            DatabaseConnectionError: If database operation fails.
        """
        return await self._get_or_fail(teacher_id, "Get teacher by id error")

    async def _get_or_fail(self, teacher_id: int, context: str) -> Teacher:
        teacher = await self.repository.get_by_id(teacher_id)
        if teacher is None:
            logger.info(context, extra={"id": teacher_id})
            raise RecordNotFoundError(Teacher.__name__, teacher_id)
        return teacher

    @staticmethod
    def _from_insert(dto: TeacherInsert) -> Teacher:
        return Teacher(firstname=dto.firstname, lastname=dto.lastname)
