"""Base repository owning the persistence of one model."""

import logging
from typing import Generic, Optional, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from teacherapp.exceptions import DatabaseConnectionError
from teacherapp.models.base import BaseModel

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class BaseRepository(Generic[T]):
    """Store for one model class on top of an async session.

    Write operations (save, delete_by_id) commit their own transaction and
    roll it back on failure. Read operations never commit. Every SQLAlchemy
    failure is re-raised as DatabaseConnectionError.

    Usage:
        class UserRepository(BaseRepository[User]):
            model = User

        repository = UserRepository(db_session)
        user = await repository.save(User(name="John"))

    Attributes:
        db: Database session for operations
        model: Model class this repository stores
    """

    model: type[T]

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def save(self, instance: T) -> T:
        """Insert or update ``instance`` and commit.

        Returns:
            The persisted instance, refreshed with server-generated values

        Raises:
            DatabaseConnectionError: If database operation fails
        """
        try:
            self.db.add(instance)
            await self.db.flush()
            await self.db.refresh(instance)
            await self.db.commit()
            logger.debug(
                f"Saved {self.model.__name__}",
                extra={"model": self.model.__name__, "id": instance.id},
            )
            return instance
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(
                f"Failed to save {self.model.__name__}",
                extra={"model": self.model.__name__, "error": str(e)},
                exc_info=True,
            )
            if isinstance(e, IntegrityError):
                raise DatabaseConnectionError(
                    f"Integrity constraint violation: {str(e)}"
                ) from e
            raise DatabaseConnectionError(
                f"Database error during save: {str(e)}"
            ) from e

    async def get_by_id(self, record_id: int) -> Optional[T]:
        """Retrieve a record by its primary key.

        Returns:
            Model instance or None if not found

        Raises:
            DatabaseConnectionError: If database operation fails
        """
        try:
            result = await self.db.execute(
                select(self.model).where(self.model.id == record_id)
            )
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error(
                f"Failed to get {self.model.__name__} by id",
                extra={"model": self.model.__name__, "id": record_id, "error": str(e)},
                exc_info=True,
            )
            raise DatabaseConnectionError(f"Database error during get: {str(e)}") from e

    async def delete_by_id(self, record_id: int) -> int:
        """Delete the record with ``record_id`` and commit.

        Returns:
            Number of deleted rows (0 when the row was already gone)

        Raises:
            DatabaseConnectionError: If database operation fails
        """
        try:
            result = await self.db.execute(
                delete(self.model).where(self.model.id == record_id)
            )
            await self.db.commit()
            logger.debug(
                f"Deleted {self.model.__name__}",
                extra={"model": self.model.__name__, "id": record_id},
            )
            return result.rowcount
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error(
                f"Failed to delete {self.model.__name__}",
                extra={"model": self.model.__name__, "id": record_id, "error": str(e)},
                exc_info=True,
            )
            raise DatabaseConnectionError(
                f"Database error during delete: {str(e)}"
            ) from e
