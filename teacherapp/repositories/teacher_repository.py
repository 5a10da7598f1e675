"""Teacher repository."""

import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from teacherapp.exceptions import DatabaseConnectionError
from teacherapp.models.teacher import Teacher
from teacherapp.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class TeacherRepository(BaseRepository[Teacher]):
    """Store for Teacher rows."""

    model = Teacher

    async def find_by_lastname_prefix(self, prefix: str) -> List[Teacher]:
        """Find teachers whose lastname starts with ``prefix``.

        Wildcards in ``prefix`` are matched literally. Case sensitivity
        follows the database collation.

        Args:
            prefix: Leading characters of the lastname.

        Returns:
            Matching teachers ordered by id.

        Raises:
            DatabaseConnectionError: If database operation fails.
        """
        try:
            stmt = (
                select(Teacher)
                .where(Teacher.lastname.startswith(prefix, autoescape=True))
                .order_by(Teacher.id)
            )
            result = await self.db.execute(stmt)
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error(
                "Failed to search teachers by lastname",
                extra={"prefix": prefix, "error": str(e)},
                exc_info=True,
            )
            raise DatabaseConnectionError(
                f"Database error during lastname search: {str(e)}"
            ) from e
