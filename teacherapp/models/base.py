"""Base model class with primary key and timestamp tracking."""

from datetime import datetime
from typing import Any, Dict

from sqlalchemy import BigInteger, DateTime, Integer, func
from sqlalchemy.orm import Mapped, mapped_column

from teacherapp.utils.db import Base


class BaseModel(Base):
    """Abstract base class for SQLAlchemy models.

    Provides the columns shared by every table:
    - Primary key (id), generated by the database on insert
    - Timestamps (created_at, updated_at)

    Persistence operations live in ``teacherapp.repositories``.

    Usage:
        class User(BaseModel):
            __tablename__ = "users"

            name: Mapped[str] = mapped_column(String(100))
    """

    __abstract__ = True

    # SQLite only generates ids for INTEGER PRIMARY KEY, which is 64-bit there
    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    def to_dict(self) -> Dict[str, Any]:
        """Convert model instance to dictionary.

        Returns:
            Dictionary of column name to value
        """
        return {
            column.name: getattr(self, column.name) for column in self.__table__.columns
        }

    def __repr__(self) -> str:
        """String representation of the model."""
        attrs = ", ".join(
            f"{key}={value!r}" for key, value in self.to_dict().items() if key != "id"
        )
        return f"{self.__class__.__name__}(id={self.id}, {attrs})"
