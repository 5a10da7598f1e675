"""Teacher model."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from teacherapp.models.base import BaseModel


class Teacher(BaseModel):
    """Teacher record identified by a server-generated id.

    Attributes:
        firstname: Given name, up to 512 characters
        lastname: Family name, up to 512 characters; indexed for prefix search
        created_at: Timestamp when record was created (inherited)
        updated_at: Timestamp when record was last updated (inherited)
    """

    __tablename__ = "teachers"

    firstname: Mapped[str] = mapped_column(String(512), nullable=False)
    lastname: Mapped[str] = mapped_column(String(512), nullable=False, index=True)

    def __repr__(self) -> str:
        """String representation of the teacher."""
        return (
            f"Teacher(id={self.id}, firstname={self.firstname!r}, "
            f"lastname={self.lastname!r})"
        )
