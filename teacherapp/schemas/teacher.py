"""Teacher schemas for API request/response models.

Schemas only check the shape of a payload. Length and blankness rules are
applied by ``teacherapp.validators`` so every violation can be reported.
"""

from typing import Optional

from pydantic import BaseModel


class TeacherInsert(BaseModel):
    """Schema for creating a teacher.

    Attributes:
        firstname: Given name.
        lastname: Family name.
    """

    firstname: str
    lastname: str


class TeacherUpdate(BaseModel):
    """Schema for replacing a teacher's names.

    Every field may be missing so the path/body id check can run first.
    Missing names are then reported by the update validator.

    Attributes:
        id: Teacher ID; must match the ID in the request path.
        firstname: New given name.
        lastname: New family name.
    """

    id: Optional[int] = None
    firstname: Optional[str] = None
    lastname: Optional[str] = None


class TeacherReadOnly(BaseModel):
    """Response schema for teacher."""

    id: int
    firstname: str
    lastname: str

    model_config = {"from_attributes": True}
