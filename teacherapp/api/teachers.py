"""Teachers API endpoints."""

import logging

from fastapi import APIRouter, Depends, Path, Query, Request, Response
from fastapi import status as http_status

from teacherapp.exceptions import (
    DatabaseConnectionError,
    IdentityMismatchError,
    InsertError,
)
from teacherapp.schemas.teacher import TeacherInsert, TeacherReadOnly, TeacherUpdate
from teacherapp.services.teacher_service import TeacherService
from teacherapp.utils.dependencies import dependencies
from teacherapp.validators import (
    TeacherInsertValidator,
    TeacherUpdateValidator,
    raise_for_errors,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/teachers",
    tags=["Teachers"],
)

insert_validator = TeacherInsertValidator()
update_validator = TeacherUpdateValidator()

# Ids are stored as signed 64-bit integers
ID_MIN = -(2**63)
ID_MAX = 2**63 - 1


@router.get(
    "",
    summary="Get teachers by their lastname starting with initials",
    responses={400: {"description": "No teacher matches the lastname"}},
)
async def get_teachers_by_lastname(
    lastname: str = Query(..., description="Leading characters of the lastname"),
    service: TeacherService = Depends(dependencies.teacher),
) -> list[TeacherReadOnly]:
    """List teachers whose lastname starts with ``lastname``.

    An empty result is answered with 400, not with an empty list.
    """
    teachers = await service.get_by_lastname_prefix(lastname)
    return [TeacherReadOnly.model_validate(t) for t in teachers]


@router.get(
    "/{teacher_id}",
    summary="Get a teacher by id",
    responses={404: {"description": "Teacher not found"}},
)
async def get_teacher(
    teacher_id: int = Path(..., ge=ID_MIN, le=ID_MAX),
    service: TeacherService = Depends(dependencies.teacher),
) -> TeacherReadOnly:
    """Get teacher by ID."""
    teacher = await service.get_by_id(teacher_id)
    return TeacherReadOnly.model_validate(teacher)


@router.post(
    "",
    status_code=http_status.HTTP_201_CREATED,
    summary="Add a teacher",
    responses={
        400: {"description": "Invalid input was supplied"},
        503: {"description": "Service Unavailable"},
    },
)
async def create_teacher(
    data: TeacherInsert,
    request: Request,
    response: Response,
    service: TeacherService = Depends(dependencies.teacher),
) -> TeacherReadOnly:
    """Create a new teacher.

    Sets the Location header to the URL of the created teacher. Any failure
    after validation is reported as 503.
    """
    raise_for_errors(insert_validator, data)

    try:
        teacher = await service.insert(data)
    except (InsertError, DatabaseConnectionError):
        raise
    except Exception as e:
        logger.error(
            "Unexpected error while creating teacher",
            extra={"error": str(e)},
            exc_info=True,
        )
        raise InsertError(f"Failed to create teacher: {e}") from e

    response.headers["Location"] = str(
        request.url_for("get_teacher", teacher_id=teacher.id)
    )
    return TeacherReadOnly.model_validate(teacher)


@router.delete(
    "/{teacher_id}",
    summary="Delete a teacher by id",
    responses={404: {"description": "Teacher not found"}},
)
async def delete_teacher(
    teacher_id: int = Path(..., ge=ID_MIN, le=ID_MAX),
    service: TeacherService = Depends(dependencies.teacher),
) -> TeacherReadOnly:
    """Delete a teacher and return it as it was before deletion."""
    teacher = await service.delete(teacher_id)
    return TeacherReadOnly.model_validate(teacher)


@router.put(
    "/{teacher_id}",
    summary="Update a teacher",
    responses={
        400: {"description": "Invalid input was supplied"},
        401: {"description": "Path id does not match body id"},
        404: {"description": "Teacher not found"},
    },
)
async def update_teacher(
    data: TeacherUpdate,
    teacher_id: int = Path(..., ge=ID_MIN, le=ID_MAX),
    service: TeacherService = Depends(dependencies.teacher),
) -> TeacherReadOnly:
    """Replace firstname and lastname of a teacher.

    The id in the body must equal the id in the path; this is checked before
    the names are validated, so a body with missing names still gets 401.
    """
    if teacher_id != data.id:
        raise IdentityMismatchError(teacher_id, data.id)
    raise_for_errors(update_validator, data)

    teacher = await service.update(data)
    return TeacherReadOnly.model_validate(teacher)
