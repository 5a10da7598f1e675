"""Application exceptions."""

from dataclasses import dataclass
from typing import Optional


class AppError(Exception):
    """Base exception for application errors."""


class ModelError(AppError):
    """Base exception for model/database operations."""


class RecordNotFoundError(ModelError):
    """Raised when a record is not found in the database."""

    def __init__(self, model_name: str, record_id: int):
        self.model_name = model_name
        self.record_id = record_id
        super().__init__(f"{model_name} with id={record_id} not found")


class NoMatchingRecordsError(RecordNotFoundError):
    """Raised when a search yields no records.

    Carries record_id=0 since no single record was asked for.
    """

    def __init__(self, model_name: str):
        super().__init__(model_name, 0)


class DatabaseConnectionError(ModelError):
    """Raised when database connection fails."""


class InsertError(ModelError):
    """Raised when a new record could not be persisted."""


@dataclass(frozen=True, slots=True)
class FieldError:
    """Single rejected field of a request payload."""

    field: str
    reason: str


class ValidationError(AppError):
    """Raised when a payload breaks one or more field rules."""

    def __init__(self, errors: list[FieldError]):
        self.errors = errors
        fields = ", ".join(f"{e.field}:{e.reason}" for e in errors)
        super().__init__(f"Invalid payload ({fields})")


class IdentityMismatchError(AppError):
    """Raised when the path id and the body id of an update disagree."""

    def __init__(self, path_id: int, body_id: Optional[int]):
        self.path_id = path_id
        self.body_id = body_id
        super().__init__(f"Path id={path_id} does not match body id={body_id}")
