"""Centralized exception handlers for FastAPI application."""

import logging
from dataclasses import asdict, dataclass
from typing import Any, Callable

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from teacherapp.exceptions import (
    DatabaseConnectionError,
    IdentityMismatchError,
    InsertError,
    NoMatchingRecordsError,
    RecordNotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ExceptionConfig:
    """Configuration for exception handler behavior."""

    status_code: int
    error_name: str
    log_level: str = "warning"
    include_detail: bool = True
    public_message: str = ""


# Exception type to configuration mapping. Subclasses are resolved before
# their bases, so NoMatchingRecordsError does not fall through to 404.
EXCEPTION_CONFIGS: dict[type[Exception], ExceptionConfig] = {
    RecordNotFoundError: ExceptionConfig(
        status_code=status.HTTP_404_NOT_FOUND,
        error_name="Not Found",
    ),
    NoMatchingRecordsError: ExceptionConfig(
        status_code=status.HTTP_400_BAD_REQUEST,
        error_name="Bad Request",
    ),
    ValidationError: ExceptionConfig(
        status_code=status.HTTP_400_BAD_REQUEST,
        error_name="Validation Error",
    ),
    IdentityMismatchError: ExceptionConfig(
        status_code=status.HTTP_401_UNAUTHORIZED,
        error_name="Unauthorized",
    ),
    InsertError: ExceptionConfig(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        error_name="Service Unavailable",
        log_level="error",
        include_detail=False,
        public_message="Failed to create record. Please try again later.",
    ),
    DatabaseConnectionError: ExceptionConfig(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        error_name="Service Unavailable",
        log_level="error",
        include_detail=False,
        public_message="Database connection error. Please try again later.",
    ),
}


def _log_exception(exc: Exception, config: ExceptionConfig) -> None:
    """Log exception with appropriate level."""
    log_func: Callable[..., None] = getattr(logger, config.log_level)
    log_func(f"{type(exc).__name__}: {exc}")


def _build_response_content(exc: Exception, config: ExceptionConfig) -> dict[str, Any]:
    """Build response content based on exception type."""
    content: dict[str, Any] = {"error": config.error_name}

    if config.include_detail:
        content["message"] = str(exc)
    elif config.public_message:
        content["message"] = config.public_message

    if isinstance(exc, RecordNotFoundError):
        content["model"] = exc.model_name
        content["record_id"] = exc.record_id
    elif isinstance(exc, ValidationError):
        content["details"] = [asdict(error) for error in exc.errors]

    return content


def _create_handler(
    config: ExceptionConfig,
) -> Callable[[Request, Exception], Any]:
    """Create exception handler function for given config."""

    async def handler(request: Request, exc: Exception) -> JSONResponse:
        _log_exception(exc, config)
        content = _build_response_content(exc, config)
        return JSONResponse(status_code=config.status_code, content=content)

    return handler


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Handle malformed requests as plain validation failures (400)."""
    logger.warning(f"Validation error: {exc}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "Validation Error",
            "message": "Invalid request data",
            "details": jsonable_encoder(exc.errors()),
        },
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle all unhandled exceptions."""
    logger.exception(f"Unhandled exception: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Internal Server Error",
            "message": "An unexpected error occurred. Please try again later.",
        },
    )


async def not_found_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Handle requests for paths that match no route."""
    logger.warning(f"404 Not Found: {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={
            "error": "Not Found",
            "message": f"The requested resource was not found: {request.url.path}",
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI application.

    Args:
        app: FastAPI application instance.
    """
    for exc_type, config in EXCEPTION_CONFIGS.items():
        app.add_exception_handler(exc_type, _create_handler(config))

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(404, not_found_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
