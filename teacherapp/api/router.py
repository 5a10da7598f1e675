"""API router factory with core endpoints."""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from teacherapp.utils.db import verify_db_connection

logger = logging.getLogger(__name__)

API_PREFIX = "/api"


def create_api_router() -> APIRouter:
    """Create router with every endpoint mounted under /api.

    Returns:
        APIRouter with health checks and teacher endpoints.
    """
    from teacherapp.api.teachers import router as teachers_router

    router = APIRouter(prefix=API_PREFIX)

    @router.get("/health", tags=["Health"], status_code=status.HTTP_200_OK)
    async def health_check() -> dict:
        """Health check endpoint - basic application health."""
        return {"status": "healthy", "service": "teacher-registry"}

    @router.get(
        "/health/db",
        tags=["Health"],
        status_code=status.HTTP_200_OK,
        response_model=None,
    )
    async def health_check_db() -> JSONResponse:
        """Deep health check - includes database connectivity check."""
        try:
            await verify_db_connection()
            return JSONResponse(
                status_code=status.HTTP_200_OK,
                content={"status": "healthy", "database": "connected"},
            )
        except Exception as e:
            logger.error(f"Database health check failed: {e}")
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={
                    "status": "unhealthy",
                    "database": "disconnected",
                    "error": str(e),
                },
            )

    router.include_router(teachers_router)

    return router
