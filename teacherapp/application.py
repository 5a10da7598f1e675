"""FastAPI application factory."""

from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI

from teacherapp.api import create_api_router
from teacherapp.config import settings
from teacherapp.utils.db import close_db, init_db
from teacherapp.utils.exception_handlers import register_exception_handlers

# Create main router
router = APIRouter()


@router.get("/")
async def root():
    """Root endpoint."""
    return {"message": "Teacher Registry API", "version": settings.API_VERSION}


@router.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    await init_db()
    yield
    await close_db()


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    app = FastAPI(
        title=settings.API_TITLE,
        description="CRUD service for teacher records",
        version=settings.API_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )

    register_exception_handlers(app)

    app.include_router(router)
    app.include_router(create_api_router())

    return app
