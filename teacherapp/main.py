"""FastAPI application entry point."""

from teacherapp.application import create_app
from teacherapp.config import get_settings
from teacherapp.utils.logging import setup_logging

# Setup logging before creating app
setup_logging()

app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()

    uvicorn.run(
        "teacherapp.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
