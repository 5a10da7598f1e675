"""Pytest configuration and shared fixtures.

Every test gets a fresh in-memory SQLite database; route tests reach it
through an override of the get_db_session dependency.
"""

import os
from typing import AsyncGenerator, Generator

# Must be set before teacherapp.config builds the global settings
os.environ.setdefault("API_TITLE", "Teacher Registry Test")
os.environ.setdefault("API_VERSION", "0.1.0-test")
os.environ.setdefault("DEBUG", "False")
os.environ.setdefault("HOST", "127.0.0.1")
os.environ.setdefault("PORT", "8000")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest  # noqa: E402
from fastapi import FastAPI  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

import teacherapp.models  # noqa: E402,F401
from teacherapp.application import create_app  # noqa: E402
from teacherapp.config import Settings  # noqa: E402
from teacherapp.utils.db import Base, get_db_session  # noqa: E402


@pytest.fixture(scope="session")
def settings() -> Settings:
    """Create test settings instance."""
    return Settings()


@pytest.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine, None]:
    """In-memory database with all tables created."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(
    session_factory: async_sessionmaker,
) -> AsyncGenerator[AsyncSession, None]:
    """Session on the test database."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def app(session_factory: async_sessionmaker) -> Generator[FastAPI, None, None]:
    """Application wired to the test database."""
    app = create_app()

    async def override_get_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client for the application (lifespan is not run)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
