"""Unit tests for health check endpoints."""

from unittest.mock import AsyncMock, patch

import pytest
from httpx import AsyncClient
from sqlalchemy.exc import OperationalError


@pytest.mark.asyncio
async def test_root_health(client: AsyncClient):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy"}


@pytest.mark.asyncio
async def test_api_health(client: AsyncClient):
    response = await client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "service": "teacher-registry"}


@pytest.mark.asyncio
async def test_db_health_connected(client: AsyncClient):
    """GET /api/health/db reports a reachable database."""
    with patch("teacherapp.api.router.verify_db_connection", new_callable=AsyncMock):
        response = await client.get("/api/health/db")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "database": "connected"}


@pytest.mark.asyncio
async def test_db_health_disconnected(client: AsyncClient):
    """GET /api/health/db answers 503 when the database cannot be reached."""
    with patch(
        "teacherapp.api.router.verify_db_connection", new_callable=AsyncMock
    ) as mock_verify:
        mock_verify.side_effect = OperationalError("connection failed", None, None)
        response = await client.get("/api/health/db")

    assert response.status_code == 503
    body = response.json()
    assert body["status"] == "unhealthy"
    assert body["database"] == "disconnected"


@pytest.mark.asyncio
async def test_unknown_path_returns_json_404(client: AsyncClient):
    response = await client.get("/api/nothing-here")

    assert response.status_code == 404
    assert response.json()["error"] == "Not Found"
