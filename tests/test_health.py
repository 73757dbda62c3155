"""
Tests for the health endpoint.
"""

import pytest


@pytest.mark.asyncio
async def test_health_returns_ok(client):
    """GET /health should return status ok."""
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_cors_allows_frontend_origin(client):
    """Requests from the configured frontend origin get CORS headers."""
    response = await client.get("/health", headers={"Origin": "http://localhost:3000"})

    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:3000"
