"""
Tests for health check endpoints.
"""
import pytest

from milecompass.services.mile_chart_registry import MileChartRegistry, get_mile_chart_registry
from milecompass.main import app


@pytest.mark.asyncio
async def test_health_endpoint_returns_healthy(client):
    """Test that the /health endpoint returns a healthy status."""
    response = await client.get("/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["mile_charts"] == 2


@pytest.mark.asyncio
async def test_health_returns_json(client):
    """Test that the /health endpoint returns JSON content type."""
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"


@pytest.mark.asyncio
async def test_health_degraded_without_charts(client):
    app.dependency_overrides[get_mile_chart_registry] = lambda: MileChartRegistry([])

    response = await client.get("/health")

    assert response.json() == {"status": "degraded", "mile_charts": 0}


@pytest.mark.asyncio
async def test_ping(client):
    response = await client.get("/ping")
    assert response.json() == {"status": "ok"}
