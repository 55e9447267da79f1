"""
Test fixtures for Mile Compass backend tests.
"""
from datetime import date
from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import AsyncClient, ASGITransport

from milecompass.api.search import get_search_pipeline, get_today
from milecompass.config import Settings
from milecompass.main import app
from milecompass.services.mile_chart_registry import MileChartRegistry, get_mile_chart_registry
from milecompass.services.offer_source import FetchResult
from milecompass.services.search_pipeline import SearchPipeline

# June is regular season
TODAY = date(2026, 6, 1)


@pytest.fixture(scope="function")
def settings():
    return Settings(
        env="test",
        use_real_api=False,
        upstream_timeout_seconds=0.2,
    )


@pytest.fixture(scope="function")
def offer_source():
    """
    Mocked upstream source. Defaults to the unconfigured failure so searches
    run on the fallback set unless a test sets fetch_offers.return_value.
    """
    source = MagicMock()
    source.name = "upstream"
    source.fetch_offers = AsyncMock(
        return_value=FetchResult(success=False, source="upstream", error="Offer source not configured")
    )
    return source


@pytest.fixture(scope="function")
def registry():
    """A freshly seeded registry per test so add operations never leak."""
    return MileChartRegistry.seeded()


@pytest.fixture(scope="function")
def pipeline(offer_source, registry, settings):
    return SearchPipeline(offer_source=offer_source, registry=registry, settings=settings)


@pytest.fixture(scope="function")
async def client(pipeline, registry):
    """
    Create an async test client with the pipeline, registry and clock overridden.
    """
    app.dependency_overrides[get_search_pipeline] = lambda: pipeline
    app.dependency_overrides[get_mile_chart_registry] = lambda: registry
    app.dependency_overrides[get_today] = lambda: TODAY

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    # Clear overrides after test
    app.dependency_overrides.clear()
