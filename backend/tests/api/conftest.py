"""API test fixtures — FastAPI app over httpx ASGITransport.

Invariants:
    - get_catalog dependency overridden: routes see the catalog the test chooses
    - Overrides cleared after every test

Design Decisions:
    - Lifespan not run by ASGITransport: logging setup and catalog warm-up are
      startup concerns, exercised in test_health_routes via get_catalog directly
"""

import pytest
from httpx import ASGITransport, AsyncClient

from compliance_journey.infrastructure.catalog_loader import get_catalog
from compliance_journey.main import app


@pytest.fixture
def catalog_override(bundled_catalog):
    """Mutable holder: tests may swap in a custom catalog before requesting."""
    return {"catalog": bundled_catalog}


@pytest.fixture
async def client(catalog_override):
    app.dependency_overrides[get_catalog] = lambda: catalog_override["catalog"]
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
