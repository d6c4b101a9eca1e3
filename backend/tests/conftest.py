"""Root conftest — shared test configuration."""

import os

import pytest

# Tests always run against the bundled catalog with strict validation
os.environ.pop("JOURNEY_CATALOG_PATH", None)
os.environ.setdefault("JOURNEY_STRICT_PREREQUISITES", "true")
os.environ.setdefault("JOURNEY_LOG_FORMAT", "text")

from compliance_journey.infrastructure.catalog_loader import load_catalog  # noqa: E402


@pytest.fixture(scope="session")
def bundled_catalog():
    """The catalog shipped with the package, loaded once per test session."""
    return load_catalog()
