"""Health & Readiness Probes — liveness and readiness endpoints for container orchestration.

Invariants:
    - GET /health/ always returns 200 if process is up (liveness)
    - GET /health/ready returns 503 if the catalog cannot be loaded (readiness)
"""

import logging
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from compliance_journey.core.errors import CatalogValidationError
from compliance_journey.infrastructure.catalog_loader import get_catalog

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return {
        "status": "healthy",
        "service": "compliance-journey-api",
        "version": "1.0.0",
    }


@router.get("/ready")
async def readiness_check():
    """Readiness probe — the catalog must load and validate."""
    try:
        catalog = get_catalog()
    except CatalogValidationError as e:
        logger.error(
            f"Catalog unavailable: {e.message}", extra={"error_code": e.code},
        )
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "reason": "catalog_invalid"},
        )
    return {
        "status": "ready",
        "checks": {"catalog": "healthy"},
        "tool_count": len(catalog.tools),
    }
