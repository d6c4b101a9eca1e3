"""Compliance Journey API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map JourneyError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Catalog loaded and validated on startup: an invalid catalog aborts boot

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - Catalog load in lifespan warms the lru_cache, so request handlers never pay
      the parse cost and configuration errors surface before traffic
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from compliance_journey.api.error_handlers import register_error_handlers
from compliance_journey.api.routes import catalog, health, journey
from compliance_journey.config import get_settings
from compliance_journey.infrastructure.catalog_loader import get_catalog
from compliance_journey.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    journey_catalog = get_catalog()
    logger.info(
        "Compliance Journey API started",
        extra={"tool_count": len(journey_catalog.tools)},
    )
    yield
    logger.info("Compliance Journey API shutting down")


app = FastAPI(
    title="Compliance Journey API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

# Routes — explicit registration
app.include_router(health.router)
app.include_router(catalog.router)
app.include_router(journey.router)

register_error_handlers(app)
