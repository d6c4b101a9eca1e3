"""Journey Routes — progress, recommendations and persona journeys for one user.

Invariants:
    - The completed-set arrives in the request body on every call; nothing is stored
    - Recommendations are entitlement-agnostic (gating is the caller's job)
    - Unknown persona on direct persona lookups -> 404; on /next it only disables narrowing

Design Decisions:
    - POST for completed-set queries: the set can be large and is not a resource id
"""

import logging

from fastapi import APIRouter, Depends, Query

from compliance_journey.config import Settings, get_settings
from compliance_journey.core.catalog import ToolCatalog
from compliance_journey.core.errors import ErrorContext, ResourceNotFoundError
from compliance_journey.core.personas import (
    persona_journey, persona_path_progress, primary_tools,
)
from compliance_journey.core.progress import compute_progress
from compliance_journey.core.recommend import recommend_next, recommended_next
from compliance_journey.infrastructure.catalog_loader import get_catalog
from compliance_journey.schemas.journey import (
    CompletedToolsRequest,
    NextToolResponse,
    PersonaJourneyResponse,
    PersonaPathProgressResponse,
    ProgressResponse,
    RecommendationRequest,
    RecommendationResponse,
    ToolResponse,
)

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/journey", tags=["journey"])


def _persona_not_found(persona_id: str) -> ResourceNotFoundError:
    return ResourceNotFoundError(
        "Persona journey", persona_id, ErrorContext(persona_id=persona_id),
    )


@router.post("/progress", response_model=ProgressResponse)
async def get_progress(
    body: CompletedToolsRequest, catalog: ToolCatalog = Depends(get_catalog),
):
    """Per-phase and overall completion percentages."""
    report = compute_progress(catalog, body.completed_set())
    return ProgressResponse.model_validate(report)


@router.post("/recommendations", response_model=RecommendationResponse)
async def get_recommendations(
    body: RecommendationRequest,
    catalog: ToolCatalog = Depends(get_catalog),
    settings: Settings = Depends(get_settings),
):
    """Top-N unlocked tools, phase order first, then criticality."""
    limit = body.limit or settings.default_recommendation_limit
    tools = recommend_next(catalog, body.completed_set(), limit)
    return RecommendationResponse(
        tools=[ToolResponse.model_validate(t) for t in tools],
    )


@router.get("/tools/{tool_id}/next", response_model=NextToolResponse)
async def get_next_tool(
    tool_id: str,
    persona: str | None = Query(None),
    catalog: ToolCatalog = Depends(get_catalog),
):
    """Single guided next step after tool_id (tool is null when none follows)."""
    tool = recommended_next(catalog, tool_id, persona)
    if tool is None:
        logger.info(
            f"No next tool after {tool_id}",
            extra={"tool_id": tool_id, "persona_id": persona},
        )
    return NextToolResponse(
        current_tool_id=tool_id,
        persona_id=persona,
        tool=ToolResponse.model_validate(tool) if tool else None,
    )


@router.get("/personas/{persona_id}", response_model=PersonaJourneyResponse)
async def get_persona_journey(
    persona_id: str, catalog: ToolCatalog = Depends(get_catalog),
):
    journey = persona_journey(catalog, persona_id)
    if journey is None:
        raise _persona_not_found(persona_id)
    return PersonaJourneyResponse.model_validate(journey)


@router.get("/personas/{persona_id}/primary-tools", response_model=list[ToolResponse])
async def get_primary_tools(
    persona_id: str, catalog: ToolCatalog = Depends(get_catalog),
):
    """Primary tools resolved to full records, in declared order."""
    if persona_journey(catalog, persona_id) is None:
        raise _persona_not_found(persona_id)
    return [
        ToolResponse.model_validate(catalog.get_tool(tool_id))
        for tool_id in primary_tools(catalog, persona_id)
    ]


@router.post(
    "/personas/{persona_id}/progress", response_model=PersonaPathProgressResponse,
)
async def get_persona_progress(
    persona_id: str,
    body: CompletedToolsRequest,
    catalog: ToolCatalog = Depends(get_catalog),
):
    """Progress along the persona's journey path and its next pending step."""
    progress = persona_path_progress(catalog, persona_id, body.completed_set())
    if progress is None:
        raise _persona_not_found(persona_id)
    return PersonaPathProgressResponse.model_validate(progress)
