"""Catalog Routes — read-only phase, tool and stats listings.

Invariants:
    - Filters combine as an intersection; a phase filter returns position order
      (emergency first), otherwise catalog order
    - Unknown tool id -> 404 RESOURCE_NOT_FOUND; unknown filter values -> empty list
"""

from fastapi import APIRouter, Depends, Query

from compliance_journey.core.catalog import ToolCatalog
from compliance_journey.core.catalog_queries import (
    tool_by_id, tools_by_criticality, tools_by_persona, tools_by_phase,
)
from compliance_journey.core.domain_types import CriticalityLevel
from compliance_journey.core.errors import ErrorContext, ResourceNotFoundError
from compliance_journey.core.journey_stats import compute_journey_stats
from compliance_journey.infrastructure.catalog_loader import get_catalog
from compliance_journey.schemas.journey import (
    JourneyStatsResponse, PhaseResponse, ToolResponse,
)

router = APIRouter(prefix="/api/v1/catalog", tags=["catalog"])


@router.get("/phases", response_model=list[PhaseResponse])
async def list_phases(catalog: ToolCatalog = Depends(get_catalog)):
    """Phases in lifecycle order."""
    return [PhaseResponse.model_validate(p) for p in catalog.phases]


@router.get("/tools", response_model=list[ToolResponse])
async def list_tools(
    phase: str | None = Query(None),
    criticality: CriticalityLevel | None = Query(None),
    persona: str | None = Query(None),
    catalog: ToolCatalog = Depends(get_catalog),
):
    tools = (
        tools_by_phase(catalog, phase) if phase is not None else list(catalog.tools)
    )
    if criticality is not None:
        keep = {t.id for t in tools_by_criticality(catalog, criticality)}
        tools = [t for t in tools if t.id in keep]
    if persona is not None:
        keep = {t.id for t in tools_by_persona(catalog, persona)}
        tools = [t for t in tools if t.id in keep]
    return [ToolResponse.model_validate(t) for t in tools]


@router.get("/tools/{tool_id}", response_model=ToolResponse)
async def get_tool(tool_id: str, catalog: ToolCatalog = Depends(get_catalog)):
    tool = tool_by_id(catalog, tool_id)
    if tool is None:
        raise ResourceNotFoundError("Tool", tool_id, ErrorContext(tool_id=tool_id))
    return ToolResponse.model_validate(tool)


@router.get("/stats", response_model=JourneyStatsResponse)
async def get_stats(catalog: ToolCatalog = Depends(get_catalog)):
    """Total tools, counts per criticality and per phase."""
    return JourneyStatsResponse.model_validate(compute_journey_stats(catalog))
