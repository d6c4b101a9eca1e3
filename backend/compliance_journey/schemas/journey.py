"""Journey API Schemas — request validation and response shapes for the HTTP shell.

Invariants:
    - completed_tool_ids: <= 1000 ids, each 1-200 chars; duplicates collapse (set semantics)
    - limit: 1-50 when given; None means the configured default
    - Response models built from core dataclasses via from_attributes (no hand mapping)

Design Decisions:
    - Unknown ids in completed_tool_ids are accepted: the core ignores them
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from compliance_journey.core.domain_types import (
    Complexity, CriticalityLevel, ToolPosition,
)

MAX_COMPLETED_IDS = 1000


class CompletedToolsRequest(BaseModel):
    """Completed-set snapshot supplied by the caller (external completion store)."""
    completed_tool_ids: list[str] = Field(
        default_factory=list, max_length=MAX_COMPLETED_IDS,
    )

    @field_validator("completed_tool_ids")
    @classmethod
    def check_ids(cls, v: list[str]) -> list[str]:
        for tool_id in v:
            if not tool_id or len(tool_id) > 200:
                raise ValueError("tool ids must be 1-200 characters")
        return v

    def completed_set(self) -> frozenset[str]:
        return frozenset(self.completed_tool_ids)


class RecommendationRequest(CompletedToolsRequest):
    limit: int | None = Field(None, ge=1, le=50)


# --- Responses ------------------------------------------------------------------

class _FromDomain(BaseModel):
    model_config = ConfigDict(from_attributes=True)


class PhaseResponse(_FromDomain):
    id: str
    name: str
    order: int
    default_criticality: CriticalityLevel
    description: str
    duration: str


class ToolResponse(_FromDomain):
    id: str
    name: str
    phase: str
    criticality: CriticalityLevel
    position: ToolPosition
    prerequisites: list[str]
    personas: list[str]
    path: str
    description: str
    customer_value: str
    time_estimate: str
    complexity: Complexity
    trigger_conditions: list[str]
    outputs: list[str]
    regulations: list[str]
    features: list[str]


class NextToolResponse(BaseModel):
    """Single-step recommendation — tool is null when nothing follows."""
    current_tool_id: str
    persona_id: str | None = None
    tool: ToolResponse | None = None


class PhaseProgressResponse(_FromDomain):
    total: int
    completed: int
    percentage: int


class ProgressResponse(_FromDomain):
    per_phase: dict[str, PhaseProgressResponse]
    overall: int


class RecommendationResponse(BaseModel):
    tools: list[ToolResponse]


class PersonaJourneyResponse(_FromDomain):
    persona_id: str
    persona_name: str
    journey_path: list[str]
    primary_tools: list[str]
    priority_level: CriticalityLevel


class PersonaPathProgressResponse(_FromDomain):
    persona_id: str
    total_steps: int
    completed_steps: int
    percentage: int
    next_step: ToolResponse | None = None


class PhaseToolCountResponse(_FromDomain):
    phase: PhaseResponse
    tool_count: int


class JourneyStatsResponse(_FromDomain):
    total_tools: int
    by_criticality: dict[str, int]
    by_phase: list[PhaseToolCountResponse]
