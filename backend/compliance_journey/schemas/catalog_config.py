"""Catalog Config Schemas — pydantic models for the static catalog file.

Invariants:
    - Unknown keys rejected (extra="forbid"): typos in config fail loudly at load
    - Every id, declared or referenced, is stripped and must be non-empty, so a
      reference always matches its declaration spelled the same way
    - Enum fields validated against domain enums
    - to_domain() output feeds build_catalog(), which applies the graph checks

Design Decisions:
    - Shape validation (pydantic) separate from graph validation (core): core stays
      free of third-party imports
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from compliance_journey.core.catalog import PersonaJourney, Phase, Tool
from compliance_journey.core.domain_types import (
    Complexity, CriticalityLevel, PersonaId, PhaseId, ToolId, ToolPosition,
)


def _clean_id(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("ids cannot be empty or whitespace")
    return v


class _ConfigModel(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)


class PhaseConfig(_ConfigModel):
    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    order: int
    default_criticality: CriticalityLevel
    description: str = ""
    duration: str = ""

    @field_validator("id")
    @classmethod
    def strip_id(cls, v: str) -> str:
        return _clean_id(v)

    def to_domain(self) -> Phase:
        return Phase(
            id=PhaseId(self.id), name=self.name, order=self.order,
            default_criticality=self.default_criticality,
            description=self.description, duration=self.duration,
        )


class ToolConfig(_ConfigModel):
    id: str = Field(min_length=1)
    name: str = Field(min_length=1)
    phase: str
    criticality: CriticalityLevel
    position: ToolPosition
    prerequisites: list[str] = Field(default_factory=list)
    personas: list[str] = Field(default_factory=list)
    path: str = ""
    description: str = ""
    customer_value: str = ""
    time_estimate: str = ""
    complexity: Complexity = Complexity.INTERMEDIATE
    trigger_conditions: list[str] = Field(default_factory=list)
    outputs: list[str] = Field(default_factory=list)
    regulations: list[str] = Field(default_factory=list)
    features: list[str] = Field(default_factory=list)

    @field_validator("id", "phase")
    @classmethod
    def strip_id(cls, v: str) -> str:
        return _clean_id(v)

    @field_validator("prerequisites", "personas")
    @classmethod
    def strip_refs(cls, v: list[str]) -> list[str]:
        return [_clean_id(ref) for ref in v]

    def to_domain(self) -> Tool:
        return Tool(
            id=ToolId(self.id),
            name=self.name,
            phase=PhaseId(self.phase),
            criticality=self.criticality,
            position=self.position,
            prerequisites=tuple(ToolId(p) for p in self.prerequisites),
            personas=tuple(PersonaId(p) for p in self.personas),
            path=self.path,
            description=self.description,
            customer_value=self.customer_value,
            time_estimate=self.time_estimate,
            complexity=self.complexity,
            trigger_conditions=tuple(self.trigger_conditions),
            outputs=tuple(self.outputs),
            regulations=tuple(self.regulations),
            features=tuple(self.features),
        )


class PersonaJourneyConfig(_ConfigModel):
    persona_id: str = Field(min_length=1)
    persona_name: str
    journey_path: list[str] = Field(default_factory=list)
    primary_tools: list[str] = Field(default_factory=list)
    priority_level: CriticalityLevel = CriticalityLevel.MEDIUM

    @field_validator("persona_id")
    @classmethod
    def strip_id(cls, v: str) -> str:
        return _clean_id(v)

    @field_validator("journey_path", "primary_tools")
    @classmethod
    def strip_refs(cls, v: list[str]) -> list[str]:
        return [_clean_id(ref) for ref in v]

    def to_domain(self) -> PersonaJourney:
        return PersonaJourney(
            persona_id=PersonaId(self.persona_id),
            persona_name=self.persona_name,
            journey_path=tuple(ToolId(t) for t in self.journey_path),
            primary_tools=tuple(ToolId(t) for t in self.primary_tools),
            priority_level=self.priority_level,
        )


class CatalogConfig(_ConfigModel):
    """Root of the catalog file."""
    version: str = "1.0.0"
    phases: list[PhaseConfig] = Field(min_length=1)
    tools: list[ToolConfig] = Field(default_factory=list)
    persona_journeys: list[PersonaJourneyConfig] = Field(default_factory=list)
