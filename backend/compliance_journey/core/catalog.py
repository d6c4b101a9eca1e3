"""Tool Catalog — immutable phase/tool/persona model built once per process.

Invariants:
    - phases sorted by order ascending (explicit sequence, never mapping iteration order)
    - tools kept in declaration order — the stable tie-break for every sort in core/
    - Tool, Phase, PersonaJourney and ToolCatalog are frozen; collections are tuples
    - build_catalog() validates before returning: an invalid catalog is never constructed

Design Decisions:
    - Explicit value passed to consumers instead of module-level globals
      (ADR: load once, read many, no hidden state)
    - Id indexes held in MappingProxyType: O(1) lookup, read-only for concurrent readers
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping

from compliance_journey.core.domain_types import (
    Complexity, CriticalityLevel, PersonaId, PhaseId, ToolId, ToolPosition,
)
from compliance_journey.core.validate_catalog import validate_catalog


@dataclass(frozen=True)
class Phase:
    """Ordered lifecycle stage grouping tools."""
    id: PhaseId
    name: str
    order: int
    default_criticality: CriticalityLevel
    description: str = ""
    duration: str = ""


@dataclass(frozen=True)
class Tool:
    """A single compliance task. Descriptive metadata is carried through verbatim."""
    id: ToolId
    name: str
    phase: PhaseId
    criticality: CriticalityLevel
    position: ToolPosition
    prerequisites: tuple[ToolId, ...] = ()
    personas: tuple[PersonaId, ...] = ()
    path: str = ""
    description: str = ""
    customer_value: str = ""
    time_estimate: str = ""
    complexity: Complexity = Complexity.INTERMEDIATE
    trigger_conditions: tuple[str, ...] = ()
    outputs: tuple[str, ...] = ()
    regulations: tuple[str, ...] = ()
    features: tuple[str, ...] = ()

    def is_unlocked(self, completed_ids: Iterable[str]) -> bool:
        """True when every prerequisite is in the completed set (vacuously true if none)."""
        if not isinstance(completed_ids, (set, frozenset)):
            completed_ids = set(completed_ids)
        return all(p in completed_ids for p in self.prerequisites)

    def serves(self, persona_id: str) -> bool:
        return persona_id in self.personas


@dataclass(frozen=True)
class PersonaJourney:
    """Static ordered path through the catalog for one persona."""
    persona_id: PersonaId
    persona_name: str
    journey_path: tuple[ToolId, ...]
    primary_tools: tuple[ToolId, ...] = ()
    priority_level: CriticalityLevel = CriticalityLevel.MEDIUM


@dataclass(frozen=True)
class ToolCatalog:
    """Frozen catalog. Construct through build_catalog(), not directly."""
    phases: tuple[Phase, ...]
    tools: tuple[Tool, ...]
    journeys: tuple[PersonaJourney, ...] = ()
    _tools_by_id: Mapping[str, Tool] = field(init=False, repr=False, compare=False)
    _phases_by_id: Mapping[str, Phase] = field(init=False, repr=False, compare=False)
    _journeys_by_persona: Mapping[str, PersonaJourney] = field(
        init=False, repr=False, compare=False,
    )

    def __post_init__(self):
        # frozen dataclass: indexes set once through object.__setattr__
        object.__setattr__(
            self, "_tools_by_id", MappingProxyType({t.id: t for t in self.tools}),
        )
        object.__setattr__(
            self, "_phases_by_id", MappingProxyType({p.id: p for p in self.phases}),
        )
        object.__setattr__(
            self, "_journeys_by_persona",
            MappingProxyType({j.persona_id: j for j in self.journeys}),
        )

    @property
    def tool_ids(self) -> frozenset[str]:
        return frozenset(self._tools_by_id)

    def get_tool(self, tool_id: str) -> Tool | None:
        return self._tools_by_id.get(tool_id)

    def get_phase(self, phase_id: str) -> Phase | None:
        return self._phases_by_id.get(phase_id)

    def get_journey(self, persona_id: str) -> PersonaJourney | None:
        return self._journeys_by_persona.get(persona_id)


def build_catalog(
    phases: Iterable[Phase],
    tools: Iterable[Tool],
    journeys: Iterable[PersonaJourney] = (),
    *,
    strict_prerequisites: bool = True,
) -> ToolCatalog:
    """Validate and freeze a catalog. Raises CatalogValidationError on bad config.

    With strict_prerequisites=False, prerequisites naming absent tools are kept
    as-is: the owning tool can never be unlocked.
    """
    phase_list = list(phases)
    tool_list = list(tools)
    journey_list = list(journeys)
    validate_catalog(
        phase_list, tool_list, journey_list,
        strict_prerequisites=strict_prerequisites,
    )
    return ToolCatalog(
        phases=tuple(sorted(phase_list, key=lambda p: p.order)),
        tools=tuple(tool_list),
        journeys=tuple(journey_list),
    )
