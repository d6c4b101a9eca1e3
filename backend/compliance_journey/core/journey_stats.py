"""Journey Stats — pure summary counts over the catalog.

Invariants:
    - Criticality counts listed for every level in rank order (zero counts included)
    - Phase counts listed for every phase in phase order (empty phases included)
    - Never raises on an empty catalog
"""

from dataclasses import dataclass

from compliance_journey.core.catalog import Phase, ToolCatalog
from compliance_journey.core.catalog_queries import tools_by_criticality, tools_by_phase
from compliance_journey.core.domain_types import CRITICALITY_LEVELS


@dataclass(frozen=True)
class PhaseToolCount:
    phase: Phase
    tool_count: int


@dataclass(frozen=True)
class JourneyStats:
    total_tools: int
    by_criticality: dict[str, int]
    by_phase: list[PhaseToolCount]


def compute_journey_stats(catalog: ToolCatalog) -> JourneyStats:
    """Compute catalog summary statistics. Pure, no IO."""
    return JourneyStats(
        total_tools=len(catalog.tools),
        by_criticality={
            level.value: len(tools_by_criticality(catalog, level))
            for level in CRITICALITY_LEVELS
        },
        by_phase=[
            PhaseToolCount(phase=p, tool_count=len(tools_by_phase(catalog, p.id)))
            for p in catalog.phases
        ],
    )
