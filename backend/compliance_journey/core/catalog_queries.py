"""Catalog Queries — read-only accessors over a ToolCatalog.

Invariants:
    - All functions are pure, total and side-effect-free
    - Not-found is a normal outcome: None or an empty list, never an exception
    - Filters preserve catalog declaration order; tools_by_phase re-sorts by
      position precedence (emergency first) with a stable sort

Design Decisions:
    - Module functions taking the catalog explicitly, not ToolCatalog methods
      (ADR: catalog is data; queries are the functional core)
"""

from compliance_journey.core.catalog import Phase, Tool, ToolCatalog
from compliance_journey.core.domain_types import CriticalityLevel


def tools_by_phase(catalog: ToolCatalog, phase_id: str) -> list[Tool]:
    """Tools in the phase, emergency first, then primary → quaternary."""
    in_phase = [t for t in catalog.tools if t.phase == phase_id]
    return sorted(in_phase, key=lambda t: t.position.precedence)


def tools_by_criticality(catalog: ToolCatalog, level: CriticalityLevel | str) -> list[Tool]:
    return [t for t in catalog.tools if t.criticality == level]


def tools_by_persona(catalog: ToolCatalog, persona_id: str) -> list[Tool]:
    return [t for t in catalog.tools if t.serves(persona_id)]


def tool_by_id(catalog: ToolCatalog, tool_id: str) -> Tool | None:
    return catalog.get_tool(tool_id)


def phase_by_id(catalog: ToolCatalog, phase_id: str) -> Phase | None:
    return catalog.get_phase(phase_id)


def next_phase(catalog: ToolCatalog, phase_id: str) -> Phase | None:
    """Phase immediately after phase_id by order, or None for the last/unknown phase."""
    current = phase_by_id(catalog, phase_id)
    if current is None:
        return None
    later = [p for p in catalog.phases if p.order > current.order]
    return later[0] if later else None


def dependents_of(catalog: ToolCatalog, tool_id: str) -> list[Tool]:
    """Tools listing tool_id as a prerequisite, in catalog order."""
    return [t for t in catalog.tools if tool_id in t.prerequisites]
