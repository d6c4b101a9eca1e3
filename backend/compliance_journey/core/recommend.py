"""Recommendation Engine — next-best tools for a completed-set or a current tool.

Invariants:
    - Pure and deterministic: same catalog + inputs -> same output, no hidden state
    - recommend_next never returns a completed tool or a locked tool
    - A prerequisite absent from the catalog can never be satisfied (tool stays locked)
    - Every sort is stable: catalog declaration order is the final tie-break
    - recommended_next falls through: dependents -> same-phase successor -> next phase head

Design Decisions:
    - Entitlement-agnostic: recommendations ignore subscription gating (caller's policy)
    - Persona narrowing only applies to the dependents step, never to phase fallbacks
"""

from typing import Iterable

from compliance_journey.core.catalog import Tool, ToolCatalog
from compliance_journey.core.catalog_queries import (
    dependents_of,
    next_phase,
    phase_by_id,
    tool_by_id,
    tools_by_phase,
)
from compliance_journey.core.domain_types import DEFAULT_RECOMMENDATION_LIMIT


def unlocked_candidates(catalog: ToolCatalog, completed_ids: Iterable[str]) -> list[Tool]:
    """Not-yet-completed tools whose prerequisites are all completed, catalog order.

    Completed ids outside the catalog are dropped first, so a prerequisite that
    names an absent tool is never satisfied.
    """
    done = frozenset(completed_ids) & catalog.tool_ids
    return [
        t for t in catalog.tools
        if t.id not in done and t.is_unlocked(done)
    ]


def recommend_next(
    catalog: ToolCatalog,
    completed_ids: Iterable[str],
    limit: int = DEFAULT_RECOMMENDATION_LIMIT,
) -> list[Tool]:
    """Top-N unlocked tools sorted by (phase order, criticality rank)."""
    if limit <= 0:
        return []
    candidates = unlocked_candidates(catalog, completed_ids)
    ranked = sorted(
        candidates,
        key=lambda t: (phase_by_id(catalog, t.phase).order, t.criticality.rank),
    )
    return ranked[:limit]


def _most_critical(tools: list[Tool]) -> Tool:
    # min() returns the first minimal element: catalog order breaks ties
    return min(tools, key=lambda t: t.criticality.rank)


def recommended_next(
    catalog: ToolCatalog,
    current_tool_id: str,
    persona_id: str | None = None,
) -> Tool | None:
    """Single next step after current_tool_id, optionally biased to a persona.

    1. Tools depending on the current tool (persona subset first, if non-empty),
       picking the most critical.
    2. Otherwise the next tool in the current phase (position precedence).
    3. Otherwise the first tool of the next phase, or None.
    """
    current = tool_by_id(catalog, current_tool_id)
    if current is None:
        return None

    dependents = dependents_of(catalog, current.id)
    if dependents:
        if persona_id:
            for_persona = [t for t in dependents if t.serves(persona_id)]
            if for_persona:
                return _most_critical(for_persona)
        return _most_critical(dependents)

    phase_tools = tools_by_phase(catalog, current.phase)
    index = next(i for i, t in enumerate(phase_tools) if t.id == current.id)
    if index + 1 < len(phase_tools):
        return phase_tools[index + 1]

    following = next_phase(catalog, current.phase)
    if following is None:
        return None
    following_tools = tools_by_phase(catalog, following.id)
    return following_tools[0] if following_tools else None
