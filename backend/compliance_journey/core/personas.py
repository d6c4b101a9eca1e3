"""Persona Journey Index — persona lookups and progress along a persona's path.

Invariants:
    - Unknown persona -> None (journey, path progress) or empty list (primary tools)
    - primary_tools() returns ids in declared order; it does not feed recommend_next
    - persona_path_progress() ignores completed ids outside the journey path
"""

from dataclasses import dataclass
from typing import Iterable

from compliance_journey.core.catalog import PersonaJourney, Tool, ToolCatalog
from compliance_journey.core.progress import percent_half_up


@dataclass(frozen=True)
class PersonaPathProgress:
    persona_id: str
    total_steps: int
    completed_steps: int
    percentage: int
    next_step: Tool | None


def persona_journey(catalog: ToolCatalog, persona_id: str) -> PersonaJourney | None:
    return catalog.get_journey(persona_id)


def primary_tools(catalog: ToolCatalog, persona_id: str) -> list[str]:
    journey = catalog.get_journey(persona_id)
    return list(journey.primary_tools) if journey else []


def persona_path_progress(
    catalog: ToolCatalog, persona_id: str, completed_ids: Iterable[str],
) -> PersonaPathProgress | None:
    """How far the completed-set is along the persona's journey path.

    next_step is the first path tool not yet completed (path order, regardless
    of prerequisites), or None when the path is done.
    """
    journey = catalog.get_journey(persona_id)
    if journey is None:
        return None

    done = frozenset(completed_ids)
    path = journey.journey_path
    completed = sum(1 for tool_id in path if tool_id in done)
    pending = [tool_id for tool_id in path if tool_id not in done]
    return PersonaPathProgress(
        persona_id=journey.persona_id,
        total_steps=len(path),
        completed_steps=completed,
        percentage=percent_half_up(completed, len(path)),
        next_step=catalog.get_tool(pending[0]) if pending else None,
    )
