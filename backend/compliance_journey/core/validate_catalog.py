"""Catalog Validation — load-time checks that keep the engine off an invalid catalog.

Invariants:
    - All functions are PURE: no IO, no logging
    - validate_catalog() raises the FIRST CatalogValidationError found, checks run in
      a fixed order: phases, tool ids, tool phases, prerequisites, cycles, journeys
    - Cycle detection only follows edges between ids that exist in the catalog
    - Check order within each pass follows declaration order (deterministic messages)

Design Decisions:
    - Exceptions (not error dicts): configuration errors are fatal, never a tool result
    - find_unknown_prerequisites() exported so the loader can warn in tolerant mode
"""

from collections import defaultdict
from typing import TYPE_CHECKING, Sequence

from compliance_journey.core.errors import (
    DuplicatePhaseIdError,
    DuplicatePhaseOrderError,
    DuplicateToolIdError,
    PrerequisiteCycleError,
    UnknownJourneyToolError,
    UnknownPhaseError,
    UnknownPrerequisiteError,
)

if TYPE_CHECKING:
    from compliance_journey.core.catalog import PersonaJourney, Phase, Tool

_WHITE, _GRAY, _BLACK = 0, 1, 2


def validate_catalog(
    phases: Sequence["Phase"],
    tools: Sequence["Tool"],
    journeys: Sequence["PersonaJourney"] = (),
    *,
    strict_prerequisites: bool = True,
) -> None:
    """Run every catalog check. Raises on the first violation."""
    check_phases(phases)
    check_tool_ids(tools)
    check_tool_phases(tools, {p.id for p in phases})
    if strict_prerequisites:
        check_prerequisites_exist(tools)
    check_acyclic(tools)
    check_journeys(journeys, {t.id for t in tools})


def check_phases(phases: Sequence["Phase"]) -> None:
    """Phase ids unique; phase orders unique (total order, no ties)."""
    seen_ids: set[str] = set()
    by_order: dict[int, list[str]] = defaultdict(list)
    for phase in phases:
        if phase.id in seen_ids:
            raise DuplicatePhaseIdError(phase.id)
        seen_ids.add(phase.id)
        by_order[phase.order].append(phase.id)
    for order, ids in by_order.items():
        if len(ids) > 1:
            raise DuplicatePhaseOrderError(order, ids)


def check_tool_ids(tools: Sequence["Tool"]) -> None:
    seen: set[str] = set()
    for tool in tools:
        if tool.id in seen:
            raise DuplicateToolIdError(tool.id)
        seen.add(tool.id)


def check_tool_phases(tools: Sequence["Tool"], phase_ids: set[str]) -> None:
    for tool in tools:
        if tool.phase not in phase_ids:
            raise UnknownPhaseError(tool.id, tool.phase)


def find_unknown_prerequisites(tools: Sequence["Tool"]) -> dict[str, list[str]]:
    """Map tool id -> prerequisite ids absent from the catalog (tools with none omitted)."""
    known = {t.id for t in tools}
    unknown: dict[str, list[str]] = {}
    for tool in tools:
        missing = [p for p in tool.prerequisites if p not in known]
        if missing:
            unknown[tool.id] = missing
    return unknown


def check_prerequisites_exist(tools: Sequence["Tool"]) -> None:
    for tool_id, missing in find_unknown_prerequisites(tools).items():
        raise UnknownPrerequisiteError(tool_id, missing)


def check_acyclic(tools: Sequence["Tool"]) -> None:
    """Depth-first search over tool -> prerequisite edges; raises on a back edge."""
    cycle = find_prerequisite_cycle(tools)
    if cycle:
        raise PrerequisiteCycleError(cycle)


def find_prerequisite_cycle(tools: Sequence["Tool"]) -> list[str] | None:
    """Return one cycle as a path (first id repeated last), or None for a DAG.

    Self-prerequisites count as a cycle of length one. Iterative with an
    explicit stack: chain depth is bounded by catalog size, not recursion limit.
    """
    edges = {t.id: t.prerequisites for t in tools}
    color = dict.fromkeys(edges, _WHITE)

    for root in edges:
        if color[root] != _WHITE:
            continue
        path: list[str] = [root]
        pending = [iter(edges[root])]
        color[root] = _GRAY
        while pending:
            dep = next(pending[-1], None)
            if dep is None:
                color[path.pop()] = _BLACK
                pending.pop()
            elif dep not in edges:
                continue  # unknown ids handled by check_prerequisites_exist
            elif color[dep] == _GRAY:
                return path[path.index(dep):] + [dep]
            elif color[dep] == _WHITE:
                color[dep] = _GRAY
                path.append(dep)
                pending.append(iter(edges[dep]))
    return None


def check_journeys(journeys: Sequence["PersonaJourney"], tool_ids: set[str]) -> None:
    """Journey paths and primary tools must reference catalog tools."""
    for journey in journeys:
        referenced = list(journey.journey_path) + list(journey.primary_tools)
        missing = list(dict.fromkeys(t for t in referenced if t not in tool_ids))
        if missing:
            raise UnknownJourneyToolError(journey.persona_id, missing)
