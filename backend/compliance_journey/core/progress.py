"""Progress Calculator — per-phase and overall completion for one completed-set.

Invariants:
    - Pure: completed_ids is read, never retained or mutated
    - Order-independent and idempotent (completed_ids treated as a set)
    - Unknown ids in completed_ids are ignored — they never touch any denominator
    - Every percentage is an int in [0, 100]; an empty phase is 0%, not an error
    - Rounding is half-up (42.5 -> 43), NOT Python's banker's round()

Design Decisions:
    - Integer arithmetic for rounding: no float drift at exact .5 boundaries
    - per_phase is a dict in phase order (phases pre-sorted on the catalog)
"""

from dataclasses import dataclass, field
from typing import Iterable

from compliance_journey.core.catalog import ToolCatalog
from compliance_journey.core.catalog_queries import tools_by_phase


@dataclass(frozen=True)
class PhaseProgress:
    total: int
    completed: int
    percentage: int


@dataclass(frozen=True)
class ProgressReport:
    per_phase: dict[str, PhaseProgress] = field(default_factory=dict)
    overall: int = 0


def percent_half_up(part: int, whole: int) -> int:
    """round(100 * part / whole) with half-up rounding; 0 when whole is 0."""
    if whole <= 0:
        return 0
    return (200 * part + whole) // (2 * whole)


def compute_progress(catalog: ToolCatalog, completed_ids: Iterable[str]) -> ProgressReport:
    """Compute completion for every phase (in phase order) and overall."""
    done = frozenset(completed_ids)

    per_phase: dict[str, PhaseProgress] = {}
    for phase in catalog.phases:
        phase_tools = tools_by_phase(catalog, phase.id)
        completed = sum(1 for t in phase_tools if t.id in done)
        per_phase[phase.id] = PhaseProgress(
            total=len(phase_tools),
            completed=completed,
            percentage=percent_half_up(completed, len(phase_tools)),
        )

    catalog_ids = catalog.tool_ids
    overall = percent_half_up(len(catalog_ids & done), len(catalog_ids))
    return ProgressReport(per_phase=per_phase, overall=overall)
