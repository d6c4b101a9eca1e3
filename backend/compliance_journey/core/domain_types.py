"""Domain Types — rich types that replace bare strings across the journey engine.

Invariants:
    - ToolId, PhaseId, PersonaId wrap str — opaque identifiers, never parsed
    - CriticalityLevel ranks are fixed: critical=1 … low=4 (lower = more urgent)
    - ToolPosition precedence puts EMERGENCY before PRIMARY
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
    - Ranks kept in explicit tuples, not derived from Enum declaration order
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ToolId = NewType("ToolId", str)
PhaseId = NewType("PhaseId", str)
PersonaId = NewType("PersonaId", str)


# ─── Enums ───────────────────────────────────────────────────────

class CriticalityLevel(str, Enum):
    """Severity tiers — used as a sort key, never as an implicit filter."""
    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"

    @property
    def rank(self) -> int:
        return CRITICALITY_RANKS[self]


class ToolPosition(str, Enum):
    """Intra-phase tie-break tag. EMERGENCY always sorts first."""
    EMERGENCY = "emergency"
    PRIMARY = "primary"
    SECONDARY = "secondary"
    TERTIARY = "tertiary"
    QUATERNARY = "quaternary"

    @property
    def precedence(self) -> int:
        return POSITION_PRECEDENCE[self]


class Complexity(str, Enum):
    """Descriptive effort label carried through verbatim."""
    BASIC = "Basic"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"


# ─── Registries ──────────────────────────────────────────────────

# Criticality registry as an ordered sequence (rank ascending)
CRITICALITY_LEVELS: tuple[CriticalityLevel, ...] = (
    CriticalityLevel.CRITICAL,
    CriticalityLevel.HIGH,
    CriticalityLevel.MEDIUM,
    CriticalityLevel.LOW,
)

CRITICALITY_RANKS: dict[CriticalityLevel, int] = {
    level: i + 1 for i, level in enumerate(CRITICALITY_LEVELS)
}

POSITION_ORDER: tuple[ToolPosition, ...] = (
    ToolPosition.EMERGENCY,
    ToolPosition.PRIMARY,
    ToolPosition.SECONDARY,
    ToolPosition.TERTIARY,
    ToolPosition.QUATERNARY,
)

POSITION_PRECEDENCE: dict[ToolPosition, int] = {
    pos: i for i, pos in enumerate(POSITION_ORDER)
}

DEFAULT_RECOMMENDATION_LIMIT = 3
