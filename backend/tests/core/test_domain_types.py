"""Domain Types — verifies registries, ranks and position precedence.

Tests:
    - Criticality ranks are fixed critical=1 … low=4
    - EMERGENCY precedes PRIMARY in position precedence
    - Enums serialize to their string values
"""

from compliance_journey.core.domain_types import (
    CRITICALITY_LEVELS, POSITION_ORDER, CriticalityLevel, ToolPosition, ToolId,
)


def test_criticality_ranks_are_fixed():
    assert CriticalityLevel.CRITICAL.rank == 1
    assert CriticalityLevel.HIGH.rank == 2
    assert CriticalityLevel.MEDIUM.rank == 3
    assert CriticalityLevel.LOW.rank == 4


def test_criticality_registry_is_rank_ordered():
    ranks = [level.rank for level in CRITICALITY_LEVELS]
    assert ranks == sorted(ranks)
    assert set(CRITICALITY_LEVELS) == set(CriticalityLevel)


def test_emergency_precedes_primary():
    assert ToolPosition.EMERGENCY.precedence < ToolPosition.PRIMARY.precedence
    assert POSITION_ORDER[0] is ToolPosition.EMERGENCY


def test_position_order_after_emergency():
    assert POSITION_ORDER[1:] == (
        ToolPosition.PRIMARY,
        ToolPosition.SECONDARY,
        ToolPosition.TERTIARY,
        ToolPosition.QUATERNARY,
    )


def test_enums_compare_equal_to_string_values():
    assert CriticalityLevel("critical") is CriticalityLevel.CRITICAL
    assert ToolPosition.EMERGENCY == "emergency"


def test_tool_id_wraps_str():
    assert ToolId("gdpr-mapper") == "gdpr-mapper"
