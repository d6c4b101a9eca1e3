"""Catalog query tests — filters, position ordering, not-found outcomes."""

from compliance_journey.core.catalog_queries import (
    dependents_of,
    next_phase,
    phase_by_id,
    tool_by_id,
    tools_by_criticality,
    tools_by_persona,
    tools_by_phase,
)
from compliance_journey.core.domain_types import CriticalityLevel as C, ToolPosition as P
from tests.catalog_factory import make_catalog, make_phase, make_tool


def _ids(tools):
    return [t.id for t in tools]


def test_emergency_tool_sorts_first_regardless_of_declaration():
    catalog = make_catalog([
        make_tool("prim", position=P.PRIMARY),
        make_tool("emerg", position=P.EMERGENCY),
    ])
    assert _ids(tools_by_phase(catalog, "a")) == ["emerg", "prim"]


def test_tools_by_phase_full_position_precedence():
    catalog = make_catalog([
        make_tool("q", position=P.QUATERNARY),
        make_tool("t", position=P.TERTIARY),
        make_tool("s", position=P.SECONDARY),
        make_tool("p", position=P.PRIMARY),
        make_tool("e", position=P.EMERGENCY),
        make_tool("other-phase", phase="b", position=P.EMERGENCY),
    ])
    assert _ids(tools_by_phase(catalog, "a")) == ["e", "p", "s", "t", "q"]


def test_tools_by_phase_same_position_keeps_catalog_order():
    catalog = make_catalog([
        make_tool("first", position=P.SECONDARY),
        make_tool("second", position=P.PRIMARY),
        make_tool("third", position=P.SECONDARY),
    ])
    assert _ids(tools_by_phase(catalog, "a")) == ["second", "first", "third"]


def test_tools_by_phase_unknown_phase_is_empty():
    catalog = make_catalog([make_tool("x")])
    assert tools_by_phase(catalog, "missing") == []


def test_tools_by_criticality_preserves_catalog_order():
    catalog = make_catalog([
        make_tool("z", criticality=C.CRITICAL, phase="b"),
        make_tool("y", criticality=C.LOW),
        make_tool("x", criticality=C.CRITICAL),
    ])
    assert _ids(tools_by_criticality(catalog, C.CRITICAL)) == ["z", "x"]
    assert _ids(tools_by_criticality(catalog, "low")) == ["y"]


def test_tools_by_persona_filters_membership():
    catalog = make_catalog([
        make_tool("x", personas=("dpo", "legal")),
        make_tool("y", personas=("steward",)),
        make_tool("z", personas=("legal",)),
    ])
    assert _ids(tools_by_persona(catalog, "legal")) == ["x", "z"]
    assert tools_by_persona(catalog, "nobody") == []


def test_tool_by_id_not_found_is_none():
    catalog = make_catalog([make_tool("x")])
    assert tool_by_id(catalog, "x").id == "x"
    assert tool_by_id(catalog, "missing") is None


def test_next_phase_follows_order_not_declaration():
    catalog = make_catalog(
        [],
        phases=[make_phase("c", 30), make_phase("a", 10), make_phase("b", 20)],
    )
    assert next_phase(catalog, "a").id == "b"
    assert next_phase(catalog, "b").id == "c"
    assert next_phase(catalog, "c") is None
    assert next_phase(catalog, "missing") is None
    assert phase_by_id(catalog, "b").order == 20


def test_dependents_of_in_catalog_order():
    catalog = make_catalog([
        make_tool("root"),
        make_tool("d2", prerequisites=("other", "root")),
        make_tool("other"),
        make_tool("d1", prerequisites=("root",)),
    ])
    assert _ids(dependents_of(catalog, "root")) == ["d2", "d1"]
    assert dependents_of(catalog, "d1") == []


def test_bundled_operations_phase_puts_incident_response_first(bundled_catalog):
    ops = tools_by_phase(bundled_catalog, "operations")
    assert ops[0].id == "incident-response-manager"
    assert _ids(ops[1:]) == [
        "privacy-rights-manager", "consent-management", "service-provider-manager",
    ]
