"""Journey routes — progress, recommendations, next tool and persona endpoints.

Invariants verified:
    - Completed-set travels in the body; unknown ids are ignored
    - Recommendation limit defaults from settings (3)
    - Unknown persona -> 404 on direct persona routes only
"""

from tests.catalog_factory import make_catalog, make_tool


async def test_progress_empty(client):
    res = await client.post("/api/v1/journey/progress", json={})
    assert res.status_code == 200
    body = res.json()
    assert body["overall"] == 0
    assert body["per_phase"]["discovery"] == {"total": 4, "completed": 0, "percentage": 0}


async def test_progress_ignores_unknown_ids(client):
    res = await client.post(
        "/api/v1/journey/progress",
        json={"completed_tool_ids": ["privacy-gap-analyzer", "mystery-tool"]},
    )
    body = res.json()
    assert body["per_phase"]["discovery"]["completed"] == 1
    assert body["per_phase"]["discovery"]["percentage"] == 25
    assert body["overall"] == 6  # 1/18 = 5.56 -> 6


async def test_progress_phase_keys_in_order(client):
    res = await client.post("/api/v1/journey/progress", json={"completed_tool_ids": []})
    assert list(res.json()["per_phase"]) == [
        "discovery", "foundation", "documentation", "operations", "optimization",
    ]


async def test_recommendations_default_limit(client):
    res = await client.post("/api/v1/journey/recommendations", json={})
    assert [t["id"] for t in res.json()["tools"]] == [
        "privacy-gap-analyzer", "privacy-by-design-assessment", "vendor-risk-assessment",
    ]


async def test_recommendations_unlock_after_prerequisite(client):
    res = await client.post(
        "/api/v1/journey/recommendations",
        json={"completed_tool_ids": ["privacy-gap-analyzer"], "limit": 50},
    )
    ids = [t["id"] for t in res.json()["tools"]]
    assert "privacy-gap-analyzer" not in ids
    assert "gdpr-mapper" in ids
    assert "pii-data-flow-mapper" not in ids


async def test_recommendations_limit_validated(client):
    res = await client.post("/api/v1/journey/recommendations", json={"limit": 0})
    assert res.status_code == 400
    assert res.json()["error"]["details"][0]["field"] == "body.limit"


async def test_recommendations_all_done_is_empty(client, bundled_catalog):
    res = await client.post(
        "/api/v1/journey/recommendations",
        json={"completed_tool_ids": sorted(bundled_catalog.tool_ids)},
    )
    assert res.json() == {"tools": []}


async def test_next_tool_with_persona(client):
    res = await client.get(
        "/api/v1/journey/tools/privacy-gap-analyzer/next",
        params={"persona": "legal_counsel"},
    )
    body = res.json()
    assert body["tool"]["id"] == "privacy-policy-generator"
    assert body["persona_id"] == "legal_counsel"


async def test_next_tool_unknown_current_is_null(client):
    res = await client.get("/api/v1/journey/tools/not-a-tool/next")
    assert res.status_code == 200
    assert res.json()["tool"] is None


async def test_next_tool_crosses_phase(client, catalog_override):
    catalog_override["catalog"] = make_catalog([
        make_tool("a1"), make_tool("a2"), make_tool("b1", phase="b"),
    ])
    res = await client.get("/api/v1/journey/tools/a2/next")
    assert res.json()["tool"]["id"] == "b1"


async def test_persona_journey(client):
    res = await client.get("/api/v1/journey/personas/data_steward")
    assert res.status_code == 200
    body = res.json()
    assert body["journey_path"][0] == "privacy-gap-analyzer"
    assert body["priority_level"] == "high"


async def test_unknown_persona_is_404(client):
    res = await client.get("/api/v1/journey/personas/nobody")
    assert res.status_code == 404
    assert res.json()["error"]["context"]["persona_id"] == "nobody"


async def test_primary_tools_resolved(client):
    res = await client.get("/api/v1/journey/personas/compliance_manager/primary-tools")
    assert [t["id"] for t in res.json()] == [
        "privacy-gap-analyzer", "dpia-generator", "consent-management",
    ]


async def test_persona_progress(client):
    res = await client.post(
        "/api/v1/journey/personas/privacy_officer/progress",
        json={"completed_tool_ids": ["privacy-gap-analyzer", "gdpr-mapper"]},
    )
    body = res.json()
    assert body["completed_steps"] == 2
    assert body["total_steps"] == 5
    assert body["percentage"] == 40
    assert body["next_step"]["id"] == "dpia-manager"


async def test_persona_progress_unknown_persona_is_404(client):
    res = await client.post("/api/v1/journey/personas/nobody/progress", json={})
    assert res.status_code == 404
