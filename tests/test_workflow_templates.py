"""Tests for system workflow template initialization."""

import pytest
from sqlalchemy import select

from govflow.db.models.workflow_template import WorkflowTemplateRow
from govflow.errors.exceptions import ConflictError
from govflow.repositories.workflow_template_repo import WorkflowTemplateRepository
from govflow.services.workflow.system_templates import (
    SYSTEM_TEMPLATES,
    initialize_system_templates,
)

ALL_KEYS = ["RFP", "RFI", "SBIR", "GSA", "IDIQ", "STATE_LOCAL", "QUICK_PROPOSAL"]


@pytest.mark.asyncio
async def test_initialize_requires_authentication(client):
    r = await client.post("/api/v1/workflow-templates/initialize")
    assert r.status_code == 401


@pytest.mark.asyncio
async def test_initialize_installs_every_template(client, auth_headers):
    r = await client.post("/api/v1/workflow-templates/initialize", headers=auth_headers())

    assert r.status_code == 200
    data = r.json()
    assert data["success"] is True
    assert data["summary"] == {"created": 7, "updated": 0, "skipped": 0}
    assert [e["type"] for e in data["results"]["created"]] == ALL_KEYS
    assert data["results"]["created"][0]["message"] == "Created template for RFP"

    templates = (await client.get("/api/v1/workflow-templates", headers=auth_headers())).json()
    by_key = {t["template_key"]: t for t in templates}
    assert set(by_key) == set(ALL_KEYS)
    quick = by_key["QUICK_PROPOSAL"]
    assert quick["proposal_type_category"] == "OTHER"
    assert quick["board_type"] == "quick_proposal"
    assert quick["template_type"] == "system"
    assert quick["usage_count"] == 0
    assert [c["id"] for c in quick["workflow_config"]["columns"]][:4] == [
        "setup", "ai_generate", "refine", "finalize",
    ]
    assert by_key["SBIR"]["estimated_duration_days"] == 90


@pytest.mark.asyncio
async def test_initialize_twice_skips_stored_templates(client, auth_headers):
    first = (await client.post("/api/v1/workflow-templates/initialize", headers=auth_headers())).json()
    second = (await client.post("/api/v1/workflow-templates/initialize", headers=auth_headers())).json()

    assert second["summary"] == {"created": 0, "updated": 0, "skipped": 7}
    assert second["results"]["skipped"][0]["message"] == "Template for RFP already exists"
    assert [e["template_id"] for e in second["results"]["skipped"]] == [
        e["template_id"] for e in first["results"]["created"]
    ]


@pytest.mark.asyncio
async def test_overwrite_restores_definition_and_keeps_usage(client, db_session, auth_headers):
    await client.post(
        "/api/v1/workflow-templates/initialize", headers=auth_headers(), json={"template_type": "GSA"}
    )
    row = (await db_session.execute(
        select(WorkflowTemplateRow).where(WorkflowTemplateRow.template_key == "GSA")
    )).scalar_one()
    row.template_name = "Edited"
    row.usage_count = 4
    await db_session.commit()

    r = await client.post(
        "/api/v1/workflow-templates/initialize",
        headers=auth_headers(),
        json={"template_type": "GSA", "overwrite_existing": True},
    )

    assert r.json()["summary"] == {"created": 0, "updated": 1, "skipped": 0}
    assert r.json()["results"]["updated"][0]["message"] == "Updated template for GSA"
    name, usage = (await db_session.execute(
        select(WorkflowTemplateRow.template_name, WorkflowTemplateRow.usage_count)
        .where(WorkflowTemplateRow.template_key == "GSA")
    )).one()
    assert name == "GSA Schedule Workflow"
    assert usage == 4


@pytest.mark.asyncio
async def test_initialize_single_type(client, auth_headers):
    r = await client.post(
        "/api/v1/workflow-templates/initialize", headers=auth_headers(), json={"template_type": "RFI"}
    )

    assert r.json()["summary"] == {"created": 1, "updated": 0, "skipped": 0}
    templates = (await client.get("/api/v1/workflow-templates", headers=auth_headers())).json()
    assert [t["template_key"] for t in templates] == ["RFI"]


@pytest.mark.asyncio
async def test_initialize_unknown_type_is_400(client, auth_headers):
    r = await client.post(
        "/api/v1/workflow-templates/initialize", headers=auth_headers(), json={"template_type": "GRANT"}
    )

    assert r.status_code == 400
    assert "QUICK_PROPOSAL" in r.json()["error"]


@pytest.mark.asyncio
async def test_concurrent_initialize_raises_conflict(db_session, monkeypatch):
    await initialize_system_templates(db_session, "RFP")

    async def missing(self, template_key):
        return None

    monkeypatch.setattr(WorkflowTemplateRepository, "get_system_template", missing)

    with pytest.raises(ConflictError) as exc_info:
        await initialize_system_templates(db_session, "RFP")

    assert exc_info.value.status_code == 409
    count = (await db_session.execute(select(WorkflowTemplateRow.template_id))).all()
    assert len(count) == 1


@pytest.mark.asyncio
async def test_concurrent_initialize_is_409_over_http(client, auth_headers, monkeypatch):
    await client.post(
        "/api/v1/workflow-templates/initialize", headers=auth_headers(), json={"template_type": "IDIQ"}
    )

    async def missing(self, template_key):
        return None

    monkeypatch.setattr(WorkflowTemplateRepository, "get_system_template", missing)

    r = await client.post(
        "/api/v1/workflow-templates/initialize", headers=auth_headers(), json={"template_type": "IDIQ"}
    )

    assert r.status_code == 409
    assert r.json()["code"] == "CONFLICT"


@pytest.mark.parametrize("key", list(SYSTEM_TEMPLATES))
def test_template_columns_are_ordered(key):
    columns = SYSTEM_TEMPLATES[key].columns
    assert [c.order for c in columns] == list(range(len(columns)))
    assert "submitted" in {c.id for c in columns}
