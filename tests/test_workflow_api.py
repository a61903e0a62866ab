"""Tests for the /workflow routes.

Covers:
- 401 without or with an invalid token
- 404 when the caller owns no organization (or names one they do not own)
- 200 response envelope for the five reference scenarios
- Most-recent organization tie-break and explicit organization_id
- 500 envelope on an unexpected crash
- GET /workflow/schema
"""

from datetime import datetime, timezone

import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from govflow.db.models.board_config import BoardConfigRow
from govflow.db.models.organization import OrganizationRow
from govflow.db.models.proposal import ProposalRow


async def _seed_org(
    session: AsyncSession,
    org_id: str,
    owner: str = "owner@example.com",
    created_at: datetime | None = None,
) -> str:
    session.add(OrganizationRow(
        org_id=org_id,
        organization_name=f"Org {org_id}",
        created_by=owner,
        created_at=created_at or datetime(2025, 1, 1, tzinfo=timezone.utc),
    ))
    await session.commit()
    return org_id


async def _seed_proposal(session: AsyncSession, proposal_id: str, org_id: str, **fields) -> None:
    session.add(ProposalRow(
        proposal_id=proposal_id,
        organization_id=org_id,
        proposal_name=f"Proposal {proposal_id}",
        proposal_type="RFP",
        **fields,
    ))
    await session.commit()


async def _stage_of(session: AsyncSession, proposal_id: str) -> str | None:
    result = await session.execute(
        select(ProposalRow.custom_workflow_stage_id).where(ProposalRow.proposal_id == proposal_id)
    )
    return result.scalar_one()


@pytest.mark.asyncio
async def test_migrate_requires_authentication(client):
    r = await client.post("/api/v1/workflow/migrate")
    assert r.status_code == 401
    assert r.json()["error"] == "Unauthorized"


@pytest.mark.asyncio
async def test_migrate_rejects_invalid_token(client):
    r = await client.post("/api/v1/workflow/migrate", headers={"Authorization": "Bearer not-a-jwt"})
    assert r.status_code == 401
    assert r.json()["error"] == "Unauthorized"


@pytest.mark.asyncio
async def test_migrate_without_organization_is_404(client, auth_headers):
    r = await client.post("/api/v1/workflow/migrate", headers=auth_headers("nobody@example.com"))
    assert r.status_code == 404
    assert r.json()["error"] == "No organization found"


@pytest.mark.asyncio
async def test_migrate_new_org_places_won_proposal(client, db_session, auth_headers):
    org_id = await _seed_org(db_session, "org_api_new")
    await _seed_proposal(db_session, "prop_won", org_id, status="won")

    r = await client.post("/api/v1/workflow/migrate", headers=auth_headers())

    assert r.status_code == 200
    body = r.json()
    assert body["success"] is True
    assert body["message"] == "Migration completed"
    assert body["organization_id"] == org_id
    assert body["results"]["kanban_configs_updated"] == 1
    assert body["results"]["proposals_migrated"] == 1
    assert body["results"]["errors"] == []
    assert await _stage_of(db_session, "prop_won") == "won"


@pytest.mark.asyncio
async def test_migrate_preserves_collapsed_columns(client, db_session, auth_headers):
    org_id = await _seed_org(db_session, "org_api_prefs")
    db_session.add(BoardConfigRow(
        config_id="board_prefs",
        organization_id=org_id,
        board_type="master",
        is_master_board=True,
        applies_to_proposal_types=[],
        columns=[],
        collapsed_column_ids=["archived"],
    ))
    await db_session.commit()
    await _seed_proposal(db_session, "prop_phase3", org_id, status=None, current_phase="phase3")

    r = await client.post("/api/v1/workflow/migrate", headers=auth_headers(), json={})

    assert r.status_code == 200
    board = (await db_session.execute(
        select(BoardConfigRow.collapsed_column_ids, BoardConfigRow.columns)
        .where(BoardConfigRow.config_id == "board_prefs")
    )).one()
    assert board.collapsed_column_ids == ["archived"]
    assert len(board.columns) == 15
    assert await _stage_of(db_session, "prop_phase3") == "solicit"


@pytest.mark.asyncio
async def test_migrate_twice_reports_same_counts(client, db_session, auth_headers):
    org_id = await _seed_org(db_session, "org_api_twice")
    await _seed_proposal(db_session, "prop_r", org_id, status="client_rejected", current_phase="phase7")
    await _seed_proposal(db_session, "prop_none", org_id)

    first = (await client.post("/api/v1/workflow/migrate", headers=auth_headers())).json()
    second = (await client.post("/api/v1/workflow/migrate", headers=auth_headers())).json()

    assert first["results"]["proposals_migrated"] == second["results"]["proposals_migrated"] == 2
    assert second["results"]["kanban_configs_created"] == 0
    assert await _stage_of(db_session, "prop_r") == "lost"
    assert await _stage_of(db_session, "prop_none") == "initiate"


@pytest.mark.asyncio
async def test_migrate_uses_most_recent_organization(client, db_session, auth_headers):
    await _seed_org(db_session, "org_old", created_at=datetime(2024, 1, 1, tzinfo=timezone.utc))
    await _seed_org(db_session, "org_new", created_at=datetime(2025, 6, 1, tzinfo=timezone.utc))

    r = await client.post("/api/v1/workflow/migrate", headers=auth_headers())

    assert r.status_code == 200
    assert r.json()["organization_id"] == "org_new"


@pytest.mark.asyncio
async def test_migrate_explicit_organization(client, db_session, auth_headers):
    await _seed_org(db_session, "org_first", created_at=datetime(2024, 1, 1, tzinfo=timezone.utc))
    await _seed_org(db_session, "org_second", created_at=datetime(2025, 1, 1, tzinfo=timezone.utc))

    r = await client.post(
        "/api/v1/workflow/migrate", headers=auth_headers(), json={"organization_id": "org_first"}
    )

    assert r.status_code == 200
    assert r.json()["organization_id"] == "org_first"


@pytest.mark.asyncio
async def test_migrate_ignores_unknown_body_fields(client, db_session, auth_headers):
    org_id = await _seed_org(db_session, "org_extra")
    await _seed_proposal(db_session, "prop_extra", org_id, status="won")

    r = await client.post(
        "/api/v1/workflow/migrate", headers=auth_headers(), json={"force": True}
    )

    assert r.status_code == 200
    assert r.json()["results"]["proposals_migrated"] == 1
    assert await _stage_of(db_session, "prop_extra") == "won"


@pytest.mark.asyncio
async def test_migrate_someone_elses_organization_is_404(client, db_session, auth_headers):
    await _seed_org(db_session, "org_foreign", owner="other@example.com")
    await _seed_org(db_session, "org_own")

    r = await client.post(
        "/api/v1/workflow/migrate", headers=auth_headers(), json={"organization_id": "org_foreign"}
    )

    assert r.status_code == 404


@pytest.mark.asyncio
async def test_migrate_unexpected_crash_returns_500(client, db_session, auth_headers, monkeypatch):
    await _seed_org(db_session, "org_crash")

    async def _boom(self, organization_id):
        raise RuntimeError("boom")

    monkeypatch.setattr("govflow.api.routes.workflow.WorkflowMigrator.migrate", _boom)

    r = await client.post("/api/v1/workflow/migrate", headers=auth_headers())

    assert r.status_code == 500
    body = r.json()
    assert body["success"] is False
    assert body["error"] == "boom"
    assert "RuntimeError" in body["stack"]


@pytest.mark.asyncio
async def test_workflow_schema_endpoint(client, auth_headers):
    r = await client.get("/api/v1/workflow/schema", headers=auth_headers())

    assert r.status_code == 200
    body = r.json()
    assert [c["id"] for c in body["columns"]][-4:] == ["submitted", "won", "lost", "archived"]
    assert body["status_to_column"]["client_accepted"] == "won"
    assert body["phase_to_column"]["completed"] == "final"
    assert body["fallback_column_id"] == "initiate"
