"""Tests for board configuration routes and type-specific boards."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from govflow.db.models.board_config import BoardConfigRow
from govflow.db.models.organization import OrganizationRow
from govflow.repositories.board_config_repo import BoardConfigRepository
from govflow.services.workflow.board_templates import BOARD_TEMPLATES, TEMPLATE_BOARD_TYPES
from govflow.services.workflow.boards import create_type_specific_board, ensure_master_board


async def _seed_org(session: AsyncSession, org_id: str = "org_boards") -> str:
    session.add(OrganizationRow(org_id=org_id, organization_name="Boards Org", created_by="owner@example.com"))
    await session.commit()
    return org_id


@pytest.mark.asyncio
async def test_board_config_created_on_first_view(client, db_session, auth_headers):
    org_id = await _seed_org(db_session)

    first = await client.get("/api/v1/board-config", headers=auth_headers())
    second = await client.get("/api/v1/board-config", headers=auth_headers())

    assert first.status_code == 200
    data = first.json()
    assert data["organization_id"] == org_id
    assert data["is_master_board"] is True
    assert data["board_type"] == "master"
    assert len(data["columns"]) == 15
    assert data["collapsed_column_ids"] == []
    assert second.json()["config_id"] == data["config_id"]


@pytest.mark.asyncio
async def test_board_config_requires_auth(client):
    r = await client.get("/api/v1/board-config")
    assert r.status_code == 401


@pytest.mark.asyncio
async def test_create_type_specific_board(client, db_session, auth_headers):
    org_id = await _seed_org(db_session)

    r = await client.post("/api/v1/boards", headers=auth_headers(), json={"board_type": "sbir"})

    assert r.status_code == 200
    data = r.json()
    assert data["was_created"] is True
    assert data["message"] == "Board created"

    boards = (await client.get("/api/v1/boards", headers=auth_headers())).json()
    assert len(boards) == 1
    board = boards[0]
    assert board["organization_id"] == org_id
    assert board["board_name"] == "SBIR/STTR Board"
    assert board["applies_to_proposal_types"] == ["SBIR"]
    assert board["is_master_board"] is False
    columns = {c["id"]: c for c in board["columns"]}
    assert columns["sbir_concept"]["is_locked"] is False
    assert columns["won"]["label"] == "Awarded"
    assert columns["won"]["is_locked"] is True
    assert all(c["wip_limit"] == 0 and c["checklist_items"] == [] for c in board["columns"])


@pytest.mark.asyncio
async def test_create_board_is_idempotent(client, db_session, auth_headers):
    await _seed_org(db_session)
    payload = {"board_type": "rfi", "board_name": "Quick RFIs"}

    first = (await client.post("/api/v1/boards", headers=auth_headers(), json=payload)).json()
    second = (await client.post("/api/v1/boards", headers=auth_headers(), json=payload)).json()

    assert first["was_created"] is True
    assert second["was_created"] is False
    assert second["message"] == "Board already exists"
    assert second["config_id"] == first["config_id"]


@pytest.mark.asyncio
async def test_create_board_invalid_type(client, db_session, auth_headers):
    await _seed_org(db_session)

    r = await client.post("/api/v1/boards", headers=auth_headers(), json={"board_type": "grants"})

    assert r.status_code == 400
    assert "rfp, rfi, sbir, gsa, idiq, state_local" in r.json()["error"]


@pytest.mark.asyncio
async def test_master_and_template_boards_listed_master_first(client, db_session, auth_headers):
    await _seed_org(db_session)
    await client.post("/api/v1/boards", headers=auth_headers(), json={"board_type": "gsa"})
    await client.get("/api/v1/board-config", headers=auth_headers())

    boards = (await client.get("/api/v1/boards", headers=auth_headers())).json()

    assert [b["board_type"] for b in boards] == ["master", "gsa"]


@pytest.mark.parametrize("board_type", TEMPLATE_BOARD_TYPES)
def test_template_columns_are_ordered(board_type):
    columns = BOARD_TEMPLATES[board_type]["columns"]
    assert [c.order for c in columns] == list(range(len(columns)))
    assert len({c.id for c in columns}) == len(columns)


@pytest.mark.asyncio
async def test_template_boards_get_their_own_preferences(client, db_session, auth_headers):
    await _seed_org(db_session)
    await client.post("/api/v1/boards", headers=auth_headers(), json={"board_type": "idiq"})
    await client.get("/api/v1/board-config", headers=auth_headers())

    boards = {b["board_type"]: b for b in (await client.get("/api/v1/boards", headers=auth_headers())).json()}

    assert boards["idiq"]["swimlane_config"] == {
        "enabled": False, "group_by": "none", "show_empty_swimlanes": False,
    }
    assert boards["idiq"]["view_settings"]["show_card_details"] == [
        "assignees", "due_date", "progress", "value", "tasks",
    ]
    assert boards["master"]["swimlane_config"] == {"enabled": False, "group_by": "none"}
    assert "tasks" not in boards["master"]["view_settings"]["show_card_details"]


@pytest.mark.asyncio
async def test_create_fifteen_column_rfp_board(client, db_session, auth_headers):
    await _seed_org(db_session)

    first = (await client.post(
        "/api/v1/boards", headers=auth_headers(), json={"board_type": "rfp_15_column"}
    )).json()
    second = (await client.post(
        "/api/v1/boards", headers=auth_headers(), json={"board_type": "rfp_15_column"}
    )).json()

    assert first["was_created"] is True
    assert second["was_created"] is False
    assert second["config_id"] == first["config_id"]

    board = (await client.get("/api/v1/boards", headers=auth_headers())).json()[0]
    assert board["board_name"] == "RFP Workflow (15-Column)"
    assert board["applies_to_proposal_types"] == ["RFP"]
    columns = board["columns"]
    assert len(columns) == 15
    assert [c["id"] for c in columns[:3]] == ["initiate", "team", "resources"]
    assert [c["id"] for c in columns[11:]] == ["submitted", "won", "lost", "archived"]

    working = columns[:11]
    assert all(c["type"] == "custom_stage" and c["is_locked"] is False for c in working)
    assert all(c["wip_limit_type"] == "soft" for c in working)
    assert all(c["can_drag_to_here_roles"] == [] and c["can_drag_from_here_roles"] == [] for c in columns)

    final = columns[10]
    assert final["requires_approval_to_exit"] is True
    assert final["approver_roles"] == ["organization_owner", "proposal_manager"]
    assert [i["id"] for i in final["checklist_items"]] == ["export_pdf", "submission_checklist", "final_signoff"]

    closing = columns[11:]
    assert all(c["is_terminal"] and c["default_status_mapping"] == c["id"] for c in closing)
    assert all("wip_limit_type" not in c for c in closing)


def _stale_once(monkeypatch):
    """Make the next board lookup miss, as if another request inserted right after it."""
    original = BoardConfigRepository.get_by_org_and_type
    calls = []

    async def lookup(self, organization_id, board_type):
        calls.append(board_type)
        if len(calls) == 1:
            return None
        return await original(self, organization_id, board_type)

    monkeypatch.setattr(BoardConfigRepository, "get_by_org_and_type", lookup)
    return calls


@pytest.mark.asyncio
async def test_concurrent_type_board_create_returns_existing(db_session, monkeypatch):
    org_id = await _seed_org(db_session)
    db_session.add(BoardConfigRow(
        config_id="board_winner", organization_id=org_id, board_type="sbir",
        board_name="Winner", is_master_board=False, applies_to_proposal_types=["SBIR"], columns=[],
    ))
    await db_session.commit()
    calls = _stale_once(monkeypatch)

    row, was_created = await create_type_specific_board(db_session, org_id, "sbir")

    assert was_created is False
    assert row.config_id == "board_winner"
    assert row.board_name == "Winner"
    assert len(calls) == 2


@pytest.mark.asyncio
async def test_concurrent_first_view_keeps_stored_master(db_session, monkeypatch):
    org_id = await _seed_org(db_session)
    db_session.add(BoardConfigRow(
        config_id="board_other", organization_id=org_id, board_type="master",
        board_name="All Proposals", is_master_board=True, schema_version="1.0",
        applies_to_proposal_types=[], columns=[],
    ))
    await db_session.commit()
    _stale_once(monkeypatch)

    row = await ensure_master_board(db_session, org_id)

    assert row.config_id == "board_other"
    assert row.columns == []
    assert row.schema_version == "1.0"
