"""Board configuration routes."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from govflow.dependencies import CurrentUser, get_db
from govflow.models.board import BoardConfiguration, CreateBoardRequest, CreateBoardResponse
from govflow.repositories.board_config_repo import BoardConfigRepository
from govflow.services.organizations import resolve_organization
from govflow.services.workflow.boards import (
    board_to_model,
    create_type_specific_board,
    ensure_master_board,
)

router = APIRouter(tags=["Boards"])


@router.get("/board-config", response_model=BoardConfiguration)
async def get_board_config(
    user: CurrentUser,
    organization_id: str | None = None,
    db: AsyncSession = Depends(get_db),
) -> BoardConfiguration:
    """Return the master board, creating it on first view."""
    org = await resolve_organization(db, user, organization_id)
    row = await ensure_master_board(db, org.org_id)
    return board_to_model(row)


@router.get("/boards", response_model=list[BoardConfiguration])
async def list_boards(
    user: CurrentUser,
    organization_id: str | None = None,
    db: AsyncSession = Depends(get_db),
) -> list[BoardConfiguration]:
    org = await resolve_organization(db, user, organization_id)
    rows = await BoardConfigRepository(db).list_by_org(org.org_id)
    return [board_to_model(row) for row in rows]


@router.post("/boards", response_model=CreateBoardResponse)
async def create_board(
    body: CreateBoardRequest,
    user: CurrentUser,
    db: AsyncSession = Depends(get_db),
) -> CreateBoardResponse:
    """Create a type-specific board; returns the existing one if already present."""
    org = await resolve_organization(db, user, body.organization_id)
    row, was_created = await create_type_specific_board(
        db, org.org_id, body.board_type, body.board_name
    )
    return CreateBoardResponse(
        message="Board created" if was_created else "Board already exists",
        config_id=row.config_id,
        was_created=was_created,
    )
