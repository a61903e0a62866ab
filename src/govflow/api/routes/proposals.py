"""Proposal API routes."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from govflow.dependencies import CurrentUser, get_db
from govflow.models.proposal import Proposal, ProposalCreate
from govflow.repositories.proposal_repo import ProposalRepository
from govflow.services.id_generator import generate_id
from govflow.services.organizations import resolve_organization
from govflow.services.workflow.stage_resolver import board_placement

router = APIRouter(tags=["Proposals"])


@router.post("/proposals", status_code=201, response_model=Proposal)
async def create_proposal(
    body: ProposalCreate,
    user: CurrentUser,
    db: AsyncSession = Depends(get_db),
) -> Proposal:
    org = await resolve_organization(db, user, body.organization_id)
    repo = ProposalRepository(db)
    proposal = await repo.create(
        proposal_id=generate_id("prop_"),
        organization_id=org.org_id,
        proposal_name=body.proposal_name,
        proposal_type=body.proposal_type.value,
        status=body.status,
        current_phase=body.current_phase,
        custom_workflow_stage_id=body.custom_workflow_stage_id,
    )
    await db.commit()
    return _proposal_model(proposal)


@router.get("/proposals", response_model=list[Proposal])
async def list_proposals(
    user: CurrentUser,
    organization_id: str | None = None,
    db: AsyncSession = Depends(get_db),
) -> list[Proposal]:
    """List the organization's proposals with their board column."""
    org = await resolve_organization(db, user, organization_id)
    proposals = await ProposalRepository(db).list_by_org(org.org_id)
    return [_proposal_model(p) for p in proposals]


def _proposal_model(proposal) -> Proposal:
    return Proposal(
        proposal_id=proposal.proposal_id,
        organization_id=proposal.organization_id,
        proposal_name=proposal.proposal_name,
        proposal_type=proposal.proposal_type,
        status=proposal.status,
        current_phase=proposal.current_phase,
        custom_workflow_stage_id=proposal.custom_workflow_stage_id,
        board_stage_id=board_placement(proposal),
        created_at=proposal.created_at,
    )
