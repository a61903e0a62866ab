"""Proposal repository."""

from dataclasses import dataclass

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from govflow.db.models.proposal import ProposalRow
from govflow.repositories.base import BaseRepository


@dataclass(frozen=True)
class ProposalSnapshot:
    """Detached view of the fields the workflow migration reads."""

    proposal_id: str
    status: str | None
    current_phase: str | None


class ProposalRepository(BaseRepository):
    def __init__(self, session: AsyncSession):
        super().__init__(session, ProposalRow)

    async def list_by_org(self, organization_id: str) -> list[ProposalRow]:
        return await self.list_where(
            ProposalRow.organization_id == organization_id,
            order_by=(ProposalRow.created_at, ProposalRow.proposal_id),
        )

    async def list_snapshots(self, organization_id: str) -> list[ProposalSnapshot]:
        """Column-level read so later rollbacks cannot expire what we iterate over."""
        stmt = (
            select(ProposalRow.proposal_id, ProposalRow.status, ProposalRow.current_phase)
            .where(ProposalRow.organization_id == organization_id)
            .order_by(ProposalRow.created_at, ProposalRow.proposal_id)
        )
        result = await self.session.execute(stmt)
        return [ProposalSnapshot(*row) for row in result.all()]

    async def set_workflow_stage(self, proposal_id: str, stage_id: str) -> None:
        """Write ``custom_workflow_stage_id``; legacy status/phase stay untouched."""
        stmt = (
            update(ProposalRow)
            .where(ProposalRow.proposal_id == proposal_id)
            .values(custom_workflow_stage_id=stage_id)
        )
        result = await self.session.execute(stmt)
        if result.rowcount == 0:
            raise LookupError(f"proposal '{proposal_id}' no longer exists")
