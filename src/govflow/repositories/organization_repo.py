"""Organization repository."""

from sqlalchemy.ext.asyncio import AsyncSession

from govflow.db.models.organization import OrganizationRow
from govflow.repositories.base import BaseRepository

# Newest first; org_id breaks ties between identical timestamps.
_NEWEST_FIRST = (OrganizationRow.created_at.desc(), OrganizationRow.org_id.desc())


class OrganizationRepository(BaseRepository):
    def __init__(self, session: AsyncSession):
        super().__init__(session, OrganizationRow)

    async def list_for_owner(self, owner: str) -> list[OrganizationRow]:
        return await self.list_where(
            OrganizationRow.created_by == owner, order_by=_NEWEST_FIRST
        )

    async def get_latest_for_owner(self, owner: str) -> OrganizationRow | None:
        return await self.first_where(
            OrganizationRow.created_by == owner, order_by=_NEWEST_FIRST
        )

    async def get_owned(self, org_id: str, owner: str) -> OrganizationRow | None:
        return await self.first_where(
            OrganizationRow.org_id == org_id,
            OrganizationRow.created_by == owner,
        )
