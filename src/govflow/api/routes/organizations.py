"""Organization API routes."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from govflow.dependencies import CurrentUser, get_db
from govflow.models.organization import Organization, OrganizationCreate
from govflow.repositories.organization_repo import OrganizationRepository
from govflow.services.id_generator import generate_id
from govflow.services.organizations import owner_identity

router = APIRouter(tags=["Organizations"])


@router.post("/organizations", status_code=201, response_model=Organization)
async def create_organization(
    body: OrganizationCreate,
    user: CurrentUser,
    db: AsyncSession = Depends(get_db),
) -> Organization:
    repo = OrganizationRepository(db)
    org = await repo.create(
        org_id=generate_id("org_"),
        organization_name=body.organization_name,
        created_by=owner_identity(user),
    )
    await db.commit()
    return _org_model(org)


@router.get("/organizations", response_model=list[Organization])
async def list_organizations(
    user: CurrentUser,
    db: AsyncSession = Depends(get_db),
) -> list[Organization]:
    """List the caller's organizations, newest first."""
    orgs = await OrganizationRepository(db).list_for_owner(owner_identity(user))
    return [_org_model(org) for org in orgs]


def _org_model(org) -> Organization:
    return Organization(
        org_id=org.org_id,
        organization_name=org.organization_name,
        created_by=org.created_by,
        created_at=org.created_at,
    )
