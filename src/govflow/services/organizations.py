"""Resolve which organization a request acts on."""

from sqlalchemy.ext.asyncio import AsyncSession

from govflow.db.models.organization import OrganizationRow
from govflow.errors.exceptions import NotFoundError
from govflow.repositories.registry import EntityKind, get_repository


def owner_identity(user: dict) -> str:
    """Identity organizations are recorded under: the email claim, else the subject."""
    return user.get("email") or user["sub"]


async def resolve_organization(
    session: AsyncSession, user: dict, organization_id: str | None = None
) -> OrganizationRow:
    """Return the caller's organization.

    With an explicit ``organization_id`` it must be owned by the caller.
    Without one, the caller's most recently created organization is used.
    Raises NotFoundError when nothing matches.
    """
    repo = get_repository(EntityKind.ORGANIZATION, session)
    owner = owner_identity(user)
    if organization_id:
        org = await repo.get_owned(organization_id, owner)
    else:
        org = await repo.get_latest_for_owner(owner)
    if org is None:
        raise NotFoundError("No organization found")
    return org
