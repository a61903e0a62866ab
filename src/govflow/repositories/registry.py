"""Closed registry mapping entity kinds to repository classes."""

from enum import StrEnum

from sqlalchemy.ext.asyncio import AsyncSession

from govflow.repositories.base import BaseRepository


class EntityKind(StrEnum):
    ORGANIZATION = "organization"
    PROPOSAL = "proposal"
    BOARD_CONFIG = "board_config"
    WORKFLOW_TEMPLATE = "workflow_template"


def _build_registry() -> dict[EntityKind, type[BaseRepository]]:
    from govflow.repositories.board_config_repo import BoardConfigRepository
    from govflow.repositories.organization_repo import OrganizationRepository
    from govflow.repositories.proposal_repo import ProposalRepository
    from govflow.repositories.workflow_template_repo import WorkflowTemplateRepository

    return {
        EntityKind.ORGANIZATION: OrganizationRepository,
        EntityKind.PROPOSAL: ProposalRepository,
        EntityKind.BOARD_CONFIG: BoardConfigRepository,
        EntityKind.WORKFLOW_TEMPLATE: WorkflowTemplateRepository,
    }


_registry: dict[EntityKind, type[BaseRepository]] = {}


def _ensure_registry() -> None:
    if not _registry:
        _registry.update(_build_registry())


def get_repository(kind: EntityKind, session: AsyncSession) -> BaseRepository:
    """Instantiate the repository for ``kind`` bound to ``session``.

    Raises ValueError for a kind outside the closed set.
    """
    _ensure_registry()
    return _registry[EntityKind(kind)](session)
