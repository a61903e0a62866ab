"""System workflow templates: the global catalog of starting column sets.

Each proposal type gets one template built from its board template's
columns. Installing the catalog is idempotent: stored templates are skipped
unless ``overwrite_existing`` is set.
"""

import logging
from dataclasses import dataclass

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from govflow.errors.exceptions import ConflictError, ValidationError
from govflow.models.board import WorkflowColumn
from govflow.models.enums import BoardType, ProposalType
from govflow.models.workflow_template import TemplateInitEntry, TemplateInitResults
from govflow.repositories.registry import EntityKind, get_repository
from govflow.repositories.workflow_template_repo import SYSTEM
from govflow.services.id_generator import generate_id
from govflow.services.workflow.board_templates import BOARD_TEMPLATES, QUICK_PROPOSAL_COLUMNS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SystemTemplate:
    key: str
    template_name: str
    proposal_type_category: ProposalType
    board_type: str
    description: str
    icon_emoji: str
    estimated_duration_days: int
    columns: tuple[WorkflowColumn, ...]

    def row_values(self) -> dict:
        """Column values written to the stored template."""
        return {
            "template_name": self.template_name,
            "proposal_type_category": self.proposal_type_category.value,
            "board_type": self.board_type,
            "description": self.description,
            "icon_emoji": self.icon_emoji,
            "estimated_duration_days": self.estimated_duration_days,
            "workflow_config": {"columns": [column.snapshot() for column in self.columns]},
            "is_active": True,
        }


def _from_board(key: str, board_type: BoardType, name: str, description: str,
                emoji: str, days: int) -> SystemTemplate:
    return SystemTemplate(
        key=key,
        template_name=name,
        proposal_type_category=ProposalType(key),
        board_type=board_type.value,
        description=description,
        icon_emoji=emoji,
        estimated_duration_days=days,
        columns=BOARD_TEMPLATES[board_type]["columns"],
    )


SYSTEM_TEMPLATES: dict[str, SystemTemplate] = {
    t.key: t
    for t in (
        _from_board("RFP", BoardType.RFP, "Standard RFP Workflow",
                    "Comprehensive 8-phase workflow for federal RFPs with detailed compliance tracking",
                    "📄", 60),
        _from_board("RFI", BoardType.RFI, "Standard RFI Workflow",
                    "Streamlined workflow for Requests for Information with focus on capability demonstration",
                    "📝", 21),
        _from_board("SBIR", BoardType.SBIR, "SBIR/STTR Workflow",
                    "Research-focused workflow for SBIR/STTR proposals with innovation emphasis",
                    "💡", 90),
        _from_board("GSA", BoardType.GSA, "GSA Schedule Workflow",
                    "Specialized workflow for GSA Schedule additions and modifications",
                    "🏛️", 45),
        _from_board("IDIQ", BoardType.IDIQ, "IDIQ/Contract Vehicle Workflow",
                    "Workflow for IDIQ and other contract vehicle submissions",
                    "📑", 60),
        _from_board("STATE_LOCAL", BoardType.STATE_LOCAL, "State/Local Government Workflow",
                    "Workflow optimized for state and local government proposals",
                    "🏙️", 45),
        SystemTemplate(
            key="QUICK_PROPOSAL",
            template_name="Quick Proposal",
            proposal_type_category=ProposalType.OTHER,
            board_type="quick_proposal",
            description="Rapid proposal creation with AI assistance - ideal for tight deadlines "
                        "and simple opportunities",
            icon_emoji="⚡",
            estimated_duration_days=7,
            columns=QUICK_PROPOSAL_COLUMNS,
        ),
    )
}


async def initialize_system_templates(
    session: AsyncSession,
    template_type: str | None = None,
    overwrite_existing: bool = False,
) -> TemplateInitResults:
    """Install one system template, or the whole catalog, and commit.

    Raises ValidationError for an unknown ``template_type`` and ConflictError
    when a concurrent initialization inserted the same template first.
    """
    if template_type is not None and template_type not in SYSTEM_TEMPLATES:
        raise ValidationError(
            f"Invalid template type. Must be one of: {', '.join(SYSTEM_TEMPLATES)}"
        )

    keys = [template_type] if template_type else list(SYSTEM_TEMPLATES)
    repo = get_repository(EntityKind.WORKFLOW_TEMPLATE, session)
    results = TemplateInitResults()

    try:
        for key in keys:
            definition = SYSTEM_TEMPLATES[key]
            existing = await repo.get_system_template(key)
            if existing is None:
                row = await repo.create(
                    template_id=generate_id("wft_"),
                    template_key=key,
                    template_type=SYSTEM,
                    organization_id=None,
                    usage_count=0,
                    **definition.row_values(),
                )
                results.created.append(TemplateInitEntry(
                    type=key, template_id=row.template_id, message=f"Created template for {key}",
                ))
            elif overwrite_existing:
                for field, value in definition.row_values().items():
                    setattr(existing, field, value)
                await session.flush()
                results.updated.append(TemplateInitEntry(
                    type=key, template_id=existing.template_id, message=f"Updated template for {key}",
                ))
            else:
                results.skipped.append(TemplateInitEntry(
                    type=key, template_id=existing.template_id,
                    message=f"Template for {key} already exists",
                ))
        await session.commit()
    except IntegrityError as exc:
        await session.rollback()
        raise ConflictError(
            "Workflow templates were initialized concurrently; retry the request"
        ) from exc

    logger.info(
        "System templates initialized: %d created, %d updated, %d skipped",
        len(results.created), len(results.updated), len(results.skipped),
    )
    return results
