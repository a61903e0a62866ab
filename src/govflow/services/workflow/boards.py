"""Board configuration lifecycle: lazy master board and type-specific boards."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from govflow.db.models.board_config import BoardConfigRow
from govflow.errors.exceptions import ValidationError
from govflow.models.board import BoardConfiguration, SwimlaneConfig, ViewSettings
from govflow.models.enums import BoardType
from govflow.repositories.registry import EntityKind, get_repository
from govflow.services.id_generator import generate_id
from govflow.services.workflow.board_templates import BOARD_TEMPLATES, TEMPLATE_BOARD_TYPES
from govflow.services.workflow.schema import (
    WORKFLOW_SCHEMA_VERSION,
    canonical_column_snapshot,
)

logger = logging.getLogger(__name__)


def default_preferences() -> dict:
    """Fresh default values for the user-preference fields of a board."""
    return {
        "collapsed_column_ids": [],
        "swimlane_config": SwimlaneConfig().model_dump(exclude_none=True),
        "view_settings": ViewSettings().model_dump(),
    }


def template_preferences() -> dict:
    """Preference defaults for type-specific boards.

    Empty swimlanes are hidden and cards also show their task counts.
    """
    view = ViewSettings()
    view.show_card_details.append("tasks")
    return {
        "collapsed_column_ids": [],
        "swimlane_config": SwimlaneConfig(show_empty_swimlanes=False).model_dump(),
        "view_settings": view.model_dump(),
    }


async def ensure_master_board(session: AsyncSession, organization_id: str) -> BoardConfigRow:
    """Return the org's master board, creating it with the canonical columns on first view.

    An existing board is returned as stored, even if it predates the current
    schema version; only the workflow migration rewrites columns. A concurrent
    first view that wins the insert is returned unchanged.
    """
    repo = get_repository(EntityKind.BOARD_CONFIG, session)
    existing = await repo.get_master(organization_id)
    if existing:
        return existing

    try:
        row = await repo.create_master(
            config_id=generate_id("board_"),
            organization_id=organization_id,
            columns=canonical_column_snapshot(),
            schema_version=WORKFLOW_SCHEMA_VERSION,
            preferences=default_preferences(),
        )
        await session.commit()
    except IntegrityError:
        await session.rollback()
        logger.info("Master board for org %s created concurrently; reusing it", organization_id)
        return await repo.get_master(organization_id)

    logger.info("Created master board %s for org %s", row.config_id, organization_id)
    return row


async def create_type_specific_board(
    session: AsyncSession,
    organization_id: str,
    board_type: str,
    board_name: str | None = None,
) -> tuple[BoardConfigRow, bool]:
    """Create a template board for ``board_type`` unless the org already has one.

    Returns ``(row, was_created)``. Losing a concurrent create to the
    per-org unique constraint yields the stored board with ``was_created``
    false.
    """
    if board_type not in TEMPLATE_BOARD_TYPES:
        raise ValidationError(
            f"Invalid board type. Must be one of: {', '.join(TEMPLATE_BOARD_TYPES)}"
        )

    repo = get_repository(EntityKind.BOARD_CONFIG, session)
    existing = await repo.get_by_org_and_type(organization_id, board_type)
    if existing:
        return existing, False

    template = BOARD_TEMPLATES[BoardType(board_type)]
    try:
        row = await repo.create(
            config_id=generate_id("board_"),
            organization_id=organization_id,
            board_type=board_type,
            board_name=board_name or template["board_name"],
            is_master_board=False,
            applies_to_proposal_types=[str(t) for t in template["applies_to_proposal_types"]],
            columns=[column.snapshot() for column in template["columns"]],
            **template_preferences(),
        )
        await session.commit()
    except IntegrityError:
        await session.rollback()
        logger.info("%s board for org %s created concurrently", board_type, organization_id)
        return await repo.get_by_org_and_type(organization_id, board_type), False

    logger.info("Created %s board %s for org %s", board_type, row.config_id, organization_id)
    return row, True


def board_to_model(row: BoardConfigRow) -> BoardConfiguration:
    return BoardConfiguration(
        config_id=row.config_id,
        organization_id=row.organization_id,
        board_type=row.board_type,
        board_name=row.board_name,
        is_master_board=row.is_master_board,
        schema_version=row.schema_version,
        applies_to_proposal_types=row.applies_to_proposal_types or [],
        columns=row.columns or [],
        collapsed_column_ids=row.collapsed_column_ids or [],
        swimlane_config=row.swimlane_config,
        view_settings=row.view_settings,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )
