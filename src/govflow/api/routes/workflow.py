"""Workflow schema and migration routes."""

import logging
import traceback

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from govflow.dependencies import CurrentUser, TraceId, get_db
from govflow.errors.exceptions import GovFlowError
from govflow.logging_config import bind_request_context
from govflow.models.migration import (
    MigrationRequest,
    MigrationResponse,
    WorkflowSchemaResponse,
)
from govflow.services.organizations import resolve_organization
from govflow.services.workflow.migrator import WorkflowMigrator
from govflow.services.workflow.schema import (
    FALLBACK_COLUMN_ID,
    PHASE_TO_COLUMN,
    STATUS_TO_COLUMN,
    WORKFLOW_SCHEMA_VERSION,
    canonical_column_snapshot,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/workflow", tags=["Workflow"])


@router.get("/schema", response_model=WorkflowSchemaResponse)
async def get_workflow_schema(user: CurrentUser) -> WorkflowSchemaResponse:
    """Return the canonical column schema and legacy mapping tables."""
    return WorkflowSchemaResponse(
        schema_version=WORKFLOW_SCHEMA_VERSION,
        columns=canonical_column_snapshot(),
        status_to_column=dict(STATUS_TO_COLUMN),
        phase_to_column=dict(PHASE_TO_COLUMN),
        fallback_column_id=FALLBACK_COLUMN_ID,
    )


@router.post("/migrate")
async def migrate_workflow(
    user: CurrentUser,
    trace_id: TraceId,
    body: MigrationRequest | None = None,
    db: AsyncSession = Depends(get_db),
):
    """Move the caller's organization onto the canonical workflow.

    Partial failures are reported in ``results.errors`` with a 200; only a
    missing identity, a missing organization or an unexpected crash fail the
    request.
    """
    requested_org = body.organization_id if body else None
    try:
        org = await resolve_organization(db, user, requested_org)
        organization_id = org.org_id
        bind_request_context(trace_id, user_id=user["sub"], organization_id=organization_id)
        result = await WorkflowMigrator(db).migrate(organization_id)
    except GovFlowError:
        raise
    except Exception as exc:
        logger.exception("Workflow migration error")
        return JSONResponse(
            status_code=500,
            content={
                "success": False,
                "error": str(exc),
                "stack": traceback.format_exc(),
            },
        )

    response = MigrationResponse(
        organization_id=organization_id,
        schema_version=result.schema_version,
        results=result.to_results(),
    )
    return response.model_dump(mode="json")
