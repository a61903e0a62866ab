"""System workflow template routes."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from govflow.dependencies import CurrentUser, get_db
from govflow.models.workflow_template import (
    TemplateInitRequest,
    TemplateInitResponse,
    TemplateInitSummary,
    WorkflowTemplate,
)
from govflow.repositories.workflow_template_repo import WorkflowTemplateRepository
from govflow.services.workflow.system_templates import initialize_system_templates

router = APIRouter(prefix="/workflow-templates", tags=["Workflow Templates"])


@router.get("", response_model=list[WorkflowTemplate])
async def list_workflow_templates(
    user: CurrentUser,
    db: AsyncSession = Depends(get_db),
) -> list[WorkflowTemplate]:
    rows = await WorkflowTemplateRepository(db).list_active_system()
    return [WorkflowTemplate.model_validate(row, from_attributes=True) for row in rows]


@router.post("/initialize", response_model=TemplateInitResponse)
async def initialize_workflow_templates(
    user: CurrentUser,
    body: TemplateInitRequest | None = None,
    db: AsyncSession = Depends(get_db),
) -> TemplateInitResponse:
    """Install the system templates, skipping stored ones unless overwriting."""
    body = body or TemplateInitRequest()
    results = await initialize_system_templates(
        db, body.template_type, body.overwrite_existing
    )
    return TemplateInitResponse(
        results=results,
        summary=TemplateInitSummary(
            created=len(results.created),
            updated=len(results.updated),
            skipped=len(results.skipped),
        ),
    )
