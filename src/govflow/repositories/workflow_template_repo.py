"""Workflow template repository."""

from sqlalchemy.ext.asyncio import AsyncSession

from govflow.db.models.workflow_template import WorkflowTemplateRow
from govflow.repositories.base import BaseRepository

SYSTEM = "system"


class WorkflowTemplateRepository(BaseRepository):
    def __init__(self, session: AsyncSession):
        super().__init__(session, WorkflowTemplateRow)

    async def get_system_template(self, template_key: str) -> WorkflowTemplateRow | None:
        return await self.first_where(
            WorkflowTemplateRow.template_type == SYSTEM,
            WorkflowTemplateRow.template_key == template_key,
        )

    async def list_active_system(self) -> list[WorkflowTemplateRow]:
        return await self.list_where(
            WorkflowTemplateRow.template_type == SYSTEM,
            WorkflowTemplateRow.is_active.is_(True),
            order_by=(WorkflowTemplateRow.template_key,),
        )
