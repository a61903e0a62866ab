"""Pydantic models for system workflow templates."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class TemplateInitRequest(BaseModel):
    """Which templates to install; all of them when ``template_type`` is omitted."""

    model_config = ConfigDict(extra="ignore")

    template_type: str | None = None
    overwrite_existing: bool = False


class TemplateInitEntry(BaseModel):
    type: str
    template_id: str
    message: str


class TemplateInitResults(BaseModel):
    created: list[TemplateInitEntry] = Field(default_factory=list)
    updated: list[TemplateInitEntry] = Field(default_factory=list)
    skipped: list[TemplateInitEntry] = Field(default_factory=list)


class TemplateInitSummary(BaseModel):
    created: int
    updated: int
    skipped: int


class TemplateInitResponse(BaseModel):
    success: bool = True
    results: TemplateInitResults
    summary: TemplateInitSummary


class WorkflowTemplate(BaseModel):
    template_id: str
    template_key: str
    template_type: str
    template_name: str
    proposal_type_category: str
    board_type: str
    description: str | None = None
    icon_emoji: str | None = None
    estimated_duration_days: int | None = None
    workflow_config: dict
    is_active: bool
    usage_count: int
    created_at: datetime | None = None
    updated_at: datetime | None = None
