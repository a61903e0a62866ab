"""Pydantic models for the workflow migration endpoint."""

from pydantic import BaseModel, ConfigDict, Field


class MigrationRequest(BaseModel):
    """Optional body; unknown fields are ignored and the organization is resolved
    from the caller when omitted.
    """

    model_config = ConfigDict(extra="ignore")

    organization_id: str | None = None


class ProposalOutcomeModel(BaseModel):
    proposal_id: str
    stage_id: str
    error: str | None = None


class MigrationResults(BaseModel):
    kanban_configs_updated: int = 0
    kanban_configs_created: int = 0
    proposals_migrated: int = 0
    errors: list[str] = Field(default_factory=list)
    outcomes: list[ProposalOutcomeModel] = Field(default_factory=list)


class MigrationResponse(BaseModel):
    success: bool = True
    message: str = "Migration completed"
    organization_id: str
    schema_version: str
    results: MigrationResults


class WorkflowSchemaResponse(BaseModel):
    schema_version: str
    columns: list[dict]
    status_to_column: dict[str, str]
    phase_to_column: dict[str, str]
    fallback_column_id: str
