"""Pydantic models for the Proposal entity."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from govflow.models.enums import ProposalType


class ProposalCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    organization_id: str | None = None
    proposal_name: str = Field(..., min_length=1, max_length=300)
    proposal_type: ProposalType = ProposalType.RFP
    # Legacy fields accept any string; unknown values resolve to the fallback column.
    status: str | None = None
    current_phase: str | None = None
    custom_workflow_stage_id: str | None = None


class Proposal(BaseModel):
    proposal_id: str
    organization_id: str
    proposal_name: str
    proposal_type: str
    status: str | None = None
    current_phase: str | None = None
    custom_workflow_stage_id: str | None = None
    board_stage_id: str
    created_at: datetime | None = None
