"""Pydantic models for workflow columns and board configurations."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, model_validator

from govflow.models.enums import ApproverRole, ChecklistItemType, ColumnType


class ChecklistItem(BaseModel):
    """A gating task inside a column. Completion is tracked elsewhere."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str
    label: str
    type: ChecklistItemType
    associated_action: str | None = None
    required: bool = False
    order: int = Field(..., ge=0)


class WorkflowColumn(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    id: str = Field(..., min_length=1)
    label: str
    color: str | None = None
    type: ColumnType
    phase_mapping: str | None = None
    default_status_mapping: str | None = None
    order: int = Field(..., ge=0)
    is_locked: bool = True
    is_terminal: bool = False
    wip_limit: int | None = None
    wip_limit_type: str | None = None
    checklist_items: tuple[ChecklistItem, ...] = ()
    requires_approval_to_exit: bool | None = None
    approver_roles: tuple[ApproverRole, ...] | None = None
    can_drag_to_here_roles: tuple[str, ...] | None = None
    can_drag_from_here_roles: tuple[str, ...] | None = None

    @model_validator(mode="after")
    def _check_mappings(self) -> "WorkflowColumn":
        if self.type == ColumnType.LOCKED_PHASE and not self.phase_mapping:
            raise ValueError(f"locked_phase column '{self.id}' needs a phase_mapping")
        if self.type != ColumnType.LOCKED_PHASE and self.phase_mapping:
            raise ValueError(f"column '{self.id}' has phase_mapping but is {self.type}")
        if self.type == ColumnType.DEFAULT_STATUS and not self.default_status_mapping:
            raise ValueError(f"default_status column '{self.id}' needs a default_status_mapping")
        if self.type != ColumnType.DEFAULT_STATUS and self.default_status_mapping:
            raise ValueError(f"column '{self.id}' has default_status_mapping but is {self.type}")
        if self.approver_roles and not self.requires_approval_to_exit:
            raise ValueError(f"column '{self.id}' lists approver_roles without requiring approval")
        return self

    def snapshot(self) -> dict:
        """Plain JSON-ready copy for storage on a board configuration."""
        return self.model_dump(mode="json", exclude_none=True)


class SwimlaneConfig(BaseModel):
    enabled: bool = False
    group_by: str = "none"
    show_empty_swimlanes: bool | None = None


class ViewSettings(BaseModel):
    default_view: str = "kanban"
    show_card_details: list[str] = Field(
        default_factory=lambda: ["assignees", "due_date", "progress", "value"]
    )
    compact_mode: bool = False


class BoardConfiguration(BaseModel):
    """API representation of a stored board configuration."""

    config_id: str
    organization_id: str
    board_type: str
    board_name: str | None = None
    is_master_board: bool
    schema_version: str | None = None
    applies_to_proposal_types: list[str] = Field(default_factory=list)
    columns: list[dict]
    collapsed_column_ids: list[str] = Field(default_factory=list)
    swimlane_config: dict | None = None
    view_settings: dict | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class CreateBoardRequest(BaseModel):
    organization_id: str | None = None
    board_type: str = Field(..., min_length=1)
    board_name: str | None = None


class CreateBoardResponse(BaseModel):
    success: bool = True
    message: str
    config_id: str
    was_created: bool
