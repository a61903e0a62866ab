"""Resolve legacy proposal status/phase values to canonical column ids."""

from govflow.services.workflow.schema import (
    FALLBACK_COLUMN_ID,
    PHASE_TO_COLUMN,
    STATUS_TO_COLUMN,
)


def resolve_stage(status: str | None, current_phase: str | None) -> str:
    """Return the column id a proposal belongs in.

    A mapped status always wins over a mapped phase, so terminal outcomes
    (won, lost, ...) are never overridden by phase bookkeeping. Anything
    unmapped lands in the first column.
    """
    if status and status in STATUS_TO_COLUMN:
        return STATUS_TO_COLUMN[status]
    if current_phase and current_phase in PHASE_TO_COLUMN:
        return PHASE_TO_COLUMN[current_phase]
    return FALLBACK_COLUMN_ID


def board_placement(proposal) -> str:
    """Column a proposal renders in: its stored stage if set, else the resolved one."""
    stage_id = getattr(proposal, "custom_workflow_stage_id", None)
    if stage_id:
        return stage_id
    return resolve_stage(proposal.status, proposal.current_phase)
