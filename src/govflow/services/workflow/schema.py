"""Canonical 8-phase / 15-column proposal workflow schema.

The column list and both legacy mapping tables are fixed data. Boards store a
copy of the columns (see ``canonical_column_snapshot``), so bumping
``WORKFLOW_SCHEMA_VERSION`` only reaches an organization when its migration
is run again.
"""

from types import MappingProxyType

from govflow.models.board import ChecklistItem, WorkflowColumn
from govflow.models.enums import (
    ApproverRole,
    ChecklistItemType,
    ColumnType,
    ProposalPhase,
    ProposalStatus,
)

WORKFLOW_SCHEMA_VERSION = "2.0"


def _item(item_id: str, label: str, item_type: ChecklistItemType, order: int,
          required: bool = False, action: str | None = None) -> ChecklistItem:
    return ChecklistItem(
        id=item_id,
        label=label,
        type=item_type,
        associated_action=action,
        required=required,
        order=order,
    )


def _phase(column_id: str, label: str, color: str, phase: ProposalPhase, order: int,
           items: tuple[ChecklistItem, ...], **extra) -> WorkflowColumn:
    return WorkflowColumn(
        id=column_id,
        label=label,
        color=color,
        type=ColumnType.LOCKED_PHASE,
        phase_mapping=phase.value,
        order=order,
        is_locked=True,
        checklist_items=items,
        **extra,
    )


def _status(column_id: str, label: str, color: str, status: ProposalStatus,
            order: int) -> WorkflowColumn:
    return WorkflowColumn(
        id=column_id,
        label=label,
        color=color,
        type=ColumnType.DEFAULT_STATUS,
        default_status_mapping=status.value,
        order=order,
        is_locked=True,
        is_terminal=True,
    )


_M = ChecklistItemType.MODAL_TRIGGER
_C = ChecklistItemType.MANUAL_CHECK
_A = ChecklistItemType.AI_TRIGGER
_N = ChecklistItemType.NAVIGATE
_S = ChecklistItemType.SYSTEM_CHECK

# ─── locked phase columns (phase1 .. phase8) ──────────────────

_PHASE_COLUMNS = (
    _phase("initiate", "Initiate", "from-slate-700 to-slate-900", ProposalPhase.PHASE1, 0, (
        _item("basic_info", "Enter Basic Information", _M, 0, True, "open_basic_info_modal"),
        _item("solicitation_number", "Add Solicitation Number", _C, 1, True),
        _item("agency_project", "Set Agency & Project Details", _C, 2, True),
    )),
    _phase("team", "Team", "from-blue-500 to-blue-700", ProposalPhase.PHASE1, 1, (
        _item("select_prime", "Select Prime Contractor", _M, 0, True, "open_team_formation_modal"),
        _item("add_teaming", "Add Teaming Partners", _M, 1, False, "open_team_formation_modal"),
    )),
    _phase("resources", "Resources", "from-cyan-500 to-cyan-700", ProposalPhase.PHASE2, 2, (
        _item("link_boilerplate", "Link Boilerplate Content", _M, 0, False, "open_resource_gathering_modal"),
        _item("link_past_performance", "Link Past Performance", _M, 1, False, "open_resource_gathering_modal"),
    )),
    _phase("solicit", "Solicit", "from-teal-500 to-teal-700", ProposalPhase.PHASE3, 3, (
        _item("upload_rfp", "Upload RFP/Solicitation", _M, 0, True, "open_solicitation_upload_modal"),
        _item("ai_extract", "AI Extract Key Details", _A, 1, False, "run_ai_extraction_phase3"),
        _item("confirm_details", "Confirm Due Date & Value", _C, 2, True),
    )),
    _phase("evaluate", "Evaluate", "from-green-500 to-green-700", ProposalPhase.PHASE4, 4, (
        _item("run_evaluation", "Run Strategic Evaluation", _M, 0, True, "open_evaluation_modal"),
        _item("make_decision", "Make Go/No-Go Decision", _C, 1, True),
        _item("competitor_intel", "Gather Competitor Intelligence", _C, 2, False),
    )),
    _phase("strategy", "Strategy", "from-lime-500 to-lime-700", ProposalPhase.PHASE5, 5, (
        _item("generate_themes", "Generate Win Themes", _M, 0, True, "open_win_strategy_modal"),
        _item("refine_themes", "Refine & Approve Themes", _C, 1, True),
    )),
    _phase("plan", "Plan", "from-yellow-500 to-yellow-700", ProposalPhase.PHASE5, 6, (
        _item("select_sections", "Select Proposal Sections", _M, 0, True, "open_section_planning_modal"),
        _item("set_strategy", "Set Writing Strategy", _C, 1, True),
    )),
    _phase("draft", "Draft", "from-orange-500 to-orange-700", ProposalPhase.PHASE6, 7, (
        _item("start_writing", "Start Content Development", _N, 0, True, "navigate_to_content_development"),
        _item("ai_generate", "AI Generate Sections", _N, 1, False, "start_ai_writing"),
        _item("complete_sections", "Complete All Sections", _S, 2, True),
    )),
    _phase("price", "Price", "from-rose-500 to-rose-700", ProposalPhase.PHASE7, 8, (
        _item("build_pricing", "Build Pricing Model", _N, 0, True, "navigate_to_pricing"),
        _item("review_pricing", "Review Pricing Strategy", _M, 1, False, "open_pricing_review_modal"),
        _item("finalize_price", "Finalize Pricing", _C, 2, True),
    )),
    _phase("review", "Review", "from-pink-500 to-pink-700", ProposalPhase.PHASE8, 9, (
        _item("internal_review", "Complete Internal Review", _N, 0, True, "navigate_to_final_review"),
        _item("red_team", "Conduct Red Team Review", _N, 1, False, "conduct_red_team"),
    )),
    _phase(
        "final", "Final", "from-purple-500 to-purple-700", ProposalPhase.PHASE8, 10,
        (
            _item("readiness_check", "Run Submission Readiness", _N, 0, True, "run_readiness_check_phase8"),
            _item("executive_review", "Final Executive Review", _C, 1, True),
            _item("export_proposal", "Export Proposal", _N, 2, False, "open_export_modal"),
        ),
        requires_approval_to_exit=True,
        approver_roles=(ApproverRole.ORGANIZATION_OWNER, ApproverRole.PROPOSAL_MANAGER),
    ),
)

# ─── terminal status columns ──────────────────────────────────

_STATUS_COLUMNS = (
    _status("submitted", "Submitted", "from-indigo-500 to-indigo-700", ProposalStatus.SUBMITTED, 11),
    _status("won", "Won", "from-emerald-500 to-emerald-700", ProposalStatus.WON, 12),
    _status("lost", "Lost", "from-red-500 to-red-700", ProposalStatus.LOST, 13),
    _status("archived", "Archive", "from-gray-500 to-gray-700", ProposalStatus.ARCHIVED, 14),
)

CANONICAL_COLUMNS: tuple[WorkflowColumn, ...] = _PHASE_COLUMNS + _STATUS_COLUMNS

COLUMN_IDS: frozenset[str] = frozenset(c.id for c in CANONICAL_COLUMNS)

FALLBACK_COLUMN_ID: str = CANONICAL_COLUMNS[0].id

STATUS_TO_COLUMN = MappingProxyType({
    ProposalStatus.EVALUATING.value: "evaluate",
    ProposalStatus.WATCH_LIST.value: "evaluate",
    ProposalStatus.DRAFT.value: "draft",
    ProposalStatus.IN_PROGRESS.value: "review",
    ProposalStatus.CLIENT_REVIEW.value: "review",
    ProposalStatus.SUBMITTED.value: "submitted",
    ProposalStatus.WON.value: "won",
    ProposalStatus.CLIENT_ACCEPTED.value: "won",
    ProposalStatus.LOST.value: "lost",
    ProposalStatus.CLIENT_REJECTED.value: "lost",
    ProposalStatus.ARCHIVED.value: "archived",
})

PHASE_TO_COLUMN = MappingProxyType({
    ProposalPhase.PHASE1.value: "initiate",
    ProposalPhase.PHASE2.value: "resources",
    ProposalPhase.PHASE3.value: "solicit",
    ProposalPhase.PHASE4.value: "evaluate",
    ProposalPhase.PHASE5.value: "strategy",
    ProposalPhase.PHASE6.value: "draft",
    ProposalPhase.PHASE7.value: "price",
    ProposalPhase.PHASE8.value: "final",
    ProposalPhase.COMPLETED.value: "final",
})


def canonical_column_snapshot() -> list[dict]:
    """Fresh JSON copy of the canonical columns for storing on a board."""
    return [column.snapshot() for column in CANONICAL_COLUMNS]


def validate_schema(columns: tuple[WorkflowColumn, ...] = CANONICAL_COLUMNS) -> None:
    """Raise ValueError if the column list or mapping tables are inconsistent."""
    ids = [c.id for c in columns]
    if len(set(ids)) != len(ids):
        raise ValueError("duplicate column ids in workflow schema")
    orders = sorted(c.order for c in columns)
    if orders != list(range(len(columns))):
        raise ValueError("column orders must be exactly 0..N-1")
    known = set(ids)
    for table_name, table in (("status", STATUS_TO_COLUMN), ("phase", PHASE_TO_COLUMN)):
        missing = {target for target in table.values() if target not in known}
        if missing:
            raise ValueError(f"{table_name} mapping targets unknown columns: {sorted(missing)}")


validate_schema()
