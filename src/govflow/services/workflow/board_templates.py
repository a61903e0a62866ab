"""Type-specific board templates (RFP, RFI, SBIR, GSA, IDIQ, state/local).

Also holds the independent 15-column RFP board and the quick proposal
column set used by the system workflow templates.
"""

from govflow.models.board import ChecklistItem, WorkflowColumn
from govflow.models.enums import (
    ApproverRole,
    BoardType,
    ChecklistItemType,
    ColumnType,
    ProposalType,
)


def _col(column_id: str, label: str, color: str, order: int, column_type: ColumnType,
         mapping: str | None = None, terminal: bool = False) -> WorkflowColumn:
    """Build a template column; locked_phase and terminal columns are locked."""
    return WorkflowColumn(
        id=column_id,
        label=label,
        color=color,
        order=order,
        type=column_type,
        phase_mapping=mapping if column_type == ColumnType.LOCKED_PHASE else None,
        default_status_mapping=mapping if column_type == ColumnType.DEFAULT_STATUS else None,
        is_terminal=terminal,
        is_locked=column_type == ColumnType.LOCKED_PHASE or terminal,
        wip_limit=0,
    )


_PHASE = ColumnType.LOCKED_PHASE
_STATUS = ColumnType.DEFAULT_STATUS
_CUSTOM = ColumnType.CUSTOM_STAGE


def _terminal(column_id: str, label: str, color: str, order: int, status: str) -> WorkflowColumn:
    return _col(column_id, label, color, order, _STATUS, status, terminal=True)


# ─── Independent 15-column RFP board ─────────────────────

_MODAL = ChecklistItemType.MODAL_TRIGGER
_NAV = ChecklistItemType.NAVIGATE
_MANUAL = ChecklistItemType.MANUAL_CHECK
_SYSTEM = ChecklistItemType.SYSTEM_CHECK


def _checklist(*items: tuple) -> tuple[ChecklistItem, ...]:
    """Items are ``(id, label, type, action, required)``; order follows position."""
    return tuple(
        ChecklistItem(id=item_id, label=label, type=item_type,
                      associated_action=action, required=required, order=n)
        for n, (item_id, label, item_type, action, required) in enumerate(items)
    )


def _stage(column_id: str, label: str, color: str, order: int,
           checklist: tuple[ChecklistItem, ...],
           approvers: tuple[ApproverRole, ...] = ()) -> WorkflowColumn:
    """Unlocked working column with a soft WIP limit and open drag roles."""
    return WorkflowColumn(
        id=column_id,
        label=label,
        color=color,
        order=order,
        type=_CUSTOM,
        is_locked=False,
        is_terminal=False,
        wip_limit=0,
        wip_limit_type="soft",
        checklist_items=checklist,
        can_drag_to_here_roles=(),
        can_drag_from_here_roles=(),
        requires_approval_to_exit=bool(approvers),
        approver_roles=approvers,
    )


def _closing(column_id: str, label: str, color: str, order: int) -> WorkflowColumn:
    return WorkflowColumn(
        id=column_id,
        label=label,
        color=color,
        order=order,
        type=_STATUS,
        default_status_mapping=column_id,
        is_locked=True,
        is_terminal=True,
        wip_limit=0,
        can_drag_to_here_roles=(),
        can_drag_from_here_roles=(),
        requires_approval_to_exit=False,
        approver_roles=(),
    )


RFP_15_COLUMN_COLUMNS: tuple[WorkflowColumn, ...] = (
    _stage("initiate", "Initiate", "from-blue-400 to-blue-600", 0, _checklist(
        ("enter_basic_info", "Enter Basic Info", _MODAL, "open_basic_info_modal", True),
        ("set_timeline", "Set Timeline", _MODAL, "open_basic_info_modal", True),
    )),
    _stage("team", "Team", "from-purple-400 to-purple-600", 1, _checklist(
        ("select_prime", "Select Prime Contractor", _MODAL, "open_team_modal", True),
        ("add_partners", "Add Teaming Partners", _MODAL, "open_team_modal", False),
        ("assign_lead_writer", "Assign Lead Writer", _MODAL, "open_team_modal", True),
    )),
    _stage("resources", "Resources", "from-green-400 to-green-600", 2, _checklist(
        ("upload_capability_statement", "Upload Capability Statement", _MODAL, "open_resources_modal", True),
        ("link_past_performance", "Link Past Performance", _MODAL, "open_resources_modal", True),
        ("gather_boilerplate", "Gather Boilerplate Content", _MODAL, "open_resources_modal", False),
    )),
    _stage("solicitation", "Solicitation", "from-amber-400 to-amber-600", 3, _checklist(
        ("upload_rfp", "Upload RFP Document", _NAV, "navigate_solicitation_upload", True),
        ("extract_requirements", "Extract Requirements (AI)", _NAV, "navigate_solicitation_upload", True),
        ("identify_page_limits", "Identify Page Limits", _NAV, "navigate_solicitation_upload", True),
    )),
    _stage("evaluation", "Evaluation", "from-pink-400 to-pink-600", 4, _checklist(
        ("run_strategic_analysis", "Run Strategic Analysis (AI)", _NAV, "navigate_evaluation", True),
        ("calculate_match_score", "Calculate Match Score", _NAV, "navigate_evaluation", True),
        ("review_evaluation_results", "Review Evaluation Results", _NAV, "navigate_evaluation", True),
    )),
    _stage("strategy", "Strategy", "from-indigo-400 to-indigo-600", 5, _checklist(
        ("develop_win_themes", "Develop Win Themes (AI)", _NAV, "navigate_win_strategy", True),
        ("competitive_analysis", "Competitive Analysis (AI)", _NAV, "navigate_win_strategy", True),
        ("approve_strategy", "Approve Strategy", _MANUAL, None, True),
    )),
    _stage("planning", "Planning", "from-cyan-400 to-cyan-600", 6, _checklist(
        ("create_section_outline", "Create Section Outline (AI)", _NAV, "navigate_content_planning", True),
        ("assign_sections_to_writers", "Assign Sections to Writers", _MODAL, "open_content_planning_modal", True),
        ("set_section_deadlines", "Set Section Deadlines", _MODAL, "open_content_planning_modal", False),
    )),
    _stage("writing", "Writing", "from-violet-400 to-violet-600", 7, _checklist(
        ("draft_all_sections", "Draft All Sections", _NAV, "navigate_write_content", True),
        ("review_compliance", "Review Compliance (AI)", _NAV, "navigate_compliance_check", True),
        ("approve_content", "Approve Content", _MANUAL, None, True),
    )),
    _stage("pricing", "Pricing", "from-emerald-400 to-emerald-600", 8, _checklist(
        ("build_labor_rates", "Build Labor Rates", _NAV, "navigate_pricing_build", True),
        ("create_clins", "Create CLINs", _NAV, "navigate_pricing_build", True),
        ("calculate_total_price", "Calculate Total Price", _SYSTEM, None, True),
    )),
    _stage("review", "Review", "from-rose-400 to-rose-600", 9, _checklist(
        ("red_team_review", "Red Team Review", _NAV, "navigate_red_team", True),
        ("compliance_final_check", "Compliance Final Check (AI)", _NAV, "navigate_compliance_check", True),
        ("final_approval", "Final Approval", _MANUAL, None, True),
    )),
    _stage("final", "Final", "from-slate-400 to-slate-600", 10, _checklist(
        ("export_pdf", "Export PDF", _NAV, "navigate_export", True),
        ("submission_checklist", "Submission Checklist", _NAV, "navigate_submission_ready", True),
        ("final_signoff", "Final Sign-off", _MANUAL, None, True),
    ), approvers=(ApproverRole.ORGANIZATION_OWNER, ApproverRole.PROPOSAL_MANAGER)),
    _closing("submitted", "Submitted", "from-indigo-500 to-purple-600", 11),
    _closing("won", "Won", "from-green-400 to-green-600", 12),
    _closing("lost", "Lost", "from-red-400 to-red-600", 13),
    _closing("archived", "Archived", "from-gray-400 to-gray-600", 14),
)

QUICK_PROPOSAL_COLUMNS: tuple[WorkflowColumn, ...] = (
    _col("setup", "Setup", "from-blue-400 to-blue-600", 0, _PHASE, "phase1"),
    _col("ai_generate", "AI Generation", "from-purple-400 to-purple-600", 1, _CUSTOM),
    _col("refine", "Refine", "from-cyan-400 to-cyan-600", 2, _CUSTOM),
    _col("finalize", "Finalize", "from-green-400 to-green-600", 3, _CUSTOM),
    _terminal("submitted", "Submitted", "from-indigo-400 to-indigo-600", 4, "submitted"),
    _terminal("won", "Won", "from-green-400 to-green-600", 5, "won"),
    _terminal("lost", "Lost", "from-red-400 to-red-600", 6, "lost"),
    _terminal("archived", "Archived", "from-gray-400 to-gray-600", 7, "archived"),
)


BOARD_TEMPLATES: dict[BoardType, dict] = {
    BoardType.RFP: {
        "board_name": "RFP Board",
        "applies_to_proposal_types": [ProposalType.RFP],
        "columns": (
            _col("rfp_initiate", "Initiate", "from-slate-400 to-slate-600", 0, _PHASE, "phase1"),
            _col("rfp_team", "Team Setup", "from-blue-400 to-blue-600", 1, _PHASE, "phase2"),
            _col("rfp_resources", "Gather Resources", "from-cyan-400 to-cyan-600", 2, _PHASE, "phase3"),
            _col("rfp_solicit", "Upload Solicitation", "from-indigo-400 to-indigo-600", 3, _PHASE, "phase4"),
            _col("rfp_evaluate", "Evaluate", "from-purple-400 to-purple-600", 4, _PHASE, "phase5"),
            _col("rfp_strategy", "Develop Strategy", "from-pink-400 to-pink-600", 5, _PHASE, "phase6"),
            _col("rfp_write", "Write Content", "from-orange-400 to-orange-600", 6, _PHASE, "phase7"),
            _col("rfp_price", "Build Pricing", "from-amber-400 to-amber-600", 7, _PHASE, "phase8"),
            _terminal("submitted", "Submitted", "from-indigo-500 to-indigo-700", 8, "submitted"),
            _terminal("won", "Won", "from-green-500 to-green-700", 9, "won"),
            _terminal("lost", "Lost", "from-red-500 to-red-700", 10, "lost"),
            _terminal("archived", "Archived", "from-gray-500 to-gray-700", 11, "archived"),
        ),
    },
    BoardType.RFI: {
        "board_name": "RFI Board",
        "applies_to_proposal_types": [ProposalType.RFI],
        "columns": (
            _col("rfi_new", "New", "from-slate-400 to-slate-600", 0, _STATUS, "evaluating"),
            _col("rfi_gather", "Gather Info", "from-blue-400 to-blue-600", 1, _CUSTOM),
            _col("rfi_draft", "Draft Response", "from-purple-400 to-purple-600", 2, _STATUS, "draft"),
            _col("rfi_review", "Internal Review", "from-amber-400 to-amber-600", 3, _STATUS, "in_progress"),
            _terminal("submitted", "Submitted", "from-indigo-500 to-indigo-700", 4, "submitted"),
            _terminal("archived", "Archived", "from-gray-500 to-gray-700", 5, "archived"),
        ),
    },
    BoardType.SBIR: {
        "board_name": "SBIR/STTR Board",
        "applies_to_proposal_types": [ProposalType.SBIR],
        "columns": (
            _col("sbir_concept", "Concept Development", "from-purple-400 to-purple-600", 0, _CUSTOM),
            _col("sbir_research", "Research Plan", "from-blue-400 to-blue-600", 1, _CUSTOM),
            _col("sbir_tech", "Technical Approach", "from-cyan-400 to-cyan-600", 2, _CUSTOM),
            _col("sbir_commercial", "Commercialization", "from-green-400 to-green-600", 3, _CUSTOM),
            _col("sbir_budget", "Budget Build", "from-amber-400 to-amber-600", 4, _CUSTOM),
            _col("sbir_final", "Final Review", "from-orange-400 to-orange-600", 5, _CUSTOM),
            _terminal("submitted", "Submitted", "from-indigo-500 to-indigo-700", 6, "submitted"),
            _terminal("won", "Awarded", "from-green-500 to-green-700", 7, "won"),
            _terminal("lost", "Not Selected", "from-red-500 to-red-700", 8, "lost"),
        ),
    },
    BoardType.GSA: {
        "board_name": "GSA Schedule Board",
        "applies_to_proposal_types": [ProposalType.GSA],
        "columns": (
            _col("gsa_prep", "Preparation", "from-blue-400 to-blue-600", 0, _CUSTOM),
            _col("gsa_pricing", "Pricing Matrix", "from-green-400 to-green-600", 1, _CUSTOM),
            _col("gsa_compliance", "Compliance Check", "from-amber-400 to-amber-600", 2, _CUSTOM),
            _col("gsa_docs", "Documentation", "from-purple-400 to-purple-600", 3, _CUSTOM),
            _terminal("submitted", "Submitted", "from-indigo-500 to-indigo-700", 4, "submitted"),
            _terminal("won", "Approved", "from-green-500 to-green-700", 5, "won"),
            _terminal("archived", "Archived", "from-gray-500 to-gray-700", 6, "archived"),
        ),
    },
    BoardType.IDIQ: {
        "board_name": "IDIQ/BPA Board",
        "applies_to_proposal_types": [ProposalType.IDIQ],
        "columns": (
            _col("idiq_qualify", "Qualification", "from-slate-400 to-slate-600", 0, _CUSTOM),
            _col("idiq_capability", "Capability Statement", "from-blue-400 to-blue-600", 1, _CUSTOM),
            _col("idiq_pricing", "Pricing Strategy", "from-green-400 to-green-600", 2, _CUSTOM),
            _col("idiq_past_perf", "Past Performance", "from-purple-400 to-purple-600", 3, _CUSTOM),
            _col("idiq_final", "Final Package", "from-amber-400 to-amber-600", 4, _CUSTOM),
            _terminal("submitted", "Submitted", "from-indigo-500 to-indigo-700", 5, "submitted"),
            _terminal("won", "Awarded", "from-green-500 to-green-700", 6, "won"),
            _terminal("archived", "Archived", "from-gray-500 to-gray-700", 7, "archived"),
        ),
    },
    BoardType.STATE_LOCAL: {
        "board_name": "State/Local Board",
        "applies_to_proposal_types": [ProposalType.STATE_LOCAL],
        "columns": (
            _col("sl_new", "New Opportunity", "from-slate-400 to-slate-600", 0, _STATUS, "evaluating"),
            _col("sl_prep", "Prep & Research", "from-blue-400 to-blue-600", 1, _CUSTOM),
            _col("sl_draft", "Draft Proposal", "from-purple-400 to-purple-600", 2, _STATUS, "draft"),
            _col("sl_review", "Review", "from-amber-400 to-amber-600", 3, _STATUS, "in_progress"),
            _terminal("submitted", "Submitted", "from-indigo-500 to-indigo-700", 4, "submitted"),
            _terminal("won", "Won", "from-green-500 to-green-700", 5, "won"),
            _terminal("lost", "Lost", "from-red-500 to-red-700", 6, "lost"),
        ),
    },
    BoardType.RFP_15_COLUMN: {
        "board_name": "RFP Workflow (15-Column)",
        "applies_to_proposal_types": [ProposalType.RFP],
        "columns": RFP_15_COLUMN_COLUMNS,
    },
}

TEMPLATE_BOARD_TYPES: tuple[str, ...] = tuple(t.value for t in BOARD_TEMPLATES)
