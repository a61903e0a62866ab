"""String enums for board, column and proposal vocabularies."""

from enum import StrEnum


class ColumnType(StrEnum):
    LOCKED_PHASE = "locked_phase"
    DEFAULT_STATUS = "default_status"
    CUSTOM_STAGE = "custom_stage"


class ChecklistItemType(StrEnum):
    MODAL_TRIGGER = "modal_trigger"
    MANUAL_CHECK = "manual_check"
    AI_TRIGGER = "ai_trigger"
    NAVIGATE = "navigate"
    SYSTEM_CHECK = "system_check"


class ProposalStatus(StrEnum):
    """Legacy proposal status values still present in stored data."""

    EVALUATING = "evaluating"
    WATCH_LIST = "watch_list"
    DRAFT = "draft"
    IN_PROGRESS = "in_progress"
    CLIENT_REVIEW = "client_review"
    SUBMITTED = "submitted"
    WON = "won"
    LOST = "lost"
    ARCHIVED = "archived"
    CLIENT_ACCEPTED = "client_accepted"
    CLIENT_REJECTED = "client_rejected"


class ProposalPhase(StrEnum):
    """Legacy gated phase values."""

    PHASE1 = "phase1"
    PHASE2 = "phase2"
    PHASE3 = "phase3"
    PHASE4 = "phase4"
    PHASE5 = "phase5"
    PHASE6 = "phase6"
    PHASE7 = "phase7"
    PHASE8 = "phase8"
    COMPLETED = "completed"


class ProposalType(StrEnum):
    RFP = "RFP"
    RFI = "RFI"
    SBIR = "SBIR"
    GSA = "GSA"
    IDIQ = "IDIQ"
    STATE_LOCAL = "STATE_LOCAL"
    OTHER = "OTHER"


class BoardType(StrEnum):
    MASTER = "master"
    RFP = "rfp"
    RFI = "rfi"
    SBIR = "sbir"
    GSA = "gsa"
    IDIQ = "idiq"
    STATE_LOCAL = "state_local"
    RFP_15_COLUMN = "rfp_15_column"


class ApproverRole(StrEnum):
    ORGANIZATION_OWNER = "organization_owner"
    PROPOSAL_MANAGER = "proposal_manager"
