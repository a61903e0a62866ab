"""SQLAlchemy ORM models - import all to register with Base.metadata."""

from govflow.db.models.organization import OrganizationRow
from govflow.db.models.proposal import ProposalRow
from govflow.db.models.board_config import BoardConfigRow
from govflow.db.models.workflow_template import WorkflowTemplateRow

__all__ = [
    "OrganizationRow",
    "ProposalRow",
    "BoardConfigRow",
    "WorkflowTemplateRow",
]
